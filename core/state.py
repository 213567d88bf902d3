"""
ADM1 state variables for initial conditions, influent and effluent.

One ``ADM1StateVariables`` instance holds the 42 named scalars of a single
simulation step or persisted snapshot. The integrator mutates it in place;
loading a snapshot populates it through ``set_var``.
"""

from typing import Any, Dict, Sequence

import numpy as np

from core.models import StateSnapshot
from core.schema import STATE_FIELDS, map_values
from core.utils import coerce_to_dict

# Alternate public names that share storage with a canonical field
STATE_ALIASES: Dict[str, str] = {
    "Q_gas": "gas_ch4",
    "P_ch4": "gas_vol",
}


class ADM1StateVariables:
    """Dynamic state variables of the ADM1 digester model."""

    def __init__(self, **values: float):
        self.reset()
        given = {}
        for name, value in values.items():
            canonical = STATE_ALIASES.get(name, name)
            if canonical not in STATE_FIELDS:
                raise TypeError(f"Unknown ADM1 state variable: {name}")
            value = float(value)
            if canonical in given and given[canonical] != value:
                raise ValueError(
                    f"Conflicting values for {canonical} given through alias {name}"
                )
            given[canonical] = value
        for name, value in given.items():
            setattr(self, name, value)

    # Biogas flow and gas volume are also exposed under their output names
    @property
    def Q_gas(self) -> float:
        return self.gas_ch4

    @Q_gas.setter
    def Q_gas(self, value: float):
        self.gas_ch4 = value

    @property
    def P_ch4(self) -> float:
        return self.gas_vol

    @P_ch4.setter
    def P_ch4(self, value: float):
        self.gas_vol = value

    def reset(self):
        """Set every state variable to 0.0."""
        for name in STATE_FIELDS:
            setattr(self, name, 0.0)

    def to_array(self) -> np.ndarray:
        """Return all 42 variables in canonical order."""
        return np.array([getattr(self, name) for name in STATE_FIELDS], dtype=np.float64)

    # Name used by integrator callers
    get_var = to_array

    def set_var(self, values: Sequence[float]) -> "ADM1StateVariables":
        """
        Populate this instance from a flat array.

        The layout (legacy or extended) is chosen from the array length;
        fields the layout does not carry are set to 0.0.

        Raises:
            SchemaError: if fewer than 26 values are given.
        """
        for name, value in map_values(values).items():
            setattr(self, name, value)
        return self

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "ADM1StateVariables":
        """Create a new instance from a flat array (see ``set_var``)."""
        return cls().set_var(values)

    def to_dict(self) -> Dict[str, float]:
        """Convert state to a dictionary keyed by canonical name."""
        return {name: float(getattr(self, name)) for name in STATE_FIELDS}

    @classmethod
    def from_dict(cls, data: Any) -> "ADM1StateVariables":
        """
        Build a state from a dictionary, JSON string or StateSnapshot.

        Alias names are accepted; missing variables default to 0.0.
        Unknown names raise a pydantic ValidationError.
        """
        raw = coerce_to_dict(data)
        if raw is None:
            raise TypeError(f"Cannot build ADM1 state from {type(data).__name__}")

        values = {}
        for key, value in raw.items():
            canonical = STATE_ALIASES.get(key, key)
            if canonical in values and values[canonical] != value:
                raise ValueError(
                    f"Conflicting values for {canonical} given through alias {key}"
                )
            values[canonical] = value

        snapshot = StateSnapshot(**values)
        return cls(**snapshot.model_dump())

    def to_snapshot(self) -> StateSnapshot:
        return StateSnapshot(**self.to_dict())

    def copy(self) -> "ADM1StateVariables":
        return type(self)(**self.to_dict())

    def read_var(self, filename) -> "ADM1StateVariables":
        """Populate this instance from the first line of a snapshot file."""
        from core.persistence import load_state
        return load_state(filename, state=self)

    def write_var(self, filename, append: bool = True):
        """Write this instance as one 42-value line to a snapshot file."""
        from core.persistence import save_state
        save_state(self, filename, append=append)

    def __eq__(self, other):
        if not isinstance(other, ADM1StateVariables):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in STATE_FIELDS)

    __hash__ = None

    def __repr__(self):
        nonzero = ", ".join(
            f"{name}={getattr(self, name)!r}"
            for name in STATE_FIELDS
            if getattr(self, name) != 0.0
        )
        return f"{type(self).__name__}({nonzero})"


def to_array(state: ADM1StateVariables) -> np.ndarray:
    """Flatten ``state`` into the 42-value canonical array."""
    return state.to_array()


def from_array(values: Sequence[float]) -> ADM1StateVariables:
    """Build a state from a legacy or extended flat array."""
    return ADM1StateVariables.from_array(values)
