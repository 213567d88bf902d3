"""
Layout detection for flat ADM1 state vectors.

Persisted snapshots carry no version tag. The layout of a row is inferred
from its length alone:

- 42 or more values: extended layout, every canonical field is present.
- 28 to 41 values: legacy layout with digester flow and temperature.
- 26 or 27 values: legacy layout with the component concentrations only.
- fewer than 26 values: rejected with SchemaError.

A legacy row carries the 26 component concentrations followed by flow and
temperature. Those two sit further back in the extended order, so the legacy
layout names its positions explicitly; every field it does not name is
zero-filled. New layouts must extend this length dispatch; old snapshots stay
readable only as long as these thresholds do not move.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple, Union

from core.exceptions import SchemaError

logger = logging.getLogger(__name__)

# Canonical order of the 42 state variables. Positions are load-bearing:
# persisted rows are written and read in exactly this order.
STATE_FIELDS: Tuple[str, ...] = (
    # Soluble components (kg COD/m3, S_IC/S_IN in kmol/m3)
    "S_su", "S_aa", "S_fa", "S_va", "S_bu", "S_pro", "S_ac",
    "S_h2", "S_ch4", "S_IC", "S_IN", "S_I",
    # Particulate components and biomass (kg COD/m3)
    "X_xc", "X_ch", "X_pr", "X_li", "X_su", "X_aa", "X_fa",
    "X_c4", "X_pro", "X_ac", "X_h2", "X_I",
    # Cations and anions (kmol/m3)
    "S_cat", "S_an",
    # Ionic speciation
    "S_hva", "S_hbu", "S_hpro", "S_hac", "S_hco3", "S_nh3",
    # Gas phase
    "S_gas_h2", "S_gas_ch4", "S_gas_co2",
    # Digester flow (m3/d) and temperature (degC)
    "Q_D", "T_D",
    # Gas outputs
    "gas_ch4", "gas_vol",
    # Post-processed diagnostics
    "ph", "S_co2", "S_nh4",
)

LEGACY_MIN_WIDTH = 26
LEGACY_FULL_WIDTH = 28
EXTENDED_WIDTH = len(STATE_FIELDS)

# Field fed by each position of a legacy row
LEGACY_FIELDS: Tuple[str, ...] = STATE_FIELDS[:LEGACY_MIN_WIDTH] + ("Q_D", "T_D")


@dataclass(frozen=True)
class LegacyLayout:
    """Layout written by the earlier reference implementation (26 or 28 values)."""

    width: int = LEGACY_FULL_WIDTH

    @property
    def fields(self) -> Tuple[str, ...]:
        return LEGACY_FIELDS[:self.width]

    @property
    def zero_filled(self) -> Tuple[str, ...]:
        mapped = set(self.fields)
        return tuple(name for name in STATE_FIELDS if name not in mapped)


@dataclass(frozen=True)
class ExtendedLayout:
    """Full 42-value layout including speciation and gas diagnostics."""

    width: int = EXTENDED_WIDTH

    @property
    def fields(self) -> Tuple[str, ...]:
        return STATE_FIELDS

    @property
    def zero_filled(self) -> Tuple[str, ...]:
        return ()


StateLayout = Union[LegacyLayout, ExtendedLayout]


def detect_layout(length: int) -> StateLayout:
    """
    Pick the layout for a row of ``length`` values.

    Raises:
        SchemaError: if the row is shorter than the legacy minimum.
    """
    if length >= EXTENDED_WIDTH:
        return ExtendedLayout()
    if length >= LEGACY_FULL_WIDTH:
        return LegacyLayout(LEGACY_FULL_WIDTH)
    if length >= LEGACY_MIN_WIDTH:
        return LegacyLayout(LEGACY_MIN_WIDTH)
    raise SchemaError(length, LEGACY_MIN_WIDTH)


def map_values(values: Sequence[float]) -> Dict[str, float]:
    """
    Map a flat row onto all canonical field names.

    Fields not covered by the detected layout are set to exactly 0.0.
    """
    length = len(values)
    layout = detect_layout(length)

    if length > layout.width:
        if isinstance(layout, ExtendedLayout):
            logger.warning(
                f"Ignoring {length - layout.width} trailing values beyond the "
                f"{layout.width}-value extended layout"
            )
        else:
            logger.warning(
                f"Row of {length} values read as {layout.width}-value legacy layout; "
                f"positions {layout.width}..{length - 1} are ignored"
            )

    mapped = dict.fromkeys(STATE_FIELDS, 0.0)
    for position, name in enumerate(layout.fields):
        mapped[name] = float(values[position])

    if layout.zero_filled:
        logger.info(
            f"Legacy state vector ({length} values): "
            f"zero-filled {len(layout.zero_filled)} extended fields"
        )
    return mapped
