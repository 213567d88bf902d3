# -*- coding: utf-8 -*-
"""
Bridge between ADM1StateVariables and ADM1 component dictionaries.

Simulation front-ends describe a digester state as a dict of the 26 ADM1
component concentrations (``S_su`` ... ``X_c`` ... ``S_an``), where values are
either plain numbers or annotated ``[value, unit, explanation]`` lists.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from core.exceptions import ParseError
from core.schema import LEGACY_MIN_WIDTH, STATE_FIELDS
from core.state import ADM1StateVariables
from core.utils import to_float

logger = logging.getLogger(__name__)

# Component dictionaries call composites X_c rather than X_xc
ADM1_COMPONENT_NAMES = {
    name: ("X_c" if name == "X_xc" else name)
    for name in STATE_FIELDS[:LEGACY_MIN_WIDTH]
}


def state_to_adm1_dict(state: ADM1StateVariables) -> Dict[str, float]:
    """Extract the 26 ADM1 component concentrations."""
    return {
        component: float(getattr(state, field))
        for field, component in ADM1_COMPONENT_NAMES.items()
    }


def state_from_adm1_dict(
    adm1_state: Dict[str, Any],
    state: Optional[ADM1StateVariables] = None,
) -> Tuple[ADM1StateVariables, List[str]]:
    """
    Fill the component concentrations of a state from an ADM1 dict.

    Only the 26 components are touched; flow, temperature and the extended
    fields of an existing ``state`` are left as they are.

    Returns:
        (state, warnings) where warnings list missing and unrecognised keys

    Raises:
        ParseError: if a component value is not numeric
    """
    warnings = []
    parsed = {}

    for index, (field, component) in enumerate(ADM1_COMPONENT_NAMES.items()):
        if component in adm1_state:
            raw = adm1_state[component]
        elif field in adm1_state:
            raw = adm1_state[field]
        else:
            parsed[field] = 0.0
            warnings.append(f"{component} missing, using default 0.0")
            continue

        if isinstance(raw, (list, tuple)):
            raw = raw[0] if raw else None
        value = to_float(raw)
        if value is None:
            raise ParseError(str(raw), index)
        parsed[field] = value

    known = set(ADM1_COMPONENT_NAMES) | set(ADM1_COMPONENT_NAMES.values())
    for key in adm1_state:
        if key not in known:
            warnings.append(f"{key} is not an ADM1 state component, ignored")

    if state is None:
        state = ADM1StateVariables()
    for field, value in parsed.items():
        setattr(state, field, value)

    if warnings:
        logger.info(f"ADM1 state conversion produced {len(warnings)} warnings")
    return state, warnings
