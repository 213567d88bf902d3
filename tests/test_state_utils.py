"""
Tests for the ADM1 component-dictionary bridge.
"""

import pytest
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.exceptions import ParseError
from core.state import ADM1StateVariables
from utils.state_utils import state_from_adm1_dict, state_to_adm1_dict

# Primary sludge-like ADM1 state
ADM1_STATE = {
    'S_su': 0.012, 'S_aa': 0.005, 'S_fa': 0.099, 'S_va': 0.012,
    'S_bu': 0.013, 'S_pro': 0.016, 'S_ac': 0.2, 'S_h2': 2.5e-7,
    'S_ch4': 0.055, 'S_IC': 0.04, 'S_IN': 0.01, 'S_I': 0.02,
    'X_c': 2.0, 'X_ch': 5.0, 'X_pr': 20.0, 'X_li': 5.0,
    'X_su': 0.42, 'X_aa': 1.18, 'X_fa': 0.24, 'X_c4': 0.43,
    'X_pro': 0.14, 'X_ac': 0.76, 'X_h2': 0.32, 'X_I': 25.6,
    'S_cat': 0.04, 'S_an': 0.02,
}


def test_dict_to_state_and_back():
    state, warnings = state_from_adm1_dict(ADM1_STATE)

    assert warnings == []
    assert state.X_xc == 2.0
    assert state.S_an == 0.02
    assert state.Q_D == 0.0
    assert state_to_adm1_dict(state) == ADM1_STATE


def test_annotated_values_are_unwrapped():
    annotated = {k: [v, "kg/m3", "note"] for k, v in ADM1_STATE.items()}
    state, _ = state_from_adm1_dict(annotated)
    assert state.X_I == 25.6


def test_missing_and_unknown_components_warn():
    data = dict(ADM1_STATE)
    del data['S_h2']
    data['S_SO4'] = 0.1

    state, warnings = state_from_adm1_dict(data)

    assert state.S_h2 == 0.0
    assert any("S_h2 missing" in w for w in warnings)
    assert any("S_SO4" in w for w in warnings)


def test_existing_operational_fields_are_kept():
    state = ADM1StateVariables(Q_D=178.0, T_D=35.0, ph=7.2)
    state_from_adm1_dict(ADM1_STATE, state=state)
    assert state.Q_D == 178.0
    assert state.ph == 7.2
    assert state.S_ac == 0.2


def test_non_numeric_component_raises():
    data = dict(ADM1_STATE, S_ac="high")
    with pytest.raises(ParseError):
        state_from_adm1_dict(data)


def test_failed_conversion_leaves_state_untouched():
    state = ADM1StateVariables(S_su=9.0, S_aa=9.0, S_ac=9.0, X_I=9.0)

    with pytest.raises(ParseError):
        state_from_adm1_dict({'S_su': 1.0, 'S_ac': 2.0, 'X_I': "bad"}, state=state)

    assert state.S_su == 9.0
    assert state.S_aa == 9.0
    assert state.S_ac == 9.0
    assert state.X_I == 9.0
