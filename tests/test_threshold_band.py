
import numpy as np

from autofuelcell.policy.threshold_band import ThresholdBand, MIN_PERCENT, MAX_PERCENT
from autofuelcell.policy.controller_config import ControllerConfig, OperationMode
from autofuelcell.utils.charge import charge_percent, format_percent


def _assert_valid(band):
    assert MIN_PERCENT <= band.low <= MAX_PERCENT
    assert MIN_PERCENT <= band.high <= MAX_PERCENT
    assert band.high >= band.low + 1


def test_defaults():
    band = ThresholdBand()
    assert band.as_tuple() == (15.0, 85.0)


def test_low_clamps_below_high():
    band = ThresholdBand()
    assert band.set_low(90) == 84.0
    assert band.high == 85.0


def test_high_clamps_above_low():
    band = ThresholdBand(low=50, high=60)
    assert band.set_high(40) == 51.0
    assert band.low == 50.0


def test_bounds_clamped_to_valid_range():
    band = ThresholdBand()
    assert band.set_low(0) == MIN_PERCENT
    assert band.set_high(100) == MAX_PERCENT
    assert band.set_low(-5) == MIN_PERCENT


def test_editing_one_bound_leaves_the_other():
    band = ThresholdBand(low=30, high=70)
    band.set_low(69.5)
    assert band.as_tuple() == (69.0, 70.0)
    band.set_high(10)
    assert band.as_tuple() == (69.0, 70.0)


def test_random_edit_sequences_keep_invariant():
    rng = np.random.default_rng(7)
    band = ThresholdBand()
    for _ in range(2000):
        value = float(rng.uniform(-20, 120))
        if rng.random() < 0.5:
            band.set_low(value)
        else:
            band.set_high(value)
        _assert_valid(band)


def test_restored_values_are_normalized():
    cfg = ControllerConfig.from_dict({'automatic': False, 'thresholds': [80, 20]})
    _assert_valid(cfg.band)
    assert cfg.band.as_tuple() == (80.0, 81.0)
    assert cfg.mode is OperationMode.MANUAL

    cfg = ControllerConfig.from_dict({'thresholds': [5, 95]})
    assert cfg.band.as_tuple() == (15.0, 85.0)
    assert cfg.automatic


def test_config_to_dict_roundtrip_fields():
    cfg = ControllerConfig.from_dict({'automatic': True, 'thresholds': [20, 70]})
    assert cfg.to_dict() == {'automatic': True, 'thresholds': [20.0, 70.0]}


def test_operation_mode_parse():
    assert OperationMode.parse(True) is OperationMode.AUTOMATIC
    assert OperationMode.parse('Manual') is OperationMode.MANUAL
    try:
        OperationMode.parse('turbo')
    except ValueError as e:
        assert 'turbo' in str(e)
    else:
        raise AssertionError("expected ValueError")


def test_charge_percent_undefined_cases():
    assert charge_percent(10, 0) is None
    assert charge_percent(None, 100) is None
    assert charge_percent(10, None) is None
    assert charge_percent(float('nan'), 100) is None
    assert charge_percent(50, 200) == 25.0
    assert format_percent(12.3456) == "12.35%"
    assert format_percent(None) == "--"


def test_non_finite_edits_keep_current_bounds():
    band = ThresholdBand(low=30, high=70)
    assert band.set_high(float('nan')) == 70.0
    assert band.set_low(float('nan')) == 30.0
    assert band.set_low(float('inf')) == 30.0
    assert band.set_high(float('-inf')) == 70.0
    assert band.as_tuple() == (30.0, 70.0)
    _assert_valid(band)


def test_non_finite_restored_pair_falls_back_to_defaults():
    cfg = ControllerConfig.from_dict({'thresholds': [float('nan'), float('nan')]})
    assert cfg.band.as_tuple() == (15.0, 85.0)
    cfg = ControllerConfig.from_dict({'thresholds': [40, float('inf')]})
    assert cfg.band.as_tuple() == (40.0, 85.0)
    _assert_valid(cfg.band)


def test_from_pair():
    assert ThresholdBand.from_pair((20, 60)).as_tuple() == (20.0, 60.0)
