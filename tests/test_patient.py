import pytest

from vancoengine.types import PatientCovariates
from vancoengine.patient import PatientMetrics
from vancoengine.helpers import round_half_up, lb_to_kg, in_to_cm, cm_to_in, umol_l_to_mg_dl


def _pm(sex="male", age=65, height_in=70, weight_kg=80, creatinine=1.0):
    return PatientMetrics(PatientCovariates(sex=sex, age=age, height_in=height_in,
                                            weight_kg=weight_kg, creatinine=creatinine))


def test_male_non_obese_scenario():
    """
    Male, 65 y, 70 in, 80 kg, SCr 1.0:
      IBW = 50 + 2.3 * 10 = 73.0; 80 <= 1.2 * 73 so AdjBW = TBW = 80
      CrCl = 75 * 80 / 72 = 83.33 -> 83.3
    """
    pm = _pm()
    assert pm.ideal_body_weight() == pytest.approx(73.0)
    assert pm.adjusted_body_weight() == 80
    assert pm.creatinine_clearance() == 83.3


def test_female_scenario_applies_085():
    """
    Female, 50 y, 64 in, 60 kg, SCr 0.8:
      IBW = 45.5 + 2.3 * 4 = 54.7; AdjBW = 60
      CrCl = 90 * 60 / 57.6 * 0.85 = 79.6875 -> 79.7
    """
    pm = _pm(sex="female", age=50, height_in=64, weight_kg=60, creatinine=0.8)
    assert pm.ideal_body_weight() == pytest.approx(54.7)
    assert pm.adjusted_body_weight() == 60
    assert pm.creatinine_clearance() == 79.7


def test_obese_patient_uses_adjusted_weight():
    pm = _pm(weight_kg=120)
    # 73 + 0.4 * (120 - 73)
    assert pm.adjusted_body_weight() == pytest.approx(91.8)
    assert pm.creatinine_clearance() == round_half_up(75 * pm.adjusted_body_weight() / 72, 1)


def test_adjbw_threshold_is_strict():
    ibw = _pm().ideal_body_weight()
    at_threshold = _pm(weight_kg=ibw * 1.2)
    assert at_threshold.adjusted_body_weight() == ibw * 1.2

    # Just above the threshold the 0.4 correction kicks in: 1.2*IBW -> ~1.08*IBW
    above = _pm(weight_kg=ibw * 1.2 + 1e-6)
    assert above.adjusted_body_weight() == pytest.approx(1.08 * ibw, rel=1e-6)
    assert above.adjusted_body_weight() < above.covariates.weight_kg


def test_zero_creatinine_gives_zero_crcl():
    for age, weight in [(18, 20), (65, 80), (120, 300)]:
        assert _pm(age=age, weight_kg=weight, creatinine=0).creatinine_clearance() == 0.0
    assert _pm(sex="female", creatinine=0).creatinine_clearance() == 0.0


def test_crcl_non_increasing_in_creatinine():
    values = [_pm(creatinine=0.2 + 0.1 * i).creatinine_clearance() for i in range(149)]
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_metrics_bundle_and_bsa():
    m = _pm().metrics()
    assert m.adjbw_kg == 80
    assert m.crcl_ml_min == 83.3
    # Mosteller: sqrt(177.8 * 80 / 3600)
    assert m.bsa_m2 == pytest.approx(1.9877, abs=1e-3)


def test_round_half_up_and_conversions():
    assert round_half_up(68.05, 1) == 68.1
    assert round_half_up(0.25, 1) == 0.3
    assert round_half_up(2.5) == 3.0
    assert round_half_up(2.4) == 2.0
    assert lb_to_kg(100) == pytest.approx(45.3592)
    assert in_to_cm(70) == pytest.approx(177.8)
    assert cm_to_in(177.8) == pytest.approx(70)
    assert umol_l_to_mg_dl(88.4) == pytest.approx(0.99892)
