import math
import numpy as np
import pytest

from vancoengine.errors import DomainError
from vancoengine.models.one_compartment import concentration_time_series
from vancoengine.solvers import simulate_repeated_infusion
from vancoengine.metrics import interval_peak_trough, interval_auc24
from vancoengine.pk import auc_per_dosing_interval


DOSE, TAU, K, VD, T_INF = 1000.0, 12.0, 0.1, 40.0, 1.0


def test_curve_is_zero_before_first_dose():
    for k, vd, t_inf in [(0.1, 40.0, 1.0), (0.02, 80.0, 2.0), (0.3, 20.0, 0.5)]:
        C = concentration_time_series(DOSE, TAU, k, vd, t_inf, [0.0])
        assert C[0] == 0.0
    C = concentration_time_series(DOSE, TAU, K, VD, T_INF, [-5.0, -0.1])
    assert np.all(C == 0.0)


def test_first_interval_matches_single_dose():
    """
    Within the first interval only dose 0 contributes:
      end of infusion : C0 (1 - e^-k t_inf)
      later           : that value decayed by e^-k (t - t_inf)
    """
    c0 = DOSE / (VD * K * T_INF)
    c_end = c0 * (1 - math.exp(-K * T_INF))
    C = concentration_time_series(DOSE, TAU, K, VD, T_INF, [0.5, 1.0, 6.0])
    assert np.isclose(C[0], c0 * (1 - math.exp(-K * 0.5)))
    assert np.isclose(C[1], c_end)
    assert np.isclose(C[2], c_end * math.exp(-K * 5.0))


def test_superposition_adds_prior_doses():
    single = concentration_time_series(DOSE, 1000.0, K, VD, T_INF, [TAU + 3.0, 3.0])
    repeated = concentration_time_series(DOSE, TAU, K, VD, T_INF, [TAU + 3.0])
    # Dose 0 seen at t = 15 plus dose 1 seen 3 h after its start
    assert np.isclose(repeated[0], single[0] + single[1])


def test_default_grid_shape_and_unsorted_points():
    t = [60.0, 0.0, 30.0]
    C = concentration_time_series(DOSE, TAU, K, VD, T_INF, t)
    C_sorted = concentration_time_series(DOSE, TAU, K, VD, T_INF, sorted(t))
    assert C.shape == (3,)
    assert np.isclose(C[0], C_sorted[2]) and np.isclose(C[2], C_sorted[1])
    assert concentration_time_series(DOSE, TAU, K, VD, T_INF, []).size == 0


def test_curve_guards():
    with pytest.raises(ValueError):
        concentration_time_series(DOSE, 0.0, K, VD, T_INF, [1.0])
    with pytest.raises(DomainError):
        concentration_time_series(DOSE, TAU, 0.0, VD, T_INF, [1.0])


def test_closed_form_matches_ode_solver():
    """
    The superposition closed form and a numerically integrated
    one-compartment infusion ODE must agree over several intervals.
    """
    t, C_ode = simulate_repeated_infusion(DOSE, TAU, K, VD, T_INF, t_end_h=72.0, dt_h=0.5)
    C_cf = concentration_time_series(DOSE, TAU, K, VD, T_INF, t)

    assert t[0] == 0.0 and np.isclose(t[-1], 72.0)
    assert len(t) == len(C_ode) == 145
    assert np.all(C_ode >= 0.0)
    assert np.allclose(C_ode, C_cf, rtol=1e-4, atol=1e-6)


def test_steady_state_auc_equals_dose_over_clearance():
    """At steady state the AUC of one interval is dose / CL."""
    t = np.linspace(0.0, 240.0, 24001)
    C = concentration_time_series(DOSE, TAU, 0.15, VD, T_INF, t)
    cl = 0.15 * VD
    assert np.isclose(interval_auc24(t, C, TAU), DOSE * (24 / TAU) / cl, rtol=1e-3)


def test_trapezoid_auc_agrees_with_sampled_profile():
    """
    Linear-up / log-down AUC24 from the steady-state peak and trough of the
    simulated curve lands within 1% of the numerical AUC.
    """
    t = np.linspace(0.0, 240.0, 24001)
    C = concentration_time_series(DOSE, TAU, 0.15, VD, T_INF, t)
    peak, trough = interval_peak_trough(t, C, TAU, T_INF)

    assert peak > trough > 0
    assert np.isclose(auc_per_dosing_interval(peak, trough, TAU, T_INF),
                      interval_auc24(t, C, TAU), rtol=0.01)


def test_peak_trough_read_from_final_interval():
    """On a 0-48 h grid with q12h dosing the final interval is 36-48 h."""
    t = np.linspace(0.0, 48.0, 97)
    C = concentration_time_series(DOSE, TAU, K, VD, T_INF, t)
    peak, trough = interval_peak_trough(t, C, TAU, T_INF)
    expected = concentration_time_series(DOSE, TAU, K, VD, T_INF, [37.0, 36.0])
    assert np.isclose(peak, expected[0])
    assert np.isclose(trough, expected[1])


def test_interval_readouts_need_a_full_interval():
    t = np.linspace(0.0, 6.0, 13)
    C = concentration_time_series(DOSE, TAU, K, VD, T_INF, t)
    with pytest.raises(ValueError):
        interval_auc24(t, C, TAU)
    with pytest.raises(ValueError):
        interval_peak_trough(t, C, TAU, T_INF)


def test_solver_rejects_bad_schedule():
    with pytest.raises(ValueError):
        simulate_repeated_infusion(DOSE, TAU, K, VD, infusion_h=13.0, t_end_h=24.0)
    with pytest.raises(ValueError):
        simulate_repeated_infusion(DOSE, 0.0, K, VD, infusion_h=1.0, t_end_h=24.0)
