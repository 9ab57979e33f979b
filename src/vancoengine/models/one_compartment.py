# src/vancoengine/models/one_compartment.py
import numpy as np

from ..pk import infusion_scale


def concentration_time_series(dose, tau, k, vd, infusion_h, time_points):
    """
    Concentration (mg/L) at each time point for a dose repeated every tau hours,
    first dose starting at t=0.

    Superposition of every dose given up to t:
      during its infusion  : C0 * (1 - e^(-k s))
      after the infusion   : C0 * (1 - e^(-k t_inf)) * e^(-k (s - t_inf))
    where s is the time since that dose started and C0 = dose / (Vd k t_inf).

    Parameters:
      dose        : mg per administration
      tau         : dosing interval (h)
      k           : elimination rate constant (1/h)
      vd          : volume of distribution (L)
      infusion_h  : infusion duration (h)
      time_points : sequence of query times (h), need not be sorted
    """
    if not (tau > 0):
        raise ValueError(f"tau must be > 0 (got {tau}).")
    c0 = infusion_scale(dose, vd, k, infusion_h)

    t = np.asarray(time_points, dtype=float)
    C = np.zeros_like(t)
    if t.size == 0:
        return C

    n_doses = int(np.floor(max(float(np.max(t)), 0.0) / tau))
    end_of_infusion = c0 * (1.0 - np.exp(-k * infusion_h))
    for i in range(n_doses + 1):
        s = t - i * tau
        infusing = (s >= 0) & (s <= infusion_h)
        decaying = s > infusion_h
        C[infusing] += c0 * (1.0 - np.exp(-k * s[infusing]))
        C[decaying] += end_of_infusion * np.exp(-k * (s[decaying] - infusion_h))
    return C


def one_compartment_infusion(t, y, k, rate_mg_per_h):
    """
    One central compartment with first-order elimination and a zero-order input.
      y[0] = drug in central compartment (mg)

    Parameters:
      t             : current time (h)
      y             : current state vector [A_central]
      k             : elimination rate constant (1/h)
      rate_mg_per_h : infusion rate currently running (0 between infusions)
    """
    A_c = y[0]
    dA_c_dt = rate_mg_per_h - k * A_c
    return [dA_c_dt]
