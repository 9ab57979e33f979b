# src/vancoengine/metrics.py
"""Steady-state readouts from a sampled concentration-time profile."""
import numpy as np
from typing import Tuple


def _final_interval(t: np.ndarray, C: np.ndarray, tau: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Samples of the last complete dosing interval [n*tau, (n+1)*tau] covered by t.
    Raises ValueError if t does not span one full interval.
    """
    n_full = int(np.floor((t[-1] - t[0]) / tau + 1e-9))
    if n_full < 1:
        raise ValueError(f"profile spans less than one interval of {tau} h.")
    end = t[0] + n_full * tau
    keep = (t >= end - tau - 1e-9) & (t <= end + 1e-9)
    return t[keep], C[keep]


def interval_peak_trough(t: np.ndarray, C: np.ndarray, tau: float,
                         infusion_h: float) -> Tuple[float, float]:
    """
    (peak, trough) of the last full interval: the sample nearest the end of
    the infusion and the pre-dose sample that opens the interval.
    """
    tw, Cw = _final_interval(t, C, tau)
    i_peak = int(np.argmin(np.abs(tw - (tw[0] + infusion_h))))
    return float(Cw[i_peak]), float(Cw[0])


def interval_auc24(t: np.ndarray, C: np.ndarray, tau: float) -> float:
    """Trapezoidal AUC of the last full interval, scaled to 24 h (mg*h/L)."""
    tw, Cw = _final_interval(t, C, tau)
    auc_tau = float(np.sum(np.diff(tw) * (Cw[1:] + Cw[:-1]) / 2.0))
    return auc_tau * 24.0 / tau
