# src/vancoengine/solvers.py
import numpy as np
from scipy.integrate import solve_ivp

from .models.one_compartment import one_compartment_infusion


def simulate_repeated_infusion(dose: float, tau: float, k: float, vd: float,
                               infusion_h: float, t_end_h: float, dt_h: float = 0.1):
    """
    Numerically integrate a one-compartment model for `dose` infused over
    `infusion_h` hours every `tau` hours, first dose at t=0.

    The horizon is split at every infusion start and end so the zero-order
    input is constant inside each solve_ivp call.

    Returns:
      t : array of time points (hours), 0..t_end_h every dt_h
      C : array of concentrations (mg/L)
    """
    if not (tau > 0) or not (infusion_h > 0) or not (dt_h > 0):
        raise ValueError(f"tau, infusion_h and dt_h must be > 0 (got {tau}, {infusion_h}, {dt_h}).")
    if infusion_h > tau:
        raise ValueError(f"infusion_h must be <= tau (got {infusion_h} > {tau}).")

    n_steps = int(round(t_end_h / dt_h))
    t_grid = np.linspace(0.0, n_steps * dt_h, n_steps + 1)
    rate = dose / infusion_h

    # Segment boundaries: each dose start and each infusion end
    boundaries: list[float] = [0.0, float(t_end_h)]
    start = 0.0
    while start <= t_end_h:
        boundaries.append(start)
        if start + infusion_h <= t_end_h:
            boundaries.append(start + infusion_h)
        start += tau
    boundaries = sorted(set(boundaries))

    y0 = [0.0]
    t_out: list[float] = [0.0]
    Ac_out: list[float] = [0.0]

    prev = boundaries[0]
    for curr in boundaries[1:]:
        # Infusing if the segment midpoint falls inside [n*tau, n*tau + infusion_h)
        mid = 0.5 * (prev + curr)
        seg_rate = rate if (mid % tau) < infusion_h else 0.0

        t_eval_seg = t_grid[(t_grid > prev) & (t_grid <= curr)]
        sol_seg = solve_ivp(one_compartment_infusion, t_span=(prev, curr), y0=y0,
                            method="RK45", args=(k, seg_rate), dense_output=True,
                            rtol=1e-8, atol=1e-10)
        if t_eval_seg.size:
            t_out.extend(t_eval_seg.tolist())
            Ac_out.extend(sol_seg.sol(t_eval_seg)[0].tolist())

        # Carry the end-of-segment state forward
        y0 = [float(sol_seg.y[0, -1])]
        prev = curr

    t_arr = np.asarray(t_out, dtype=float)
    C = np.asarray(Ac_out, dtype=float) / vd
    C = np.maximum(C, 0.0)
    return t_arr, C
