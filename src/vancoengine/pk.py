# src/vancoengine/pk.py
"""
One-compartment, intermittent-infusion vancomycin equations.

All functions are pure. Units: dose mg, volume L, time h, concentration
mg/L (== mcg/mL), AUC mg*h/L.
"""
import math

from .types import PKParameters
from .errors import DomainError
from .config import V_FACTOR_L_PER_KG, CL_SLOPE_L_PER_H, CL_REF_CRCL_ML_MIN, MIN_K_TINF


def volume_of_distribution(weight_kg: float) -> float:
    """Vd (L) = 0.51 L/kg x dosing weight."""
    return V_FACTOR_L_PER_KG * weight_kg


def clearance(crcl: float) -> float:
    """Vancomycin clearance (L/h) from creatinine clearance (mL/min)."""
    return CL_SLOPE_L_PER_H * crcl / CL_REF_CRCL_ML_MIN


def elimination_rate(cl_vanc: float, vd: float) -> float:
    """k (1/h) = Cl / Vd."""
    if not (vd > 0):
        raise DomainError(f"vd must be > 0 (got {vd}).")
    return cl_vanc / vd


def pk_parameters(weight_kg: float, crcl: float) -> PKParameters:
    vd = volume_of_distribution(weight_kg)
    cl = clearance(crcl)
    return PKParameters(vd_l=vd, cl_l_per_h=cl, k_per_h=elimination_rate(cl, vd))


def infusion_scale(dose: float, vd: float, k: float, infusion_h: float) -> float:
    """
    dose / (Vd * k * t_inf): the plateau the infusion approaches, used by both
    the steady-state peak and the concentration curve.

    Raises DomainError when the product Vd * k * t_inf is not safely positive.
    """
    if not (vd > 0):
        raise DomainError(f"vd must be > 0 (got {vd}).")
    if not (infusion_h > 0):
        raise DomainError(f"infusion_h must be > 0 (got {infusion_h}).")
    if not (k > 0) or k * infusion_h < MIN_K_TINF:
        raise DomainError(
            f"k * infusion_h must be > {MIN_K_TINF:g} (got k={k}, infusion_h={infusion_h}); "
            "elimination is too slow for the infusion model."
        )
    return dose / (vd * k * infusion_h)


def steady_state_peak(dose: float, vd: float, k: float, infusion_h: float) -> float:
    """
    Cmax = dose * (1 - e^(-k t_inf)) / (Vd k t_inf (1 - e^(-k t_inf))).

    The (1 - e^(-k t_inf)) factor cancels, so this evaluates dose / (Vd k t_inf)
    directly instead of dividing two quantities that both vanish as k -> 0.
    """
    return infusion_scale(dose, vd, k, infusion_h)


def steady_state_trough(peak: float, k: float, tau: float, infusion_h: float) -> float:
    """
    Cmin = peak * e^(-k (tau - t_inf)).

    Assumes the peak occurs exactly at the end of the infusion and decays
    mono-exponentially until the next dose.
    """
    if tau < infusion_h:
        raise DomainError(f"tau must be >= infusion_h (got tau={tau}, infusion_h={infusion_h}).")
    return peak * math.exp(-k * (tau - infusion_h))


def auc_per_dosing_interval(peak: float, trough: float, tau: float, infusion_h: float) -> float:
    """
    AUC24 from a steady-state peak and trough.

    Linear trapezoid over the infusion plus logarithmic trapezoid over the
    elimination phase, for one interval, scaled by 24 / tau. When peak and
    trough coincide the log term is 0/0; the interval then falls back to a
    single linear trapezoid over tau.
    """
    if not (tau > 0):
        raise DomainError(f"tau must be > 0 (got {tau}).")
    if not (peak > 0) or not (trough > 0):
        raise DomainError(
            f"peak and trough must both be > 0 for the log trapezoid (got peak={peak}, trough={trough})."
        )

    if math.isclose(peak, trough, rel_tol=1e-12):
        auc_tau = ((peak + trough) / 2) * tau
    else:
        lin_trap = ((peak + trough) / 2) * infusion_h
        log_trap = ((peak - trough) * (tau - infusion_h)) / math.log(peak / trough)
        auc_tau = lin_trap + log_trap

    return (auc_tau * 24) / tau
