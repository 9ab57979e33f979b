# src/vancoengine/dosing.py
from __future__ import annotations

import logging
from typing import Optional, Sequence

from .types import DoseCandidate, Recommendation
from .config import (
    Frequency, DEFAULT_INFUSION_H, DOSE_ROUNDING_MG,
    AUC_ACCEPTABLE, AUC_SUGGESTED,
)
from .helpers import round_to_increment
from .pk import (
    pk_parameters, steady_state_peak, steady_state_trough, auc_per_dosing_interval,
)

logger = logging.getLogger(__name__)


def practical_dose(mg_per_kg: float, weight_kg: float) -> float:
    """mg/kg x weight rounded to the nearest 100 mg."""
    return round_to_increment(mg_per_kg * weight_kg, DOSE_ROUNDING_MG)


def predict_candidate(dose_mg: float, weight_kg: float, vd: float, k: float,
                      tau_h: float, infusion_h: float = DEFAULT_INFUSION_H,
                      mg_per_kg: Optional[float] = None) -> DoseCandidate:
    """
    Steady-state peak, trough and AUC24 for one dose.
    mg_per_kg defaults to dose_mg / weight_kg (the explicit-dose path).
    """
    peak = steady_state_peak(dose_mg, vd, k, infusion_h)
    trough = steady_state_trough(peak, k, tau_h, infusion_h)
    auc24 = auc_per_dosing_interval(peak, trough, tau_h, infusion_h)
    if mg_per_kg is None:
        mg_per_kg = dose_mg / weight_kg
    return DoseCandidate(dose_mg=dose_mg, mg_per_kg=mg_per_kg, peak=peak, trough=trough,
                         auc24=auc24, tau_h=float(tau_h), infusion_h=float(infusion_h))


def recommend_doses(weight_kg: float, crcl: float, frequency: int = Frequency.Q12H) -> Recommendation:
    """
    Evaluate the frequency's mg/kg menu for a patient.

    weight_kg : dosing (adjusted) body weight
    crcl      : creatinine clearance, mL/min
    frequency : 12, 24 or 48 (h)

    Every menu entry produces a candidate, in ascending mg/kg order; picking one
    against the AUC24 bands is left to the caller (see suggested_dose).
    """
    _validate_positive("weight_kg", weight_kg)
    freq = _as_frequency(frequency)

    params = pk_parameters(weight_kg, crcl)
    candidates = tuple(
        predict_candidate(practical_dose(mg_per_kg, weight_kg), weight_kg,
                          params.vd_l, params.k_per_h, float(freq),
                          DEFAULT_INFUSION_H, mg_per_kg=mg_per_kg)
        for mg_per_kg in freq.mg_per_kg_menu
    )
    logger.debug("q%dh menu for %.1f kg, CrCl %.1f: %s", int(freq), weight_kg, crcl,
                 [(c.dose_mg, round(c.auc24)) for c in candidates])
    return Recommendation(k=params.k_per_h, vd=params.vd_l, cl_vanc=params.cl_l_per_h,
                          frequency=int(freq), candidates=candidates)


def evaluate_regimen(weight_kg: float, crcl: float, dose_mg: float, tau_h: float,
                     infusion_h: float = DEFAULT_INFUSION_H) -> DoseCandidate:
    """
    Predict levels for an explicit dose / interval / infusion time
    (any interval, not only the menu frequencies).
    """
    _validate_positive("weight_kg", weight_kg)
    _validate_positive("dose_mg", dose_mg)
    _validate_positive("tau_h", tau_h)
    _validate_positive("infusion_h", infusion_h)
    if infusion_h > tau_h:
        raise ValueError(f"infusion_h must be <= tau_h (got {infusion_h} > {tau_h}).")

    params = pk_parameters(weight_kg, crcl)
    return predict_candidate(float(dose_mg), weight_kg, params.vd_l, params.k_per_h,
                             float(tau_h), float(infusion_h))


# --------------------------
# Target-band filters
# --------------------------
def in_band(candidate: DoseCandidate, band: tuple[float, float]) -> bool:
    lo, hi = band
    return lo <= candidate.auc24 <= hi

def acceptable_candidates(candidates: Sequence[DoseCandidate]) -> list[DoseCandidate]:
    """Candidates with AUC24 in 400-600."""
    return [c for c in candidates if in_band(c, AUC_ACCEPTABLE)]

def suggested_candidates(candidates: Sequence[DoseCandidate]) -> list[DoseCandidate]:
    """Candidates with AUC24 in 500-600."""
    return [c for c in candidates if in_band(c, AUC_SUGGESTED)]

def suggested_dose(candidates: Sequence[DoseCandidate]) -> Optional[DoseCandidate]:
    """First candidate (lowest mg/kg) in the suggested band, or None."""
    for c in candidates:
        if in_band(c, AUC_SUGGESTED):
            return c
    return None


def _as_frequency(frequency: int) -> Frequency:
    # Equality, not int(): 12.0 is q12h, 12.5 is nothing
    for f in Frequency:
        if frequency == f:
            return f
    allowed = ", ".join(str(int(f)) for f in Frequency)
    raise ValueError(f"frequency must be one of {allowed} hours (got {frequency}).")


# --------------------------
# Small input validators
# --------------------------
def _validate_positive(name: str, x: float) -> None:
    if not (x > 0):
        raise ValueError(f"{name} must be > 0 (got {x}).")
