# src/vancoengine/simulate.py
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from .types import PatientCovariates, BodyMetrics, PKParameters, DoseCandidate, Recommendation
from .errors import RenalFunctionError
from .config import DEFAULT_INFUSION_H, DEFAULT_TIME_POINTS, SAFETY_LIMITS, Frequency
from .patient import PatientMetrics
from .pk import pk_parameters
from .dosing import recommend_doses, evaluate_regimen, suggested_dose
from .safety import RenalStatus, renal_status, dose_limit_warnings
from .models.one_compartment import concentration_time_series

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecommendationResult:
    """
    Body metrics, the dose menu and any renal warnings for one patient, plus
    the selected regimen and its curve (None when nothing was selected).
    """
    body: BodyMetrics
    recommendation: Recommendation
    warnings: list[str] = field(default_factory=list)
    selected: Optional[DoseCandidate] = None
    t: Optional[np.ndarray] = None
    C: Optional[np.ndarray] = None


@dataclass(frozen=True)
class RegimenResult:
    """Levels for an explicit regimen plus its concentration-time curve."""
    body: BodyMetrics
    params: PKParameters
    candidate: DoseCandidate
    t: np.ndarray
    C: np.ndarray
    warnings: list[str] = field(default_factory=list)


def assess_patient(cov: PatientCovariates) -> BodyMetrics:
    """High-level wrapper: covariates -> IBW, AdjBW, CrCl, BSA."""
    return PatientMetrics(cov).metrics()


def run_recommendation(cov: PatientCovariates, frequency: int = Frequency.Q12H,
                       dose_mg: Optional[float] = None,
                       infusion_h: float = DEFAULT_INFUSION_H,
                       time_points: Sequence[float] = DEFAULT_TIME_POINTS) -> RecommendationResult:
    """
    Dose menu for a patient at the given frequency, on adjusted body weight,
    and the concentration curve of the selected regimen.

    The selected regimen is the first candidate in the suggested AUC24 band,
    or dose_mg over infusion_h every `frequency` hours when dose_mg is given.
    With no suggestion and no override, selected/t/C are None.

    Raises RenalFunctionError when CrCl is below the critical threshold;
    a CrCl below the warning threshold is reported in `warnings`.
    """
    body = assess_patient(cov)
    warnings = _renal_warnings(body.crcl_ml_min)

    rec = recommend_doses(body.adjbw_kg, body.crcl_ml_min, frequency)
    logger.info("Recommended q%dh menu: AdjBW %.1f kg, CrCl %.1f mL/min, k %.4f /h",
                rec.frequency, body.adjbw_kg, body.crcl_ml_min, rec.k)

    if dose_mg is not None:
        warnings.extend(dose_limit_warnings(dose_mg))
        selected = evaluate_regimen(body.adjbw_kg, body.crcl_ml_min, dose_mg,
                                    rec.frequency, infusion_h)
    else:
        selected = suggested_dose(rec.candidates)
    if selected is None:
        logger.info("No q%dh candidate in the suggested AUC24 band", rec.frequency)
        return RecommendationResult(body=body, recommendation=rec, warnings=warnings)

    params = PKParameters(vd_l=rec.vd, cl_l_per_h=rec.cl_vanc, k_per_h=rec.k)
    t, C = concentration_curve(selected.dose_mg, selected.tau_h, params,
                               selected.infusion_h, time_points)
    return RecommendationResult(body=body, recommendation=rec, warnings=warnings,
                                selected=selected, t=t, C=C)


def run_regimen(cov: PatientCovariates, dose_mg: float, tau_h: float,
                infusion_h: float = DEFAULT_INFUSION_H,
                time_points: Sequence[float] = DEFAULT_TIME_POINTS) -> RegimenResult:
    """
    Levels and curve for an explicitly chosen dose, interval and infusion time.
    Same renal gate as run_recommendation; dose limits add warnings.
    """
    body = assess_patient(cov)
    warnings = _renal_warnings(body.crcl_ml_min)
    warnings.extend(dose_limit_warnings(dose_mg))

    params = pk_parameters(body.adjbw_kg, body.crcl_ml_min)
    candidate = evaluate_regimen(body.adjbw_kg, body.crcl_ml_min, dose_mg, tau_h, infusion_h)
    t, C = concentration_curve(dose_mg, tau_h, params, infusion_h, time_points)
    logger.info("Regimen %g mg q%gh over %g h: AUC24 %.0f, peak %.1f, trough %.1f",
                dose_mg, tau_h, infusion_h, candidate.auc24, candidate.peak, candidate.trough)
    return RegimenResult(body=body, params=params, candidate=candidate, t=t, C=C, warnings=warnings)


def concentration_curve(dose_mg: float, tau_h: float, params: PKParameters,
                        infusion_h: float = DEFAULT_INFUSION_H,
                        time_points: Sequence[float] = DEFAULT_TIME_POINTS):
    """
    Returns:
      t : array of time points (hours)
      C : array of concentrations (mg/L)
    """
    t = np.asarray(time_points, dtype=float)
    C = concentration_time_series(dose_mg, tau_h, params.k_per_h, params.vd_l, infusion_h, t)
    return t, C


def _renal_warnings(crcl: float) -> list[str]:
    status = renal_status(crcl)
    lim = SAFETY_LIMITS["crcl"]
    if status is RenalStatus.CRITICAL:
        logger.warning("Dosing blocked: CrCl %.1f mL/min < %s", crcl, lim["critical"])
        raise RenalFunctionError(crcl, lim["critical"])
    if status is RenalStatus.WARNING:
        logger.warning("CrCl %.1f mL/min < %s: dose reduction required", crcl, lim["warning"])
        return [f"CrCl < {lim['warning']} mL/min. Dose reduction required."]
    return []
