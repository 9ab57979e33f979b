# src/vancoengine/safety.py
"""
Boundary checks run by callers before (or after) the engine.

The engine itself never validates covariates; these helpers turn the
configured limits into errors and warnings the presentation layer can show.
"""
from enum import Enum

from .types import PatientCovariates
from .errors import InvalidInputError
from .helpers import in_to_cm
from .config import SAFETY_LIMITS


class RenalStatus(Enum):
    OK = "ok"
    WARNING = "warning"      # dose reduction required
    CRITICAL = "critical"    # dosing blocked


def validate_covariates(cov: PatientCovariates) -> None:
    """
    Raise InvalidInputError listing every covariate outside its plausible range.
    Height limits are in cm; the covariate is in inches.
    """
    problems: list[str] = []
    if cov.sex not in ("male", "female"):
        problems.append(f"sex must be 'male' or 'female' (got {cov.sex!r})")

    checks = (
        ("age", cov.age, "years"),
        ("weight", cov.weight_kg, "kg"),
        ("height", in_to_cm(cov.height_in), "cm"),
        ("creatinine", cov.creatinine, "mg/dL"),
    )
    for name, value, unit in checks:
        lim = SAFETY_LIMITS[name]
        if not (lim["min"] <= value <= lim["max"]):
            problems.append(f"{name} must be between {lim['min']} and {lim['max']} {unit} (got {value:g})")

    if problems:
        raise InvalidInputError(problems)


def renal_status(crcl: float) -> RenalStatus:
    """Classify CrCl (mL/min) against the critical / warning thresholds."""
    lim = SAFETY_LIMITS["crcl"]
    if crcl < lim["critical"]:
        return RenalStatus.CRITICAL
    if crcl < lim["warning"]:
        return RenalStatus.WARNING
    return RenalStatus.OK


def dose_limit_warnings(dose_mg: float) -> list[str]:
    warnings = []
    if dose_mg > SAFETY_LIMITS["max_single_dose"]:
        warnings.append(f"Dose {dose_mg:g} mg exceeds the {SAFETY_LIMITS['max_single_dose']} mg single-dose maximum")
    if dose_mg < SAFETY_LIMITS["min_dose"]:
        warnings.append(f"Dose {dose_mg:g} mg is below the {SAFETY_LIMITS['min_dose']} mg minimum")
    return warnings
