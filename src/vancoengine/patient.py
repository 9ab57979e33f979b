# src/vancoengine/patient.py
import math

from .types import PatientCovariates, BodyMetrics
from .helpers import round_half_up, in_to_cm
from .config import (
    IBW_BASE_KG, IBW_KG_PER_INCH, IBW_REF_HEIGHT_IN,
    OBESITY_RATIO, ADJBW_CORRECTION, FEMALE_CRCL_FACTOR,
)


class PatientMetrics:
    """
    Body-size and renal-function quantities for one set of covariates.

    Every method is a pure computation; nothing is cached and nothing is
    validated here (range checks live in safety.validate_covariates).
    """

    def __init__(self, covariates: PatientCovariates):
        self.covariates = covariates

    def ideal_body_weight(self) -> float:
        """Devine IBW (kg) from height in inches."""
        c = self.covariates
        base = IBW_BASE_KG[c.sex]
        return base + IBW_KG_PER_INCH * (c.height_in - IBW_REF_HEIGHT_IN)

    def adjusted_body_weight(self) -> float:
        """
        Dosing weight (kg): TBW unless TBW exceeds 1.2 x IBW, then
        IBW + 0.4 * (TBW - IBW).
        """
        tbw = self.covariates.weight_kg
        ibw = self.ideal_body_weight()
        if tbw > ibw * OBESITY_RATIO:
            return ibw + ADJBW_CORRECTION * (tbw - ibw)
        return tbw

    def creatinine_clearance(self) -> float:
        """
        Cockcroft-Gault CrCl (mL/min) on adjusted body weight, rounded to one
        decimal. Defined as 0 when serum creatinine is 0.
        """
        c = self.covariates
        if c.creatinine == 0:
            return 0.0

        crcl = ((140 - c.age) * self.adjusted_body_weight()) / (72 * c.creatinine)
        if c.sex == "female":
            crcl *= FEMALE_CRCL_FACTOR
        return round_half_up(crcl, 1)

    def body_surface_area(self) -> float:
        """Mosteller BSA (m^2)."""
        c = self.covariates
        return math.sqrt((in_to_cm(c.height_in) * c.weight_kg) / 3600)

    def metrics(self) -> BodyMetrics:
        return BodyMetrics(
            ibw_kg=self.ideal_body_weight(),
            adjbw_kg=self.adjusted_body_weight(),
            crcl_ml_min=self.creatinine_clearance(),
            bsa_m2=self.body_surface_area(),
        )
