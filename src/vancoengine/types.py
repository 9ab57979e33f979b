# src/vancoengine/types.py
import math
from dataclasses import dataclass
from typing import Literal, Sequence

# Time in HOURS, doses in mg, volumes in L. mg/L == mcg/mL.
Sex = Literal["male", "female"]

@dataclass(frozen=True)
class PatientCovariates:
    """
    Raw patient inputs for one calculation.

    sex         : "male" or "female"
    age         : years
    height_in   : height in inches
    weight_kg   : total body weight (TBW) in kg
    creatinine  : serum creatinine in mg/dL
    """
    sex: Sex
    age: float
    height_in: float
    weight_kg: float
    creatinine: float


@dataclass(frozen=True)
class BodyMetrics:
    """
    Weight-based and renal quantities derived from PatientCovariates.
    """
    ibw_kg: float
    adjbw_kg: float
    crcl_ml_min: float
    bsa_m2: float


@dataclass(frozen=True)
class PKParameters:
    """
    One-compartment vancomycin parameters for a single computation.

    vd_l        : volume of distribution (L)
    cl_l_per_h  : vancomycin clearance (L/h)
    k_per_h     : elimination rate constant (1/h)
    """
    vd_l: float
    cl_l_per_h: float
    k_per_h: float

    @property
    def half_life_h(self) -> float:
        return math.log(2) / self.k_per_h if self.k_per_h > 0 else float("inf")


@dataclass(frozen=True)
class DoseCandidate:
    """
    A dose evaluated at steady state.

    dose_mg     : dose per administration (mg)
    mg_per_kg   : dose relative to the dosing weight
    peak        : predicted steady-state peak (mcg/mL)
    trough      : predicted steady-state trough (mcg/mL)
    auc24       : predicted AUC over 24 h (mcg*h/mL)
    tau_h       : dosing interval the prediction assumes
    infusion_h  : infusion duration the prediction assumes
    """
    dose_mg: float
    mg_per_kg: float
    peak: float
    trough: float
    auc24: float
    tau_h: float
    infusion_h: float = 1.0


@dataclass(frozen=True)
class Recommendation:
    """
    Output of the dose menu search: the PK parameters used plus every
    candidate of the frequency's mg/kg menu, in menu order.
    """
    k: float
    vd: float
    cl_vanc: float
    frequency: int
    candidates: Sequence[DoseCandidate]
