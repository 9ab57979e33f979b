# src/vancoengine/config.py
from enum import IntEnum

# --------------------------
# Population PK constants
# --------------------------
V_FACTOR_L_PER_KG = 0.51        # Adane 2015 volume of distribution
CL_SLOPE_L_PER_H = 6.54         # ClVanc = 6.54 * CrCl / 125
CL_REF_CRCL_ML_MIN = 125.0

DEFAULT_INFUSION_H = 1.0
DOSE_ROUNDING_MG = 100

# Below this k*t_inf the closed-form peak divides by (almost) zero.
MIN_K_TINF = 1e-12

# --------------------------
# Body size / renal function
# --------------------------
IBW_BASE_KG = {"male": 50.0, "female": 45.5}
IBW_KG_PER_INCH = 2.3
IBW_REF_HEIGHT_IN = 60.0
OBESITY_RATIO = 1.2             # TBW > 1.2 * IBW -> use adjusted body weight
ADJBW_CORRECTION = 0.4
FEMALE_CRCL_FACTOR = 0.85

# --------------------------
# Boundary limits and targets
# --------------------------
SAFETY_LIMITS = {
    "age": {"min": 18, "max": 120},
    "weight": {"min": 20, "max": 300},          # kg
    "height": {"min": 120, "max": 250},         # cm
    "creatinine": {"min": 0.2, "max": 15},      # mg/dL
    "max_single_dose": 3000,                    # mg
    "min_dose": 500,                            # mg
    "crcl": {"warning": 30, "critical": 15},    # mL/min
}

AUC_ACCEPTABLE = (400.0, 600.0)     # mcg*h/mL
AUC_SUGGESTED = (500.0, 600.0)
TROUGH_TARGET = (10.0, 20.0)        # mcg/mL, drawn as a band on the curve

DEFAULT_TIME_POINTS = (0.0, 10.0, 20.0, 30.0, 40.0, 50.0, 60.0)


class Frequency(IntEnum):
    """Supported dosing intervals (hours), each owning a fixed mg/kg menu."""
    Q12H = 12
    Q24H = 24
    Q48H = 48

    @property
    def mg_per_kg_menu(self) -> tuple[int, ...]:
        return _DOSE_MENUS[self]


_DOSE_MENUS = {
    Frequency.Q12H: (5, 7, 9),
    Frequency.Q24H: (7, 9, 11, 12),
    Frequency.Q48H: (12, 14, 16, 18),
}
