# src/vancoengine/helpers.py
from decimal import Decimal, ROUND_HALF_UP

LB_TO_KG = 0.453592
IN_TO_CM = 2.54
UMOL_L_TO_MG_DL = 0.0113


def round_half_up(x: float, ndigits: int = 0) -> float:
    """
    Round half away from zero (Python's round() is half-to-even).
    Works on the shortest repr of x, so 68.05 rounds to 68.1 even though
    the binary value sits just below it.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(float(x))).quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_increment(x: float, increment: float) -> float:
    """Round x to the nearest multiple of increment (halves away from zero)."""
    return round_half_up(x / increment) * increment


def lb_to_kg(lb: float) -> float:
    return lb * LB_TO_KG

def in_to_cm(inches: float) -> float:
    return inches * IN_TO_CM

def cm_to_in(cm: float) -> float:
    return cm / IN_TO_CM

def umol_l_to_mg_dl(scr_umol_l: float) -> float:
    """Serum creatinine from umol/L (SI) to mg/dL."""
    return scr_umol_l * UMOL_L_TO_MG_DL
