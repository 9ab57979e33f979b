# src/vancoengine/errors.py


class VancomycinError(ValueError):
    """Base class for errors raised by the dosing engine and its boundary checks."""


class InvalidInputError(VancomycinError):
    """
    A covariate is outside its clinically plausible range.

    problems : one message per offending field
    """

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class DomainError(VancomycinError):
    """A PK formula was asked to evaluate outside its mathematical domain."""


class RenalFunctionError(VancomycinError):
    """Creatinine clearance is below the critical threshold; dosing is blocked."""

    def __init__(self, crcl: float, threshold: float):
        self.crcl = crcl
        self.threshold = threshold
        super().__init__(
            f"CrCl {crcl:.1f} mL/min is below {threshold:g} mL/min. Consider alternative therapy."
        )
