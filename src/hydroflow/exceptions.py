class HydroFlowError(Exception):
    """Base class for errors raised by hydroflow."""


class ValidationError(HydroFlowError, ValueError):
    """Raised when a channel input violates a constraint.

    Attributes
    ----------
    field : str
        Name of the offending input (e.g. 'Q').
    value : object
        The value that was supplied.
    constraint : str
        The violated constraint, e.g. '> 0' or 'finite number'.
    """
    def __init__(self, field: str, value, constraint: str):
        self.field = field
        self.value = value
        self.constraint = constraint
        super().__init__(f"{field} must be {constraint} (got {value!r})")


class NumericDegeneracy(HydroFlowError, ArithmeticError):
    """Raised when a numeric procedure cannot produce a meaningful answer,
    e.g. the root of the normal-depth equation lies outside the bracket."""
