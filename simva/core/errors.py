"""
Exceptions raised on invalid simulation input.

All errors are raised before any integration step runs. Numeric degeneracies
(e.g. zero conductance sums) are not errors; they show up as NaN/Inf values.
"""


class SimvaError(Exception):
    """Base class for SIMVA errors."""


class InvalidArgumentError(SimvaError, ValueError):
    """An argument is not one of the allowed values (e.g. unknown agent)."""


class ValidationError(SimvaError, ValueError):
    """An argument has an allowed type but fails a physiological check."""


class RangeError(ValidationError):
    """A numeric argument lies outside its permitted interval."""


class ShapeError(ValidationError):
    """A named vector has the wrong number of entries."""


class NameMismatchError(ValidationError):
    """A named vector does not carry the expected names."""


class MissingArgumentError(SimvaError, TypeError):
    """A mandatory argument was not supplied."""
