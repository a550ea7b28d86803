"""Exceptions raised by the directional samplers."""


class InvalidInputError(ValueError):
    """A sampling precondition is violated (e.g. mean direction not of unit norm)."""


class NumericalConsistencyError(ArithmeticError):
    """A post-sampling sanity check failed."""
