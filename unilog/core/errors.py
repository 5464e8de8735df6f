"""
Failure kinds for the unification core.

Every failure here is an ordinary, recoverable outcome for the caller.
A search loop that tries a clause head against a goal expects most
attempts to raise NotUnifiable.
"""


class UnilogError(Exception):
    """Root of everything this package raises on purpose."""


class NotUnifiable(UnilogError):
    """Two terms have no common instance."""


class NotNumeric(NotUnifiable):
    """An arithmetic operand did not reduce to a number."""


class ArithmeticFault(UnilogError, ArithmeticError):
    """Unsigned arithmetic left the naturals: underflow or division by zero."""
