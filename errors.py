"""
errors.py
Exception types raised by the bond math core.

- InvalidInput          bad face value / rates / term / frequency
- DomainError           observed price outside the domain of the yield formulas
- NumericalInstability  zero derivative, overflow or non-finite intermediate
- NonConvergence        Newton iteration cap reached (strict mode only)
"""

from __future__ import annotations
from typing import Any, Optional


class BondMathError(Exception):
    """Base class for all bond calculator errors."""


class InvalidInput(BondMathError, ValueError):
    pass


class DomainError(BondMathError, ValueError):
    pass


class NumericalInstability(BondMathError, ArithmeticError):
    pass


class NonConvergence(BondMathError, RuntimeError):
    """Raised when the YTM solver hits its iteration cap and the caller asked for strictness.

    The best estimate is still available on `.result`.
    """

    def __init__(self, message: str, result: Optional[Any] = None):
        super().__init__(message)
        self.result = result
