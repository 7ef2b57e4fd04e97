"""Error types raised by the symbolic core."""


class SymbolicCoreError(Exception):
    """Base class for all symbolic core errors"""


class NotASymbol(SymbolicCoreError, TypeError):
    """Differentiation requested with respect to something other than a Symbol"""

    def __init__(self, target):
        self.target = target
        super().__init__(f"Can only differentiate with respect to a Symbol, got {target!r}")


class InvalidRational(SymbolicCoreError, ValueError):
    """Rational built from a non-integer operand or a zero denominator"""


class NumericOverflow(SymbolicCoreError, OverflowError):
    """Exact value does not fit the requested fixed-width type"""


class InvariantViolation(SymbolicCoreError, AssertionError):
    """A node failed its canonical-form check.

    Only reachable by constructing node classes directly instead of going
    through the canonical constructors; treat it as a programming error.
    """
