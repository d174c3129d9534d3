"""Base exceptions for gopdeps domain."""


class GopDepsError(Exception):
    """Root exception for all recoverable gopdeps errors.

    All domain errors inherit from this.
    Allows catching all gopdeps-specific errors.
    """


class GopDepsFault(AssertionError):
    """Root exception for broken internal invariants.

    Raised only when an upstream stage broke a promise it makes
    (e.g. the header parser handed over a malformed literal).
    NOT a GopDepsError: ``except GopDepsError`` never catches a fault.
    """
