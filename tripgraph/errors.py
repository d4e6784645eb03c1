"""Exception types raised by tripgraph."""


class InvalidArgumentError(ValueError):
    """A required argument is missing or a numeric bound is not positive.

    Raised before any graph work is done. Subclasses ``ValueError`` so callers
    that already guard against bad input with ``except ValueError`` keep working.
    """
