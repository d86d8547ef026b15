"""
Exceptions raised by the document clustering package.

All errors derive from ``ClusteringError`` which is itself a ``ValueError``,
so callers that already guard against bad input with ``ValueError`` keep
working.
"""


class ClusteringError(ValueError):
    """Base class for all clustering input errors."""


class DimensionMismatchError(ClusteringError):
    """Vectors of differing lengths were supplied within one input set."""

    def __init__(self, expected: int, got: int, identifier=None):
        self.expected = expected
        self.got = got
        self.identifier = identifier
        where = f" for '{identifier}'" if identifier is not None else ""
        super().__init__(f"Expected dimension {expected}, got {got}{where}")


class DegenerateVectorError(ClusteringError):
    """A vector has no direction (zero magnitude) or contains non-finite values."""


class InvalidParameterError(ClusteringError):
    """A call parameter is out of range or the input set is malformed."""


class UnknownDocumentError(ClusteringError, KeyError):
    """A document identifier is not part of the supplied vector set."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ''
