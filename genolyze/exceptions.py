"""
Exceptions raised at the caller-facing edges of genolyze.

The analyzers themselves never raise for malformed-but-parseable input;
these are used by the validation gate and the analysis dispatcher.
"""

from typing import Optional


class GenolyzeError(Exception):
    """Base class for all genolyze errors."""


class InvalidSequenceError(GenolyzeError, ValueError):
    """A sequence does not match the alphabet of its declared kind."""

    def __init__(
        self,
        message: str,
        symbol: Optional[str] = None,
        position: Optional[int] = None
    ):
        super().__init__(message)
        self.symbol = symbol
        self.position = position


class AnalysisError(GenolyzeError):
    """An analysis cannot be run on the given inputs."""


class UnsupportedKindError(AnalysisError):
    """The analysis does not accept sequences of this kind."""


class UnknownAnalysisError(AnalysisError, KeyError):
    """No analysis is registered under the requested id."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""
