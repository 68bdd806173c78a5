"""Errors raised while resolving and dialing SRV services."""

from __future__ import annotations

from typing import Iterable, List

from .models import CandidateFailure, Endpoint


class SrvError(RuntimeError):
    """Base class for all srv_dial errors."""


class InvalidAddressFormat(SrvError, ValueError):
    """Raised when an address is not in the ``domain:service`` form."""

    def __init__(self, address: str) -> None:
        """Initialize the error.

        Args:
            address (str): Offending address string.
        """
        super().__init__(f"Invalid address '{address}': expected the form domain:service")
        self.address = address


class ResolutionError(SrvError):
    """Raised when the DNS lookup itself fails."""

    def __init__(self, name: str, error: Exception, record_type: str = "SRV") -> None:
        """Initialize a resolution error.

        Args:
            name (str): DNS name that failed to resolve.
            error (Exception): Underlying exception.
            record_type (str): DNS record type being queried.
        """
        super().__init__(f"{record_type} lookup failed for {name}: {error}")
        self.record_type = record_type
        self.name = name
        self.error = error


class NoCandidates(SrvError):
    """Raised when there is no endpoint to connect to."""

    def __init__(self, name: str = "") -> None:
        """Initialize the error.

        Args:
            name (str): DNS name that yielded no usable records, if known.
        """
        if name:
            message = f"No SRV records available for {name}"
        else:
            message = "No candidate endpoints to connect to"
        super().__init__(message)
        self.name = name


class AllCandidatesFailed(SrvError):
    """Raised when every candidate endpoint failed to connect.

    Attributes:
        failures (List[CandidateFailure]): Failed attempts in attempt order.
    """

    def __init__(self, failures: Iterable[CandidateFailure]) -> None:
        """Initialize the aggregate failure.

        Args:
            failures (Iterable[CandidateFailure]): Failed attempts in attempt order.
        """
        self.failures: List[CandidateFailure] = list(failures)
        details = "; ".join(str(failure) for failure in self.failures)
        super().__init__(f"All {len(self.failures)} candidates failed: {details}")

    @property
    def endpoints(self) -> List[Endpoint]:
        """Return the attempted endpoints in attempt order.

        Returns:
            List[Endpoint]: Attempted endpoints.
        """
        return [failure.endpoint for failure in self.failures]


__all__ = [
    "AllCandidatesFailed",
    "InvalidAddressFormat",
    "NoCandidates",
    "ResolutionError",
    "SrvError",
]
