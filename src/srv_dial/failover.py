"""Sequential failover across ordered candidate endpoints."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, TypeVar

from .errors import AllCandidatesFailed, NoCandidates
from .models import CandidateFailure, Endpoint

LOGGER = logging.getLogger(__name__)

ConnectionT = TypeVar("ConnectionT")

Attempt = Callable[[Endpoint], ConnectionT]


def connect(candidates: Iterable[Endpoint], attempt: Attempt) -> ConnectionT:
    """Connect to the first candidate that accepts a connection.

    Candidates are tried in the given order, each exactly once. Any exception
    raised by ``attempt`` counts as a failure of that candidate only.

    Args:
        candidates (Iterable[Endpoint]): Ordered candidate endpoints.
        attempt (Attempt): Callable that opens a connection to one endpoint.

    Returns:
        ConnectionT: Connection returned by the first successful attempt.

    Raises:
        NoCandidates: If there are no candidates.
        AllCandidatesFailed: If every attempt failed.
    """
    failures: List[CandidateFailure] = []
    for endpoint in candidates:
        LOGGER.debug("Connecting to %s", endpoint)
        try:
            connection = attempt(endpoint)
        except Exception as err:
            LOGGER.warning("Connection to %s failed: %s", endpoint, err)
            failures.append(CandidateFailure(endpoint, err))
            continue
        LOGGER.info("Connected to %s", endpoint)
        return connection
    if not failures:
        raise NoCandidates()
    raise AllCandidatesFailed(failures) from failures[-1].error


__all__ = ["Attempt", "connect"]
