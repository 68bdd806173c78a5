"""Shared test doubles."""

from __future__ import annotations

from typing import Iterable

from srv_dial.errors import ResolutionError
from srv_dial.models import SRVRecord


class FakeResolver:
    """SRV record source serving canned answers.

    Attributes:
        srv (dict[str, list[SRVRecord] | Exception]): Answers keyed by query name.
        queries (list[str]): Names queried so far.
    """

    def __init__(self, srv: dict[str, list[SRVRecord] | Exception] | None = None):
        self.srv = srv or {}
        self.queries: list[str] = []

    def get_srv(self, name: str) -> list[SRVRecord]:
        self.queries.append(name)
        result = self.srv.get(name, [])
        if isinstance(result, Exception):
            raise result
        return list(result)


class SequenceRandom:
    """Random source replaying fixed draws in [0.0, 1.0)."""

    def __init__(self, draws: Iterable[float]):
        self._draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self._draws[self.calls]
        self.calls += 1
        return value


class ForbiddenRandom:
    """Random source that fails the test when consulted."""

    def random(self) -> float:
        raise AssertionError("random source should not be used")


def lookup_failure(name: str) -> ResolutionError:
    return ResolutionError(name, RuntimeError("timeout"))
