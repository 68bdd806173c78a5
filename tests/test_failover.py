import logging

import pytest

from srv_dial.errors import AllCandidatesFailed, NoCandidates
from srv_dial.failover import connect
from srv_dial.models import CandidateFailure, Endpoint

A = Endpoint("tcp", "a.example", 1)
B = Endpoint("tcp", "b.example", 2)
C = Endpoint("tcp", "c.example", 3)


class ScriptedAttempt:
    """Attempt callable that fails or succeeds per endpoint."""

    def __init__(self, outcomes):
        self.outcomes = outcomes
        self.attempted = []

    def __call__(self, endpoint):
        self.attempted.append(endpoint)
        outcome = self.outcomes[endpoint]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_first_success_short_circuits():
    attempt = ScriptedAttempt({A: ConnectionRefusedError("refused"), B: "conn-b", C: "conn-c"})

    assert connect([A, B, C], attempt) == "conn-b"
    assert attempt.attempted == [A, B]


def test_first_candidate_success_tries_nothing_else():
    attempt = ScriptedAttempt({A: "conn-a", B: "conn-b"})

    assert connect([A, B], attempt) == "conn-a"
    assert attempt.attempted == [A]


def test_all_failures_are_aggregated_in_order():
    e1 = ConnectionRefusedError("refused")
    e2 = TimeoutError("timed out")
    attempt = ScriptedAttempt({A: e1, B: e2})

    with pytest.raises(AllCandidatesFailed) as exc:
        connect([A, B], attempt)

    assert exc.value.failures == [CandidateFailure(A, e1), CandidateFailure(B, e2)]
    assert exc.value.__cause__ is e2
    assert attempt.attempted == [A, B]


def test_non_socket_errors_count_as_candidate_failures():
    attempt = ScriptedAttempt({A: ValueError("bad address"), B: "conn-b"})

    assert connect([A, B], attempt) == "conn-b"


def test_empty_candidates_raise_no_candidates():
    attempt = ScriptedAttempt({})

    with pytest.raises(NoCandidates):
        connect([], attempt)

    assert attempt.attempted == []


def test_each_candidate_is_attempted_once_from_a_generator():
    attempt = ScriptedAttempt({A: OSError("down"), B: OSError("down")})

    with pytest.raises(AllCandidatesFailed) as exc:
        connect(iter([A, B]), attempt)

    assert exc.value.endpoints == [A, B]
    assert attempt.attempted == [A, B]


def test_failover_logging(caplog):
    attempt = ScriptedAttempt({A: ConnectionRefusedError("refused"), B: "conn-b"})

    caplog.set_level(logging.DEBUG, logger="srv_dial.failover")
    connect([A, B], attempt)

    assert "Connecting to tcp/a.example:1" in caplog.text
    assert "Connection to tcp/a.example:1 failed: refused" in caplog.text
    assert "Connected to tcp/b.example:2" in caplog.text
