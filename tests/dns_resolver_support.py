"""dnspython resolver double used by resolver and lookup tests."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import dns.resolver
import pytest

from srv_dial.dns_resolver import DnsResolver


class DummyResolver:
    """Stand-in for ``dns.resolver.Resolver`` answering from a dict."""

    def __init__(self, answers: dict[tuple[str, str], Any]):
        self.answers = answers
        self.nameservers: list[str] = []
        self.timeout: float | None = None
        self.lifetime: float | None = None
        self.use_tcp = False

    def resolve(self, name: str, record_type: str) -> Any:
        result = self.answers[(name, record_type)]
        if isinstance(result, Exception):
            raise result
        return result


def srv_answer(target: str, port: int, priority: int = 0, weight: int = 0) -> SimpleNamespace:
    return SimpleNamespace(target=target, port=port, priority=priority, weight=weight)


def patch_resolver(
    monkeypatch: pytest.MonkeyPatch, answers: dict[tuple[str, str], Any] | None = None
) -> DummyResolver:
    dummy = DummyResolver(answers or {})
    monkeypatch.setattr(dns.resolver, "Resolver", lambda: dummy)
    return dummy


def make_dns_resolver(
    monkeypatch: pytest.MonkeyPatch, answers: dict[tuple[str, str], Any]
) -> DnsResolver:
    patch_resolver(monkeypatch, answers)
    return DnsResolver()
