"""Packaging and version regression tests."""

from __future__ import annotations

import tomllib
from pathlib import Path

import srv_dial

ROOT = Path(__file__).resolve().parents[1]


def _pyproject() -> dict:
    with (ROOT / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_setuptools_installs_from_src_only() -> None:
    setuptools = _pyproject()["tool"]["setuptools"]
    assert setuptools["package-dir"] == {"": "src"}
    assert setuptools["packages"]["find"]["where"] == ["src"]


def test_source_version_matches_pyproject() -> None:
    assert _pyproject()["project"]["version"] == srv_dial._SOURCE_VERSION
    assert srv_dial.__version__ == srv_dial._SOURCE_VERSION


def test_public_api_surface() -> None:
    assert set(srv_dial.api.__all__) == {
        "AllCandidatesFailed",
        "CandidateFailure",
        "DnsResolver",
        "Endpoint",
        "InvalidAddressFormat",
        "NoCandidates",
        "ResolutionError",
        "SRVRecord",
        "SrvError",
        "connect",
        "dial",
        "dial_srv",
        "dial_tcp",
        "dial_udp",
        "lookup",
        "lookup_srv",
        "order_records",
        "parse_address",
    }
    assert srv_dial.api.dial is srv_dial.dial.dial
    assert srv_dial.api.lookup_srv is srv_dial.lookup.lookup_srv
    assert issubclass(srv_dial.api.NoCandidates, srv_dial.api.SrvError)
