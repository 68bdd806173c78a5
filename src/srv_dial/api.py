"""Stable public API for programmatic usage."""

from __future__ import annotations

from .dial import dial, dial_srv, dial_tcp, dial_udp
from .dns_resolver import DnsResolver
from .errors import (
    AllCandidatesFailed,
    InvalidAddressFormat,
    NoCandidates,
    ResolutionError,
    SrvError,
)
from .failover import connect
from .lookup import lookup, lookup_srv, parse_address
from .models import CandidateFailure, Endpoint, SRVRecord
from .ordering import order_records

__all__ = [
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
]
