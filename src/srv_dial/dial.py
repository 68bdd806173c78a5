"""Resolve a service and connect to it, failing over between candidates."""

from __future__ import annotations

import functools
import socket
from typing import Optional

from .failover import connect
from .lookup import SrvRecordSource, lookup, lookup_srv
from .ordering import RandomSource
from .transport import LocalAddress, connect_datagram, connect_stream, open_connection


def dial(
    protocol: str,
    address: str,
    *,
    resolver: Optional[SrvRecordSource] = None,
    rng: Optional[RandomSource] = None,
    timeout: Optional[float] = None,
) -> socket.socket:
    """Resolve a ``domain:service`` address and connect in priority order.

    Examples:
        ``dial("tcp", "example.com:xmpp-client")``
        ``dial("udp", "example.com:stun")``

    Args:
        protocol (str): "tcp" or "udp".
        address (str): Address in the ``domain:service`` form.
        resolver (Optional[SrvRecordSource]): SRV record source.
        rng (Optional[RandomSource]): Random source for weighted ordering.
        timeout (Optional[float]): Per-attempt socket timeout in seconds.

    Returns:
        socket.socket: Connected socket.

    Raises:
        InvalidAddressFormat: If the address is malformed.
        ResolutionError: If the DNS lookup fails.
        NoCandidates: If no usable SRV record exists.
        AllCandidatesFailed: If every candidate refused the connection.
    """
    candidates = lookup(protocol, address, resolver=resolver, rng=rng)
    return connect(candidates, functools.partial(open_connection, timeout=timeout))


def dial_srv(
    service: str,
    protocol: str,
    domain: str,
    *,
    resolver: Optional[SrvRecordSource] = None,
    rng: Optional[RandomSource] = None,
    timeout: Optional[float] = None,
) -> socket.socket:
    """Resolve a service by its parts and connect in priority order.

    Examples:
        ``dial_srv("xmpp-client", "tcp", "example.com")``

    Args:
        service (str): Service name.
        protocol (str): "tcp" or "udp".
        domain (str): Domain publishing the service.
        resolver (Optional[SrvRecordSource]): SRV record source.
        rng (Optional[RandomSource]): Random source for weighted ordering.
        timeout (Optional[float]): Per-attempt socket timeout in seconds.

    Returns:
        socket.socket: Connected socket.

    Raises:
        ResolutionError: If the DNS lookup fails.
        NoCandidates: If no usable SRV record exists.
        AllCandidatesFailed: If every candidate refused the connection.
    """
    candidates = lookup_srv(service, protocol, domain, resolver=resolver, rng=rng)
    return connect(candidates, functools.partial(open_connection, timeout=timeout))


def dial_tcp(
    local_address: Optional[LocalAddress],
    address: str,
    *,
    resolver: Optional[SrvRecordSource] = None,
    rng: Optional[RandomSource] = None,
    timeout: Optional[float] = None,
) -> socket.socket:
    """Resolve a ``domain:service`` address and open a TCP connection.

    Examples:
        ``dial_tcp(None, "example.com:xmpp-client")``

    Args:
        local_address (Optional[LocalAddress]): Local ``(host, port)`` to bind, or None.
        address (str): Address in the ``domain:service`` form.
        resolver (Optional[SrvRecordSource]): SRV record source.
        rng (Optional[RandomSource]): Random source for weighted ordering.
        timeout (Optional[float]): Per-attempt socket timeout in seconds.

    Returns:
        socket.socket: Connected stream socket.
    """
    candidates = lookup("tcp", address, resolver=resolver, rng=rng)
    attempt = functools.partial(connect_stream, local_address=local_address, timeout=timeout)
    return connect(candidates, attempt)


def dial_udp(
    local_address: Optional[LocalAddress],
    address: str,
    *,
    resolver: Optional[SrvRecordSource] = None,
    rng: Optional[RandomSource] = None,
    timeout: Optional[float] = None,
) -> socket.socket:
    """Resolve a ``domain:service`` address and open a connected UDP socket.

    Examples:
        ``dial_udp(None, "example.com:stun")``

    Args:
        local_address (Optional[LocalAddress]): Local ``(host, port)`` to bind, or None.
        address (str): Address in the ``domain:service`` form.
        resolver (Optional[SrvRecordSource]): SRV record source.
        rng (Optional[RandomSource]): Random source for weighted ordering.
        timeout (Optional[float]): Per-attempt socket timeout in seconds.

    Returns:
        socket.socket: Connected datagram socket.
    """
    candidates = lookup("udp", address, resolver=resolver, rng=rng)
    attempt = functools.partial(connect_datagram, local_address=local_address, timeout=timeout)
    return connect(candidates, attempt)


__all__ = ["dial", "dial_srv", "dial_tcp", "dial_udp"]
