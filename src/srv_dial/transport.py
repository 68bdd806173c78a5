"""Socket-level connection attempts against a single endpoint."""

from __future__ import annotations

import logging
import socket
from typing import Optional, Tuple

from .models import Endpoint

LOGGER = logging.getLogger(__name__)

LocalAddress = Tuple[str, int]

_SOCKET_TYPES = {
    "tcp": socket.SOCK_STREAM,
    "udp": socket.SOCK_DGRAM,
}


def open_connection(
    endpoint: Endpoint,
    *,
    socket_type: Optional[int] = None,
    local_address: Optional[LocalAddress] = None,
    timeout: Optional[float] = None,
) -> socket.socket:
    """Open a connected socket to an endpoint.

    The endpoint host is resolved with ``getaddrinfo`` for the requested socket
    type and each returned address is tried in turn.

    Args:
        endpoint (Endpoint): Endpoint to connect to.
        socket_type (Optional[int]): Socket type; derived from the endpoint network by default.
        local_address (Optional[LocalAddress]): Local ``(host, port)`` to bind before connecting.
        timeout (Optional[float]): Socket timeout in seconds, applied to connect and later I/O.

    Returns:
        socket.socket: Connected socket owned by the caller.

    Raises:
        OSError: If resolution fails or no resolved address accepts the connection.
    """
    kind = socket_type if socket_type is not None else _SOCKET_TYPES[endpoint.network]
    infos = socket.getaddrinfo(endpoint.host, endpoint.port, 0, kind)
    last_error: Optional[OSError] = None
    for family, sock_type, proto, _canonname, sockaddr in infos:
        sock = socket.socket(family, sock_type, proto)
        try:
            if timeout is not None:
                sock.settimeout(timeout)
            if local_address is not None:
                sock.bind(local_address)
            sock.connect(sockaddr)
        except OSError as err:
            sock.close()
            LOGGER.debug("Address %s of %s failed: %s", sockaddr, endpoint, err)
            last_error = err
            continue
        return sock
    if last_error is not None:
        raise last_error
    raise OSError(f"No addresses found for {endpoint.hostport}")


def _require_network(endpoint: Endpoint, network: str) -> None:
    """Reject endpoints that belong to a different transport.

    Args:
        endpoint (Endpoint): Endpoint about to be attempted.
        network (str): Expected network.

    Raises:
        ValueError: If the endpoint network differs.
    """
    if endpoint.network != network:
        raise ValueError(f"Expected a {network} endpoint, got {endpoint}")


def connect_stream(
    endpoint: Endpoint,
    local_address: Optional[LocalAddress] = None,
    timeout: Optional[float] = None,
) -> socket.socket:
    """Open a TCP connection to an endpoint.

    Args:
        endpoint (Endpoint): TCP endpoint.
        local_address (Optional[LocalAddress]): Local ``(host, port)`` to bind.
        timeout (Optional[float]): Socket timeout in seconds.

    Returns:
        socket.socket: Connected stream socket.
    """
    _require_network(endpoint, "tcp")
    return open_connection(
        endpoint, socket_type=socket.SOCK_STREAM, local_address=local_address, timeout=timeout
    )


def connect_datagram(
    endpoint: Endpoint,
    local_address: Optional[LocalAddress] = None,
    timeout: Optional[float] = None,
) -> socket.socket:
    """Open a connected UDP socket to an endpoint.

    Args:
        endpoint (Endpoint): UDP endpoint.
        local_address (Optional[LocalAddress]): Local ``(host, port)`` to bind.
        timeout (Optional[float]): Socket timeout in seconds.

    Returns:
        socket.socket: Connected datagram socket.
    """
    _require_network(endpoint, "udp")
    return open_connection(
        endpoint, socket_type=socket.SOCK_DGRAM, local_address=local_address, timeout=timeout
    )


__all__ = ["LocalAddress", "connect_datagram", "connect_stream", "open_connection"]
