"""Value types shared by resolution and dialing."""

from __future__ import annotations

import dataclasses

NETWORKS = frozenset({"tcp", "udp"})

_UINT16_MAX = 65535


def _check_uint16(field_name: str, value: object) -> None:
    """Validate that a value fits an unsigned 16-bit DNS field.

    Args:
        field_name (str): Field name used in the error message.
        value (object): Value to validate.

    Raises:
        ValueError: If the value is not an integer in 0..65535.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"SRV {field_name} must be an integer")
    if not 0 <= value <= _UINT16_MAX:
        raise ValueError(f"SRV {field_name} must be between 0 and {_UINT16_MAX}")


def check_network(network: str) -> str:
    """Normalize and validate a transport network name.

    Args:
        network (str): Network name such as "tcp" or "udp".

    Returns:
        str: Lower-cased network name.

    Raises:
        ValueError: If the network is not supported.
    """
    normalized = str(network or "").strip().lower()
    if normalized not in NETWORKS:
        allowed = ", ".join(sorted(NETWORKS))
        raise ValueError(f"Unsupported protocol '{network}'. Choose from: {allowed}")
    return normalized


@dataclasses.dataclass(frozen=True)
class SRVRecord:
    """A single SRV answer as supplied by the record source.

    Attributes:
        target (str): Target host name, possibly with a trailing dot.
        port (int): Service port.
        priority (int): Priority; lower values are preferred.
        weight (int): Relative weight among records of equal priority.
    """

    target: str
    port: int
    priority: int = 0
    weight: int = 0

    def __post_init__(self) -> None:
        """Validate the numeric SRV fields."""
        _check_uint16("port", self.port)
        _check_uint16("priority", self.priority)
        _check_uint16("weight", self.weight)

    @property
    def is_unavailable(self) -> bool:
        """Whether the record marks the service as not available (target ".").

        Returns:
            bool: True when the target is the DNS root.
        """
        return self.target.strip() in {"", "."}


@dataclasses.dataclass(frozen=True)
class Endpoint:
    """A connectable service endpoint, independent of any socket type.

    Attributes:
        network (str): Transport network, "tcp" or "udp".
        host (str): Host name or address literal.
        port (int): Port number.
    """

    network: str
    host: str
    port: int

    def __post_init__(self) -> None:
        """Validate network and port."""
        check_network(self.network)
        _check_uint16("port", self.port)

    @classmethod
    def from_record(cls, record: SRVRecord, network: str) -> "Endpoint":
        """Build an endpoint from an SRV record.

        Args:
            record (SRVRecord): Source record.
            network (str): Transport network for the endpoint.

        Returns:
            Endpoint: Endpoint with the record target trimmed of dots.
        """
        return cls(check_network(network), record.target.strip("."), record.port)

    @property
    def address(self) -> tuple[str, int]:
        """Return the ``(host, port)`` pair accepted by socket APIs.

        Returns:
            tuple[str, int]: Host and port.
        """
        return (self.host, self.port)

    @property
    def hostport(self) -> str:
        """Render the endpoint as ``host:port``, bracketing IPv6 literals.

        Returns:
            str: Joined host and port.
        """
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"

    def __str__(self) -> str:
        """Render the endpoint as ``network/host:port``.

        Returns:
            str: Display form of the endpoint.
        """
        return f"{self.network}/{self.hostport}"


@dataclasses.dataclass(frozen=True)
class CandidateFailure:
    """A failed connection attempt against one candidate.

    Attributes:
        endpoint (Endpoint): Candidate that was attempted.
        error (BaseException): Error raised by the attempt.
    """

    endpoint: Endpoint
    error: BaseException

    def __str__(self) -> str:
        """Render the failure as ``endpoint: cause``.

        Returns:
            str: Display form of the failure.
        """
        return f"{self.endpoint}: {self.error}"


__all__ = ["CandidateFailure", "Endpoint", "NETWORKS", "SRVRecord", "check_network"]
