"""Resolve services to ordered candidate endpoints.

SRV names follow RFC 2782 (``_service._proto.domain``). Registered service
names are listed by IANA in the Service Name and Transport Protocol Port
Number Registry.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Protocol

from .dns_resolver import DnsResolver
from .errors import InvalidAddressFormat, NoCandidates
from .models import Endpoint, SRVRecord, check_network
from .ordering import RandomSource, order_records

LOGGER = logging.getLogger(__name__)

ADDRESS_SEPARATOR = ":"


class SrvRecordSource(Protocol):
    """Anything able to answer SRV queries, such as ``DnsResolver``."""

    def get_srv(self, name: str) -> List[SRVRecord]:
        """Return the SRV records published under a DNS name."""


def parse_address(address: str) -> tuple[str, str]:
    """Split a ``domain:service`` address.

    Args:
        address (str): Combined address, e.g. ``example.com:xmpp-client``.

    Returns:
        tuple[str, str]: (domain, service).

    Raises:
        InvalidAddressFormat: If the address does not contain exactly one
            separator with a non-empty part on each side.
    """
    parts = str(address).split(ADDRESS_SEPARATOR)
    if len(parts) != 2:
        raise InvalidAddressFormat(address)
    domain, service = (part.strip() for part in parts)
    if not domain or not service:
        raise InvalidAddressFormat(address)
    return domain, service


def srv_query_name(service: str, protocol: str, domain: str) -> str:
    """Build the DNS name queried for a service.

    When both service and protocol are empty the domain is used as given, for
    services publishing SRV records under non-standard names.

    Args:
        service (str): Service name, e.g. ``xmpp-client``.
        protocol (str): Transport protocol, e.g. ``tcp``.
        domain (str): Domain publishing the service.

    Returns:
        str: Query name in the ``_service._proto.domain`` form, or the domain itself.

    Raises:
        ValueError: If the domain is empty, or only one of service and protocol is.
    """
    service = str(service or "").strip().lstrip("_")
    protocol = str(protocol or "").strip().lstrip("_")
    domain = str(domain or "").strip().rstrip(".")
    if not domain:
        raise ValueError("Domain cannot be empty")
    if not service and not protocol:
        return domain
    if not service:
        raise ValueError("Service name cannot be empty")
    if not protocol:
        raise ValueError("Protocol cannot be empty")
    return f"_{service}._{protocol}.{domain}"


def lookup_srv(
    service: str,
    protocol: str,
    domain: str,
    *,
    resolver: Optional[SrvRecordSource] = None,
    rng: Optional[RandomSource] = None,
    network: str = "tcp",
) -> List[Endpoint]:
    """Resolve a service into candidate endpoints in connection order.

    Passing an empty service and protocol queries ``domain`` directly, e.g.
    ``lookup_srv("", "", "_custom._tcp.example.com", network="tcp")``.

    Args:
        service (str): Service name, e.g. ``xmpp-client``.
        protocol (str): "tcp" or "udp".
        domain (str): Domain publishing the service.
        resolver (Optional[SrvRecordSource]): SRV record source; defaults to ``DnsResolver()``.
        rng (Optional[RandomSource]): Random source for weighted ordering.
        network (str): Endpoint network for direct-name queries; ignored when a
            protocol is given.

    Returns:
        List[Endpoint]: Candidates sorted by priority and shuffled by weight.

    Raises:
        ValueError: If the protocol, network, service or domain is invalid.
        ResolutionError: If the DNS lookup fails.
        NoCandidates: If no usable SRV record exists.
    """
    if service or protocol:
        network = check_network(protocol)
        name = srv_query_name(service, network, domain)
    else:
        network = check_network(network)
        name = srv_query_name("", "", domain)
    source = resolver if resolver is not None else DnsResolver()
    records = source.get_srv(name)
    usable = [record for record in records if not record.is_unavailable]
    if len(usable) != len(records):
        LOGGER.debug(
            "Ignoring %d SRV records with root target for %s", len(records) - len(usable), name
        )
    if not usable:
        raise NoCandidates(name)
    return order_records(usable, rng if rng is not None else random.Random(), network)


def lookup(
    protocol: str,
    address: str,
    *,
    resolver: Optional[SrvRecordSource] = None,
    rng: Optional[RandomSource] = None,
) -> List[Endpoint]:
    """Resolve a ``domain:service`` address into candidate endpoints.

    Examples:
        ``lookup("tcp", "example.com:xmpp-client")``
        ``lookup("udp", "example.com:stun")``

    Args:
        protocol (str): "tcp" or "udp".
        address (str): Address in the ``domain:service`` form.
        resolver (Optional[SrvRecordSource]): SRV record source.
        rng (Optional[RandomSource]): Random source for weighted ordering.

    Returns:
        List[Endpoint]: Candidates sorted by priority and shuffled by weight.

    Raises:
        InvalidAddressFormat: If the address is malformed.
        ResolutionError: If the DNS lookup fails.
        NoCandidates: If no usable SRV record exists.
    """
    domain, service = parse_address(address)
    return lookup_srv(service, protocol, domain, resolver=resolver, rng=rng)


__all__ = ["SrvRecordSource", "lookup", "lookup_srv", "parse_address", "srv_query_name"]
