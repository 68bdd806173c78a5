"""SRV record source backed by dnspython.

The resolver is intentionally thin so it can be replaced in tests.
"""

from __future__ import annotations

import ipaddress
import logging
from typing import Iterable, List, Optional

import dns.exception
import dns.resolver

from .errors import ResolutionError
from .models import SRVRecord

LOGGER = logging.getLogger(__name__)


def _is_ip_address(value: str) -> bool:
    """Check whether a string is a valid IP address.

    Args:
        value (str): Input string to validate.

    Returns:
        bool: True if the value is a valid IPv4 or IPv6 address.
    """
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


class DnsResolver:
    """Look up SRV records using dnspython."""

    def __init__(
        self,
        nameservers: Optional[Iterable[str]] = None,
        timeout: Optional[float] = None,
        lifetime: Optional[float] = None,
        use_tcp: bool = False,
    ) -> None:
        """Initialize the DNS resolver.

        Args:
            nameservers (Optional[Iterable[str]]): Optional nameserver IPs or hostnames.
            timeout (Optional[float]): Per-query timeout in seconds.
            lifetime (Optional[float]): Total timeout across retries in seconds.
            use_tcp (bool): Whether to force TCP for DNS lookups.

        Raises:
            ValueError: If a setting is invalid or a nameserver cannot be resolved.
        """
        self._resolver = dns.resolver.Resolver()
        if timeout is not None:
            if timeout <= 0:
                raise ValueError("DNS timeout must be a positive number")
            self._resolver.timeout = timeout
        if lifetime is not None:
            if lifetime <= 0:
                raise ValueError("DNS lifetime must be a positive number")
            self._resolver.lifetime = lifetime
        self._resolver.use_tcp = bool(use_tcp)
        if nameservers:
            self._resolver.nameservers = self._resolve_nameservers(nameservers)

    def _resolve_nameservers(self, nameservers: Iterable[str]) -> List[str]:
        """Resolve nameserver hostnames into IP addresses.

        Args:
            nameservers (Iterable[str]): Nameserver IPs or hostnames.

        Returns:
            List[str]: Unique IP addresses in input order.

        Raises:
            ValueError: If a nameserver is invalid or cannot be resolved.
        """
        resolved: List[str] = []
        for server in nameservers:
            server_text = str(server).strip()
            if not server_text:
                raise ValueError("DNS server entries cannot be empty")
            if _is_ip_address(server_text):
                addresses = [server_text]
            else:
                addresses = self._resolve_nameserver_hostname(server_text)
                if not addresses:
                    raise ValueError(
                        f"DNS server '{server_text}' did not resolve to any IP addresses"
                    )
            resolved.extend(address for address in addresses if address not in resolved)
        if not resolved:
            raise ValueError("At least one DNS server must be provided")
        return resolved

    def _resolve_nameserver_hostname(self, hostname: str) -> List[str]:
        """Resolve a nameserver hostname into A/AAAA addresses.

        Args:
            hostname (str): Hostname to resolve.

        Returns:
            List[str]: Resolved IP addresses.

        Raises:
            ValueError: If the hostname cannot be resolved due to DNS errors.
        """
        addresses: List[str] = []
        for record_type in ("A", "AAAA"):
            try:
                answers = self._resolver.resolve(hostname, record_type)
            except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
                continue
            except dns.exception.DNSException as err:
                raise ValueError(f"DNS server '{hostname}' could not be resolved: {err}") from err
            addresses.extend(str(rdata.address) for rdata in answers)
        if addresses:
            LOGGER.debug("Resolved DNS server %s to %s", hostname, addresses)
        return addresses

    def get_srv(self, name: str) -> List[SRVRecord]:
        """Resolve SRV records for a DNS name.

        Args:
            name (str): DNS name to query, e.g. ``_xmpp-client._tcp.example.com``.

        Returns:
            List[SRVRecord]: Records in answer order; empty when the name exists
                but publishes no SRV records.

        Raises:
            ResolutionError: If the name does not exist or another DNS error occurs.
        """
        try:
            answers = self._resolver.resolve(name, "SRV")
        except dns.resolver.NoAnswer:
            LOGGER.debug("No SRV records for %s", name)
            return []
        except dns.exception.DNSException as err:
            LOGGER.warning("SRV lookup failed for %s: %s", name, err)
            raise ResolutionError(name, err) from err
        records = [
            SRVRecord(
                target=str(rdata.target).lower().rstrip(".") + ".",
                port=int(rdata.port),
                priority=int(rdata.priority),
                weight=int(rdata.weight),
            )
            for rdata in answers
        ]
        LOGGER.debug("Resolved %d SRV records for %s", len(records), name)
        return records


__all__ = ["DnsResolver"]
