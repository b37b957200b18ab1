"""
Local interface address scanning.

This module provides the AddressScanner class which enumerates the addresses
assigned to the host's network interfaces and keeps the IPv4, non-loopback
addresses that fall inside the configured subnet prefix.
"""

import ipaddress
import socket
from typing import Any, Callable, Dict, List, Optional

import psutil

from .data_models import AddressList, SubnetFilter
from ..utils import logger as default_logger
from ..utils.error_handler import InterfaceQueryError, NoMatchingAddressError

InterfaceSource = Callable[[], Dict[str, List[Any]]]


class AddressScanner:
    """
    Finds qualifying addresses on the local host.

    The interface source must behave like ``psutil.net_if_addrs``: a mapping
    of interface name to address entries exposing ``family`` and ``address``.
    """

    def __init__(
        self,
        subnet_filter: Optional[SubnetFilter] = None,
        interface_source: InterfaceSource = psutil.net_if_addrs,
        logger=None,
    ):
        """
        Initialize the AddressScanner.

        Args:
            subnet_filter: Prefix filter, defaults to 192.168
            interface_source: Callable returning the interface address table
            logger: Logger instance for debug output
        """
        self.subnet_filter = subnet_filter or SubnetFilter()
        self.interface_source = interface_source
        self.logger = logger or default_logger

    def scan(self) -> AddressList:
        """
        Return the qualifying addresses currently held by the host.

        Returns:
            AddressList: Non-empty tuple in interface enumeration order

        Raises:
            InterfaceQueryError: If the interface table cannot be read
            NoMatchingAddressError: If no address matches the subnet prefix
        """
        try:
            interfaces = self.interface_source()
        except (OSError, psutil.Error) as e:
            raise InterfaceQueryError(f"Failed to enumerate interface addresses: {e}") from e

        addresses = []
        for interface_name, entries in interfaces.items():
            for entry in entries:
                if self._is_qualifying(entry):
                    self.logger.debug(f"Qualifying address on {interface_name}: {entry.address}")
                    addresses.append(entry.address)

        if not addresses:
            raise NoMatchingAddressError(
                f"No IPv4 address starting with {self.subnet_filter.prefix} found"
            )
        return tuple(addresses)

    def _is_qualifying(self, entry: Any) -> bool:
        if entry.family != socket.AF_INET:
            return False

        try:
            ip_addr = ipaddress.IPv4Address(entry.address)
        except ipaddress.AddressValueError:
            return False

        if ip_addr.is_loopback:
            return False

        return self.subnet_filter.matches(str(ip_addr))
