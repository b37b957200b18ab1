from __future__ import annotations

import psutil
import pytest

from ip_notifier.core.address_scanner import AddressScanner
from ip_notifier.core.data_models import SubnetFilter
from ip_notifier.utils.error_handler import (
    ErrorType, InterfaceQueryError, NoMatchingAddressError, ScanError
)

from conftest import Addr, ipv4, ipv6


def _scanner(table, quiet_logger, prefix="192.168"):
    return AddressScanner(
        subnet_filter=SubnetFilter(prefix),
        interface_source=lambda: table,
        logger=quiet_logger,
    )


def test_keeps_only_addresses_in_subnet(quiet_logger):
    table = {
        "eth0": [ipv4("10.0.0.5")],
        "wlan0": [ipv4("192.168.1.20")],
    }

    assert _scanner(table, quiet_logger).scan() == ("192.168.1.20",)


def test_no_matching_address_raises(quiet_logger):
    table = {
        "lo": [ipv4("127.0.0.1")],
        "eth0": [ipv4("10.0.0.5")],
    }

    with pytest.raises(NoMatchingAddressError) as exc_info:
        _scanner(table, quiet_logger).scan()

    assert exc_info.value.error_type == ErrorType.NO_MATCHING_ADDRESS


def test_excludes_loopback_ipv6_and_link_layer_entries(quiet_logger):
    table = {
        "lo": [ipv4("127.0.0.1"), ipv6("::1")],
        "eth0": [
            Addr(psutil.AF_LINK, "aa:bb:cc:dd:ee:ff", None, None, None),
            ipv6("fe80::1"),
            ipv4("192.168.0.7"),
        ],
    }

    assert _scanner(table, quiet_logger).scan() == ("192.168.0.7",)


def test_loopback_excluded_even_when_prefix_matches(quiet_logger):
    table = {"lo": [ipv4("127.0.0.1")], "lo:1": [ipv4("127.0.1.1")]}

    with pytest.raises(NoMatchingAddressError):
        _scanner(table, quiet_logger, prefix="127").scan()


def test_preserves_enumeration_order_across_interfaces(quiet_logger):
    table = {
        "wlan0": [ipv4("192.168.50.3")],
        "eth0": [ipv4("172.16.0.2"), ipv4("192.168.1.20")],
        "docker0": [ipv4("192.168.99.1")],
    }

    assert _scanner(table, quiet_logger).scan() == (
        "192.168.50.3",
        "192.168.1.20",
        "192.168.99.1",
    )


def test_prefix_is_textual(quiet_logger):
    table = {"eth0": [ipv4("192.16.8.1"), ipv4("192.168.8.1")]}

    assert _scanner(table, quiet_logger).scan() == ("192.168.8.1",)


def test_custom_prefix(quiet_logger):
    table = {"eth0": [ipv4("10.0.0.5"), ipv4("192.168.1.20")]}

    assert _scanner(table, quiet_logger, prefix="10.").scan() == ("10.0.0.5",)


def test_unparsable_address_is_skipped(quiet_logger):
    table = {"tun0": [ipv4("192.168.not-an-ip")], "eth0": [ipv4("192.168.3.3")]}

    assert _scanner(table, quiet_logger).scan() == ("192.168.3.3",)


@pytest.mark.parametrize("error", [OSError("permission denied"), psutil.AccessDenied()])
def test_interface_query_failure_is_distinct(quiet_logger, error):
    def broken():
        raise error

    scanner = AddressScanner(interface_source=broken, logger=quiet_logger)

    with pytest.raises(InterfaceQueryError) as exc_info:
        scanner.scan()

    assert isinstance(exc_info.value, ScanError)
    assert not isinstance(exc_info.value, NoMatchingAddressError)
    assert exc_info.value.error_type == ErrorType.INTERFACE_QUERY_FAILED


def test_default_filter_is_192_168(quiet_logger):
    scanner = AddressScanner(interface_source=lambda: {}, logger=quiet_logger)

    assert scanner.subnet_filter.prefix == "192.168"
    with pytest.raises(NoMatchingAddressError):
        scanner.scan()
