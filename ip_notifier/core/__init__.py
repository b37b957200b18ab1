"""
Core components for local address discovery.
"""

from .data_models import (
    AddressList,
    SubnetFilter,
    DiscoveryBudget,
    DiscoveryOutcome,
    Found,
    Failed,
    NotificationReport
)
from .clock import Clock, SystemClock
from .address_scanner import AddressScanner
from .retrying_discoverer import RetryingDiscoverer
from .report_builder import build_report, resolve_hostname, UNKNOWN_HOST

__all__ = [
    'AddressList',
    'SubnetFilter',
    'DiscoveryBudget',
    'DiscoveryOutcome',
    'Found',
    'Failed',
    'NotificationReport',
    'Clock',
    'SystemClock',
    'AddressScanner',
    'RetryingDiscoverer',
    'build_report',
    'resolve_hostname',
    'UNKNOWN_HOST'
]
