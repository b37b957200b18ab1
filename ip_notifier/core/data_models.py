"""
Core data models for the IP notifier.

This module defines the subnet filter, the discovery budget, the tagged
discovery outcome returned by the retry loop, and the notification report
built from it.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from ..utils.error_handler import ErrorType, ValidationError

DEFAULT_SUBNET_PREFIX = "192.168"
DEFAULT_MAX_DURATION = 60.0  # seconds
DEFAULT_RETRY_INTERVAL = 5.0  # seconds

# Ordered IPv4 address strings, in interface enumeration order
AddressList = Tuple[str, ...]


@dataclass(frozen=True)
class SubnetFilter:
    """
    Textual prefix that qualifying addresses must start with.

    Attributes:
        prefix: Address prefix, e.g. "192.168"
    """
    prefix: str = DEFAULT_SUBNET_PREFIX

    def matches(self, address: str) -> bool:
        return address.startswith(self.prefix)


@dataclass(frozen=True)
class DiscoveryBudget:
    """
    Time limits for the discovery loop.

    Attributes:
        max_duration: Total seconds to keep polling before giving up
        retry_interval: Seconds to wait between two failed attempts
    """
    max_duration: float = DEFAULT_MAX_DURATION
    retry_interval: float = DEFAULT_RETRY_INTERVAL

    def __post_init__(self):
        if not math.isfinite(self.max_duration) or self.max_duration <= 0:
            raise ValidationError(f"max_duration must be a positive finite number, got {self.max_duration}")
        if not math.isfinite(self.retry_interval) or self.retry_interval <= 0:
            raise ValidationError(f"retry_interval must be a positive finite number, got {self.retry_interval}")


@dataclass(frozen=True)
class DiscoveryOutcome(ABC):
    """
    Terminal result of a discovery run.

    Attributes:
        elapsed: Seconds between the start of the loop and the outcome
        attempts: Number of scan attempts performed
    """
    elapsed: float
    attempts: int

    @property
    @abstractmethod
    def succeeded(self) -> bool:
        pass


@dataclass(frozen=True)
class Found(DiscoveryOutcome):
    """At least one qualifying address was found."""
    addresses: AddressList = ()

    def __post_init__(self):
        if not self.addresses:
            raise ValidationError("Found outcome requires at least one address")

    @property
    def succeeded(self) -> bool:
        return True


@dataclass(frozen=True)
class Failed(DiscoveryOutcome):
    """
    The budget ran out without a qualifying address.

    Attributes:
        reason: Message of the last scan error
        error_type: Type of the last scan error
    """
    reason: str = ""
    error_type: Optional[ErrorType] = None

    @property
    def succeeded(self) -> bool:
        return False


@dataclass(frozen=True)
class NotificationReport:
    """Title and body handed to a notifier."""
    title: str
    message: str
