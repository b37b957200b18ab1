"""Shared fixtures: a fake clock and psutil-shaped interface tables."""

from __future__ import annotations

import socket
from collections import namedtuple

import pytest

from ip_notifier.core.clock import Clock
from ip_notifier.utils.logger import LogLevel, Logger


# Same shape as psutil._common.snicaddr
Addr = namedtuple("Addr", ["family", "address", "netmask", "broadcast", "ptp"])


def ipv4(address: str) -> Addr:
    return Addr(socket.AF_INET, address, "255.255.255.0", None, None)


def ipv6(address: str) -> Addr:
    return Addr(socket.AF_INET6, address, "ffff:ffff:ffff:ffff::", None, None)


class FakeClock(Clock):
    """Clock whose time only moves when something sleeps or calls advance()."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def quiet_logger() -> Logger:
    return Logger("test", min_level=LogLevel.ERROR)
