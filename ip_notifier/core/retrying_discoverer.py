"""
Bounded-duration polling around the address scanner.

At boot the network interface often has no DHCP lease yet, so a single scan
is not enough. The RetryingDiscoverer keeps scanning at a fixed interval
until an address shows up or the time budget is spent.
"""

from typing import Optional

from .address_scanner import AddressScanner
from .clock import Clock, SystemClock
from .data_models import DiscoveryBudget, DiscoveryOutcome, Failed, Found
from ..utils import logger as default_logger
from ..utils.error_handler import NoMatchingAddressError, ScanError


class RetryingDiscoverer:
    """
    Polls an AddressScanner until it succeeds or the budget runs out.

    Scan errors never escape ``discover_with_retry``; the most recent one is
    kept and reported in the Failed outcome.
    """

    def __init__(self, scanner: AddressScanner, clock: Optional[Clock] = None, logger=None):
        """
        Initialize the RetryingDiscoverer.

        Args:
            scanner: Scanner invoked once per attempt
            clock: Time source, defaults to the system clock
            logger: Logger instance for retry messages
        """
        self.scanner = scanner
        self.clock = clock or SystemClock()
        self.logger = logger or default_logger

    def discover_with_retry(self, budget: DiscoveryBudget) -> DiscoveryOutcome:
        """
        Scan until a qualifying address is found or the budget is exhausted.

        The elapsed time is checked after each failed attempt, so the last
        attempt always completes before a timeout is declared, even when it
        runs past the budget.

        Args:
            budget: Maximum duration and retry interval

        Returns:
            Found with the addresses, or Failed with the last scan error
        """
        start = self.clock.monotonic()
        attempts = 0
        last_error: Optional[ScanError] = None

        while True:
            attempts += 1
            try:
                addresses = self.scanner.scan()
            except ScanError as e:
                last_error = e
            else:
                if addresses:
                    elapsed = self.clock.monotonic() - start
                    self.logger.debug(f"Found {len(addresses)} address(es) after {attempts} attempt(s)")
                    return Found(elapsed=elapsed, attempts=attempts, addresses=tuple(addresses))
                last_error = NoMatchingAddressError("Scanner returned an empty address list")

            elapsed = self.clock.monotonic() - start
            if elapsed >= budget.max_duration:
                self.logger.error(
                    f"No qualifying address within {budget.max_duration:g}s",
                    attempts=attempts,
                    last_error=str(last_error),
                )
                return Failed(
                    elapsed=elapsed,
                    attempts=attempts,
                    reason=str(last_error),
                    error_type=last_error.error_type,
                )

            self.logger.warning(
                f"No address found ({last_error}), retrying in {budget.retry_interval:g}s...",
                attempt=attempts,
            )
            self.clock.sleep(budget.retry_interval)
