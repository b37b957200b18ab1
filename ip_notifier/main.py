"""
Main entry point for the IP notifier.

This module provides the command-line interface: it discovers the host's
addresses on the configured subnet, builds one report and delivers it as a
single Gotify notification.
"""

import argparse
import socket
import sys
from typing import Callable, Optional

import psutil

from . import __version__
from .config.config_loader import ConfigLoader, DiscoveryConfig, GotifyConfig
from .core.address_scanner import AddressScanner, InterfaceSource
from .core.clock import Clock
from .core.data_models import DiscoveryOutcome, Found
from .core.report_builder import build_report, resolve_hostname
from .core.retrying_discoverer import RetryingDiscoverer
from .notifiers.base_notifier import BaseNotifier
from .notifiers.gotify_notifier import GotifyNotifier
from .utils.error_handler import (
    ConfigurationError, ErrorHandler, IPNotifierError, NotifyError
)
from .utils.logger import LogLevel, get_logger, set_log_level

NotifierFactory = Callable[[GotifyConfig], BaseNotifier]


class IPNotifierApp:
    """
    Main application class for the IP notifier.

    Runs one discovery, sends exactly one notification and maps the result to
    a process exit code.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        interface_source: InterfaceSource = psutil.net_if_addrs,
        hostname_source: Callable[[], str] = socket.gethostname,
        notifier_factory: Optional[NotifierFactory] = None,
    ):
        """
        Initialize the application.

        Args:
            clock: Time source for the discovery loop (system clock if omitted)
            interface_source: Interface address table provider
            hostname_source: Host name provider
            notifier_factory: Builds the notifier from the Gotify settings
        """
        self.logger = get_logger(__name__)
        self.error_handler = ErrorHandler(self.logger)
        self.clock = clock
        self.interface_source = interface_source
        self.hostname_source = hostname_source
        self.notifier_factory = notifier_factory or self._create_gotify_notifier

    def _create_gotify_notifier(self, gotify: GotifyConfig) -> BaseNotifier:
        return GotifyNotifier(
            server_url=gotify.server_url,
            token=gotify.token,
            priority=gotify.priority,
            timeout=gotify.timeout,
            logger=self.logger,
        )

    def _discover(self, hostname: str, discovery: DiscoveryConfig) -> DiscoveryOutcome:
        """
        Run the bounded discovery loop once.

        Args:
            hostname: Host name shown in the summary
            discovery: Discovery settings

        Returns:
            DiscoveryOutcome: Found or Failed
        """
        self.logger.section("ADDRESS DISCOVERY")
        budget = discovery.budget
        self.logger.info(
            f"Looking for {discovery.subnet_prefix}.* addresses",
            max_duration=f"{budget.max_duration:g}s",
            retry_interval=f"{budget.retry_interval:g}s",
        )

        scanner = AddressScanner(
            subnet_filter=discovery.subnet_filter,
            interface_source=self.interface_source,
            logger=self.logger,
        )
        discoverer = RetryingDiscoverer(scanner, clock=self.clock, logger=self.logger)
        outcome = discoverer.discover_with_retry(budget)

        if isinstance(outcome, Found):
            self.logger.address_summary(hostname, discovery.subnet_prefix, outcome.addresses)
        else:
            self.logger.warning(
                f"Discovery failed after {outcome.attempts} attempt(s): {outcome.reason}"
            )
        return outcome

    def run(self, args: argparse.Namespace) -> int:
        """
        Run the IP notifier.

        Args:
            args: Parsed command line arguments

        Returns:
            int: Exit code (0 when the notification was delivered)
        """
        config_loader = ConfigLoader(args.config, logger=self.logger)

        try:
            if args.init_config:
                config_loader.create_default_config()
                return 0

            hostname = resolve_hostname(self.hostname_source)
            config = config_loader.load()
            self.logger.debug(f"Loaded configuration from {config_loader.config_path}")

            outcome = self._discover(hostname, config.discovery)
            report = build_report(hostname, outcome)

            self.logger.section("NOTIFICATION")
            self.logger.info(f"Sending notification: {report.title}")
            notifier = self.notifier_factory(config.gotify)
            notifier.send(report.title, report.message)

            self.logger.success("Notification sent successfully!")
            return 0

        except ConfigurationError as e:
            context = self.error_handler.context_for(
                e, "load", "ConfigLoader", config_file=str(config_loader.config_path)
            )
            self.error_handler.handle_error(e, context)
            return 1
        except NotifyError as e:
            context = self.error_handler.context_for(e, "send", "GotifyNotifier")
            self.error_handler.handle_error(e, context)
            return 1
        except IPNotifierError as e:
            context = self.error_handler.context_for(e, "run", "IPNotifierApp")
            self.error_handler.handle_error(e, context)
            return 1
        except KeyboardInterrupt:
            self.logger.warning("Interrupted by user")
            return 130  # Standard exit code for SIGINT


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="ip_notifier",
        description="IP Notifier - report this host's local network addresses to a Gotify server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m ip_notifier                                # Use ./notifier_config.yml
  python -m ip_notifier --config /etc/ip_notifier.yml  # Use a custom config file
  python -m ip_notifier --init-config                  # Write a template config file
  python -m ip_notifier --verbose                      # Enable verbose logging
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="YAML configuration file with the gotify and discovery sections. "
             "Defaults to notifier_config.yml in the current directory"
    )

    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a template configuration file and exit"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging output"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"IP Notifier {__version__}"
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the IP notifier.

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(LogLevel.DEBUG)

    app = IPNotifierApp()
    return app.run(args)


if __name__ == "__main__":
    sys.exit(main())
