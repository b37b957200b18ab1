"""
IP Notifier

Discovers this host's private IPv4 addresses on a target subnet and reports
them through a Gotify push notification, retrying while the network comes up.
"""

__version__ = "1.0.0"
__author__ = "IP Notifier Team"
