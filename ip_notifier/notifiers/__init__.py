"""
Notification backends.
"""

from .base_notifier import BaseNotifier
from .gotify_notifier import GotifyNotifier

__all__ = ['BaseNotifier', 'GotifyNotifier']
