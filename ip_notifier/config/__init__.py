"""
Configuration module for the IP notifier.
Provides loading and validation of the YAML configuration file.
"""

from .config_loader import ConfigLoader, GotifyConfig, DiscoveryConfig, NotifierConfig, DEFAULT_CONFIG_FILE

__all__ = ['ConfigLoader', 'GotifyConfig', 'DiscoveryConfig', 'NotifierConfig', 'DEFAULT_CONFIG_FILE']
