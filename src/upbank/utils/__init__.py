"""Utility modules for upbank.

This package provides the file-backed user configuration store that holds the
Up API token.
"""

from .user_config import ConfigStore, UserConfig, get_user_config_path

__all__ = ["ConfigStore", "UserConfig", "get_user_config_path"]
