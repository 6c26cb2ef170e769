"""
Utility functions for the MCP Confluence integration.
"""

from .env import getenv_with_fallback, is_env_ssl_verify
from .io import is_read_only_mode
from .logging import log_config_param, mask_sensitive
from .urls import is_atlassian_cloud_url, normalize_site_url

__all__ = [
    "getenv_with_fallback",
    "is_atlassian_cloud_url",
    "is_env_ssl_verify",
    "is_read_only_mode",
    "log_config_param",
    "mask_sensitive",
    "normalize_site_url",
]
