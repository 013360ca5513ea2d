"""
Utility functions for the Confluence SDK.
"""

from .date import parse_date
from .logging import mask_sensitive, setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification
from .urls import concat_url, extend_query, is_atlassian_cloud_url

__all__ = [
    "SSLIgnoreAdapter",
    "configure_ssl_verification",
    "concat_url",
    "extend_query",
    "is_atlassian_cloud_url",
    "mask_sensitive",
    "parse_date",
    "setup_logging",
]
