"""URL-related utility functions for the Confluence SDK."""

import re
from urllib.parse import quote, urlparse, urlsplit, urlunsplit


def is_atlassian_cloud_url(url: str) -> bool:
    """Determine if a URL belongs to Atlassian Cloud or Server/Data Center.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False for Server/Data Center
    """
    # Localhost and IP-based URLs are always Server/Data Center
    if url is None or not url:
        return False

    parsed_url = urlparse(url)
    hostname = parsed_url.hostname or ""

    if (
        hostname == "localhost"
        or re.match(r"^127\.", hostname)
        or re.match(r"^192\.168\.", hostname)
        or re.match(r"^10\.", hostname)
        or re.match(r"^172\.(1[6-9]|2[0-9]|3[0-1])\.", hostname)
    ):
        return False

    return ".atlassian.net" in hostname or ".jira.com" in hostname


def extend_query(url: str, name: str, value: object) -> str:
    """Set a query parameter on a URL, leaving the rest of the query untouched.

    Existing parameters are kept byte for byte, since Confluence links are
    already encoded. An earlier value for ``name`` is replaced.

    Args:
        url: The URL to extend
        name: Parameter name
        value: Parameter value, converted with ``str()`` and percent-encoded

    Returns:
        The URL with the parameter set
    """
    scheme, netloc, path, query, fragment = urlsplit(url)
    params = [p for p in query.split("&") if p and p.split("=", 1)[0] != name]
    params.append(f"{quote(name, safe='')}={quote(str(value), safe='')}")
    return urlunsplit((scheme, netloc, path, "&".join(params), fragment))


def concat_url(base_url: str, path_with_query: str | None) -> str | None:
    """Join a base URL with a relative path that may carry a query string.

    The path is appended as-is; Confluence already returns it encoded.

    Args:
        base_url: Base URL such as ``https://example.atlassian.net/wiki``
        path_with_query: Relative path, e.g. ``/rest/api/content?start=25``

    Returns:
        The absolute URL, or None if there is no path to append

    Raises:
        ValueError: If base_url is empty
    """
    if not base_url:
        raise ValueError("A base URL is required")
    if not path_with_query:
        return None
    return f"{base_url.rstrip('/')}/{path_with_query.lstrip('/')}"
