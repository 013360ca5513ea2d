"""
Constants and default values for model conversions.

Defaults used when a Confluence API response omits a field live here so
that the models never carry magic strings of their own.
"""

#
# Common defaults
#
EMPTY_STRING = ""
UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"

#
# Confluence defaults
#
CONFLUENCE_DEFAULT_ID = "0"

# Space defaults
CONFLUENCE_DEFAULT_SPACE = {
    "key": EMPTY_STRING,
    "name": UNKNOWN,
    "id": CONFLUENCE_DEFAULT_ID,
}

# Version defaults
CONFLUENCE_DEFAULT_VERSION = {
    "number": 0,
    "when": EMPTY_STRING,
}

# Content types and statuses
CONFLUENCE_CONTENT_ATTACHMENT = "attachment"
CONFLUENCE_STATUS_CURRENT = "current"
CONFLUENCE_STATUS_TRASHED = "trashed"
