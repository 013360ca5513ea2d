"""
Confluence label models.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import CONFLUENCE_DEFAULT_ID, EMPTY_STRING

logger = logging.getLogger(__name__)


class ConfluenceLabel(ApiModel):
    """
    Model representing a Confluence label.
    """

    id: str = CONFLUENCE_DEFAULT_ID
    name: str = EMPTY_STRING
    prefix: str = "global"
    label: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceLabel":
        if not data:
            return cls()

        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            name=data.get("name", EMPTY_STRING),
            prefix=data.get("prefix", "global"),
            label=data.get("label", EMPTY_STRING),
        )
