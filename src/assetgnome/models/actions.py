"""Models for user actions recorded while offline.

Actions (e.g. an item was played) are journaled locally and later replayed
against the server they belong to.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserActionType(str, Enum):
    """Kind of user action."""

    PLAYED_ITEM = "played_item"


class UserActionRecord(BaseModel):
    """A user action awaiting upload to its server.

    The id is assigned when the action is recorded and the record is immutable
    afterwards.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    server_id: str
    user_id: Optional[str] = None
    item_id: Optional[str] = None
    type: UserActionType = UserActionType.PLAYED_ITEM
    position_ticks: Optional[int] = None
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
