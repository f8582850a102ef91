"""Message queuing (Marconi) models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MessageAge(BaseModel):
    """Oldest/newest message marker within queue stats."""

    id: str | None = None
    href: str | None = None
    age: int = Field(0, ge=0)
    created: datetime | None = None

    model_config = ConfigDict(frozen=True)


class MessagesStats(BaseModel):
    """Message counts for a queue.

    ``oldest`` and ``newest`` are absent when the queue holds no messages.
    """

    claimed: int = Field(0, ge=0)
    free: int = Field(0, ge=0)
    total: int = Field(0, ge=0)
    oldest: MessageAge | None = None
    newest: MessageAge | None = None

    model_config = ConfigDict(frozen=True)


class QueueStats(BaseModel):
    """Queue statistics (``GET queues/{name}/stats``)."""

    messages: MessagesStats

    model_config = ConfigDict(frozen=True)
