"""Domain models.

All models are Pydantic v2 and immutable (frozen=True). Fields that the
service payload does not carry (zone, URI, container) are filled in by
the response adapters from request context.
"""

from .link import Link, next_marker
from .network import Port, ReferenceWithName, Router
from .queue import MessageAge, MessagesStats, QueueStats
from .storage import Container, ObjectList, PayloadInfo, Segment, SwiftObject

__all__ = [
    "Container",
    "Link",
    "MessageAge",
    "MessagesStats",
    "ObjectList",
    "PayloadInfo",
    "Port",
    "QueueStats",
    "ReferenceWithName",
    "Router",
    "Segment",
    "SwiftObject",
    "next_marker",
]
