"""Message models exchanged with the broker."""

from pydantic import BaseModel


class NsqEvent(BaseModel, frozen=True):
    """An outgoing message: raw payload bytes routed to a topic."""

    topic: str
    message: bytes


class DeliveredMessage(BaseModel, frozen=True):
    """An inbound message handed to a consumer handler."""

    topic: str
    body: str
    attempts: int = 1
