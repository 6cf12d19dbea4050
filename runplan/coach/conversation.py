"""In-memory coach conversation.

A conversation lives only as long as the object holding it.
"""

import uuid
from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from runplan.coach.responder import GREETING, generate_coach_response
from runplan.coach.topics import CoachTopic


def _now() -> datetime:
    return datetime.now(UTC)


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    content: str
    sender: Literal["user", "ai"]
    timestamp: datetime = Field(default_factory=_now)
    topic: CoachTopic | None = None


class CoachConversation:
    """Message history between the runner and the scripted coach."""

    def __init__(self) -> None:
        self.messages: list[Message] = [Message(content=GREETING, sender="ai")]

    def send(self, text: str) -> Message | None:
        """Post a question and append the coach's reply.

        Args:
            text: Runner's message

        Returns:
            The coach's reply message, or None if the message was blank
        """
        if not text.strip():
            return None

        self.messages.append(Message(content=text, sender="user"))
        topic, reply = generate_coach_response(text)
        message = Message(content=reply, sender="ai", topic=topic)
        self.messages.append(message)
        return message
