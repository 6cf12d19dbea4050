from pydantic import BaseModel, Field

from runplan.coach.topics import CoachTopic


class CoachChatRequest(BaseModel):
    message: str = Field(min_length=1)


class CoachChatResponse(BaseModel):
    topic: CoachTopic
    reply: str
