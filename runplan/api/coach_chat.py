from fastapi import APIRouter
from loguru import logger

from runplan.coach.responder import GREETING, generate_coach_response
from runplan.coach.schemas import CoachChatRequest, CoachChatResponse
from runplan.coach.topics import CoachTopic

router = APIRouter(prefix="/coach", tags=["coach"])


@router.get("/greeting", response_model=CoachChatResponse)
def coach_greeting() -> CoachChatResponse:
    return CoachChatResponse(topic=CoachTopic.GENERAL, reply=GREETING)


@router.post("/chat", response_model=CoachChatResponse)
def coach_chat(req: CoachChatRequest) -> CoachChatResponse:
    """Answer a single question with the scripted coach."""
    logger.info(f"Coach chat request: {req.message}")
    topic, reply = generate_coach_response(req.message)
    return CoachChatResponse(topic=topic, reply=reply)
