"""Scripted coach replies.

The coach matches keywords in the runner's question, in a fixed order, and
returns canned advice. First match wins; anything unmatched gets the
general reply. There is no model behind it and no memory between questions.
"""

from dataclasses import dataclass

from loguru import logger

from runplan.coach.topics import CoachTopic

GREETING = (
    "Hi there! I'm your AI running coach. I can help with questions about your training plan, "
    "running technique, nutrition, recovery, and more. What would you like to know?"
)


@dataclass(frozen=True)
class CoachRule:
    topic: CoachTopic
    keywords: tuple[str, ...]
    reply: str


COACH_RULES: tuple[CoachRule, ...] = (
    CoachRule(
        topic=CoachTopic.INJURY,
        keywords=("injury", "pain"),
        reply=(
            "If you're experiencing pain or an injury, it's important to rest and possibly consult a "
            "healthcare professional. The RICE method (Rest, Ice, Compression, Elevation) can help with "
            "minor issues. Consider cross-training activities like swimming or cycling that don't aggravate "
            "the injury while you recover."
        ),
    ),
    CoachRule(
        topic=CoachTopic.NUTRITION,
        keywords=("nutrition", "food", "eat"),
        reply=(
            "For runners, proper nutrition is crucial. Focus on complex carbohydrates for energy, lean "
            "proteins for muscle repair, and healthy fats. Hydration is also key - aim to drink water "
            "throughout the day. Before long runs (>60 minutes), consider carb-loading, and refuel within "
            "30 minutes after with a 4:1 carb-to-protein ratio for optimal recovery."
        ),
    ),
    CoachRule(
        topic=CoachTopic.SPEED,
        keywords=("improve", "faster", "speed"),
        reply=(
            "To improve your running speed, incorporate variety in your training: 1) Add interval training "
            "(e.g., 400m repeats at 5K pace with recovery jogs), 2) Include tempo runs at a comfortably hard "
            "pace, 3) Don't neglect your long, slow runs which build endurance, 4) Strength training, "
            "especially for your core and legs, can significantly improve running economy. Consistency is key!"
        ),
    ),
    CoachRule(
        topic=CoachTopic.BEGINNER,
        keywords=("beginner", "start", "new"),
        reply=(
            "Welcome to running! Start with a run/walk approach - try 1 minute running, 2 minutes walking, "
            "and repeat. Gradually increase your running intervals. Focus on time, not distance initially. "
            "Good running form is key: short strides, land midfoot, relaxed shoulders, and gaze forward. "
            "Most importantly, progress slowly to avoid injury - follow the 10% rule for increasing weekly "
            "mileage."
        ),
    ),
    CoachRule(
        topic=CoachTopic.RECOVERY,
        keywords=("recovery", "rest"),
        reply=(
            "Recovery is when your body adapts and gets stronger! Incorporate easy days between hard "
            "workouts, get 7-9 hours of sleep, stay hydrated, and consider foam rolling or gentle stretching. "
            "Active recovery (very light exercise) can be more beneficial than complete rest. Listen to your "
            "body - persistent fatigue is a warning sign that you need more recovery time."
        ),
    ),
)

DEFAULT_REPLY = (
    "That's a great question about running! While I don't have a specific answer prepared, the key "
    "principles of effective training include consistency, gradual progression, variety in workouts, and "
    "proper recovery. Would you like more specific information about training plans, nutrition, injury "
    "prevention, or running technique?"
)


def match_topic(question: str) -> CoachRule | None:
    """Find the first rule whose keywords appear in the question.

    Matching is a case-insensitive substring test, so "eat" also matches
    "great" and "rest" matches "interested".
    """
    lowered = question.lower()
    for rule in COACH_RULES:
        if any(keyword in lowered for keyword in rule.keywords):
            return rule
    return None


def generate_coach_response(question: str) -> tuple[CoachTopic, str]:
    """Answer a runner's question.

    Args:
        question: Free-text question

    Returns:
        (topic, reply) - GENERAL topic with the default reply when nothing matches
    """
    rule = match_topic(question)
    if rule is None:
        logger.debug("No coach rule matched, using default reply")
        return CoachTopic.GENERAL, DEFAULT_REPLY
    logger.debug(f"Coach rule matched: {rule.topic}")
    return rule.topic, rule.reply
