from enum import StrEnum


class CoachTopic(StrEnum):
    INJURY = "injury"
    NUTRITION = "nutrition"
    SPEED = "speed"
    BEGINNER = "beginner"
    RECOVERY = "recovery"
    GENERAL = "general"
