"""Request router for voice assistant skills."""

from skillrouter.exceptions import (
    InvalidApplication,
    InvalidIntent,
    NoMatchingIntent,
    SkillRouterError,
    UnsupportedRequestType,
)
from skillrouter.intent import FunctionIntent, IntentHandler
from skillrouter.models import SkillRequest, SkillResponse, SlotDeclaration
from skillrouter.registry import IntentRegistry
from skillrouter.router import Skill

__all__ = [
    "FunctionIntent",
    "IntentHandler",
    "IntentRegistry",
    "InvalidApplication",
    "InvalidIntent",
    "NoMatchingIntent",
    "Skill",
    "SkillRequest",
    "SkillResponse",
    "SkillRouterError",
    "SlotDeclaration",
    "UnsupportedRequestType",
]
