"""Request router for a voice skill.

Validates that a request belongs to this skill, classifies it by type and
hands it to the matching intent handler. Handler results are returned as-is;
the router only builds a response itself for launches without a launch
handler and for session end.
"""

import logging
from typing import Callable, Iterable, List, Optional

from skillrouter import schema
from skillrouter.exceptions import InvalidApplication, NoMatchingIntent, UnsupportedRequestType
from skillrouter.intent import FunctionIntent, IntentHandler, SlotSpec
from skillrouter.models import (
    INTENT_REQUEST,
    LAUNCH_REQUEST,
    SESSION_ENDED_REQUEST,
    SkillRequest,
    SkillResponse,
)
from skillrouter.registry import IntentRegistry

log = logging.getLogger(__name__)

HandlerFunc = Callable[[SkillRequest], SkillResponse]


class Skill:
    """One skill definition: its intents and the application id it answers to.

    An empty ``application_id`` turns the identity check off. That is meant
    for local development only; in production it lets any caller through.

    Subclasses can replace ``on_launch``, ``on_intent``, ``on_session_ended``
    or ``match_intent`` to change how a request type is handled.

    The registry is not locked. Callers sharing a skill between threads
    while changing its intents must synchronise themselves.
    """

    def __init__(self, application_id: Optional[str] = None):
        self.application_id = application_id or ""
        self.registry = IntentRegistry()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def add_intent(self, handler: IntentHandler) -> None:
        self.registry.register(handler)

    def remove_intent(self, name: str) -> None:
        self.registry.unregister(name)

    @property
    def intents(self) -> List[IntentHandler]:
        return self.registry.intents()

    @property
    def default_intent(self) -> Optional[IntentHandler]:
        return self.registry.default

    @default_intent.setter
    def default_intent(self, handler: Optional[IntentHandler]) -> None:
        self.registry.set_default(handler)

    @property
    def launch_intent(self) -> Optional[IntentHandler]:
        return self.registry.launch

    @launch_intent.setter
    def launch_intent(self, handler: Optional[IntentHandler]) -> None:
        self.registry.set_launch(handler)

    def intent(
        self, name: str, slots: Iterable[SlotSpec] = (), utterances: Iterable[str] = ()
    ) -> Callable[[HandlerFunc], HandlerFunc]:
        """Decorator registering a function as the handler for intent ``name``."""
        def decorator(func: HandlerFunc) -> HandlerFunc:
            self.add_intent(FunctionIntent(name, func, slots=slots, utterances=utterances))
            return func
        return decorator

    def default(self, name: str = "Default") -> Callable[[HandlerFunc], HandlerFunc]:
        """Decorator installing a function as the fallback for unknown intents."""
        def decorator(func: HandlerFunc) -> HandlerFunc:
            self.registry.set_default(FunctionIntent(name, func))
            return func
        return decorator

    def launch(self, name: str = "Launch") -> Callable[[HandlerFunc], HandlerFunc]:
        """Decorator installing a function as the launch handler."""
        def decorator(func: HandlerFunc) -> HandlerFunc:
            self.registry.set_launch(FunctionIntent(name, func))
            return func
        return decorator

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def execute(self, request: SkillRequest) -> SkillResponse:
        """Validate ``request`` and route it by type.

        Raises:
            InvalidApplication: the request names another application.
            UnsupportedRequestType: the type is not launch, intent or session end.
            NoMatchingIntent: no intent and no default intent can take it.
        """
        self.validate(request)
        request_type = request.request_type
        log.debug("Dispatching %s", request_type)
        if request_type == LAUNCH_REQUEST:
            return self.on_launch(request)
        if request_type == INTENT_REQUEST:
            return self.on_intent(request)
        if request_type == SESSION_ENDED_REQUEST:
            return self.on_session_ended(request)
        raise UnsupportedRequestType(request_type)

    def validate(self, request: SkillRequest) -> None:
        if not self.application_id:
            return
        received = request.application_id
        if received != self.application_id:
            log.warning("Rejected request for application '%s'", received)
            raise InvalidApplication(self.application_id, received)

    def on_launch(self, request: SkillRequest) -> SkillResponse:
        handler = self.registry.launch
        if handler is not None:
            return handler.execute(request)
        return SkillResponse.acknowledge()

    def on_intent(self, request: SkillRequest) -> SkillResponse:
        name = request.intent_name
        handler = self.match_intent(name)
        if handler is None:
            handler = self.registry.default
            if handler is None:
                raise NoMatchingIntent(name)
            log.debug("No intent '%s', using default %r", name, handler)
        return handler.execute(request)

    def on_session_ended(self, request: SkillRequest) -> SkillResponse:
        return SkillResponse.acknowledge()

    def match_intent(self, name: Optional[str]) -> Optional[IntentHandler]:
        """Find the handler for intent ``name``; exact, case-sensitive by default."""
        return self.registry.get(name)

    # ------------------------------------------------------------------
    # Interaction model export
    # ------------------------------------------------------------------
    def export_schema(self) -> str:
        return schema.export_schema(self.registry)

    def export_utterances(self) -> str:
        return schema.export_utterances(self.registry)
