"""Request and response envelopes exchanged with the voice platform.

The platform owns the wire format. These models only name the parts the
router reads (request type, intent name, application id) and the parts it
writes when it answers on its own. Unknown fields are kept so handlers see
the whole payload.

Wire names are camelCase; attributes are snake_case::

    req = SkillRequest.model_validate_json(body)
    req.request_type      # "IntentRequest"
    req.intent_name       # "Hello"
    req.slot_value("Sign")
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PROTOCOL_VERSION = "1.0"

LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


# ---------------------------------------------------------------------------
# Request side
# ---------------------------------------------------------------------------
class Application(WireModel):
    application_id: Optional[str] = None


class User(WireModel):
    user_id: Optional[str] = None
    access_token: Optional[str] = None


class Session(WireModel):
    session_id: Optional[str] = None
    new: bool = False
    application: Optional[Application] = None
    attributes: Dict[str, Any] = Field(default_factory=dict)
    user: Optional[User] = None


class SlotValue(WireModel):
    name: str
    value: Optional[str] = None


class IntentPayload(WireModel):
    name: str
    slots: Dict[str, SlotValue] = Field(default_factory=dict)


class RequestBody(WireModel):
    type: str
    request_id: Optional[str] = None
    timestamp: Optional[str] = None
    locale: Optional[str] = None
    intent: Optional[IntentPayload] = None
    reason: Optional[str] = None


class SkillRequest(WireModel):
    version: str = PROTOCOL_VERSION
    session: Optional[Session] = None
    request: RequestBody

    @property
    def request_type(self) -> str:
        return self.request.type

    @property
    def intent_name(self) -> Optional[str]:
        if self.request.intent is None:
            return None
        return self.request.intent.name

    @property
    def application_id(self) -> Optional[str]:
        if self.session is None or self.session.application is None:
            return None
        return self.session.application.application_id

    def slot_value(self, name: str) -> Optional[str]:
        """Return the spoken value of slot ``name``, or None if it was not filled."""
        if self.request.intent is None:
            return None
        slot = self.request.intent.slots.get(name)
        return slot.value if slot else None


# ---------------------------------------------------------------------------
# Response side
# ---------------------------------------------------------------------------
class OutputSpeech(WireModel):
    type: str = "PlainText"
    text: str


class Reprompt(WireModel):
    output_speech: OutputSpeech


class Card(WireModel):
    type: str = "Simple"
    title: str
    content: str = ""


class ResponseBody(WireModel):
    should_end_session: bool
    output_speech: Optional[OutputSpeech] = None
    reprompt: Optional[Reprompt] = None
    card: Optional[Card] = None


class SkillResponse(WireModel):
    version: str = PROTOCOL_VERSION
    session_attributes: Optional[Dict[str, Any]] = None
    response: ResponseBody

    @classmethod
    def acknowledge(cls) -> "SkillResponse":
        """Neutral answer the router gives on its own; the session stays open."""
        return cls(response=ResponseBody(should_end_session=False))

    @classmethod
    def speak(
        cls,
        text: str,
        end_session: bool = True,
        reprompt: Optional[str] = None,
        card_title: Optional[str] = None,
    ) -> "SkillResponse":
        """Build a plain-text spoken answer, optionally with a reprompt and a simple card."""
        body = ResponseBody(should_end_session=end_session, output_speech=OutputSpeech(text=text))
        if reprompt:
            body.reprompt = Reprompt(output_speech=OutputSpeech(text=reprompt))
        if card_title:
            body.card = Card(title=card_title, content=text)
        return cls(response=body)

    @property
    def should_end_session(self) -> bool:
        return self.response.should_end_session

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Configuration-time export documents
# ---------------------------------------------------------------------------
class SlotDeclaration(BaseModel):
    name: str
    type: str


class IntentSchemaEntry(BaseModel):
    intent: str
    slots: List[SlotDeclaration] = Field(default_factory=list)


class IntentSchema(BaseModel):
    intents: List[IntentSchemaEntry] = Field(default_factory=list)
