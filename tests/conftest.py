from typing import Optional

import pytest

from skillrouter.models import SkillRequest

APP_ID = "amzn1.ask.skill.test"


@pytest.fixture
def make_request():
    """Build a platform request of the given type."""
    def _make(request_type: str, intent: Optional[str] = None, application_id: Optional[str] = APP_ID,
              slots: Optional[dict] = None) -> SkillRequest:
        body = {"type": request_type, "requestId": "req-1", "locale": "en-US"}
        if intent is not None:
            body["intent"] = {
                "name": intent,
                "slots": {k: {"name": k, "value": v} for k, v in (slots or {}).items()},
            }
        payload = {
            "version": "1.0",
            "session": {
                "sessionId": "session-1",
                "new": True,
                "application": {"applicationId": application_id},
            },
            "request": body,
        }
        return SkillRequest.model_validate(payload)
    return _make
