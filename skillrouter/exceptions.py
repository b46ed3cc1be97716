"""Errors raised while registering intents or dispatching a request.

Every error aborts the request in flight. Nothing here is caught inside the
package; the hosting layer decides how to report them.
"""

from typing import Optional


class SkillRouterError(Exception):
    """Base class for the router's errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidApplication(SkillRouterError):
    """Raised when the request comes from an application other than the configured one."""

    def __init__(self, expected: str, received: Optional[str]):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Request application '{received}' does not match this skill",
            details={"expected": expected, "received": received},
        )


class UnsupportedRequestType(SkillRouterError):
    """Raised for a request type other than launch, intent or session end."""

    def __init__(self, request_type: str):
        self.request_type = request_type
        super().__init__(f"Unsupported request type '{request_type}'", details={"request_type": request_type})


class NoMatchingIntent(SkillRouterError):
    """Raised when no registered intent and no default intent can take the request."""

    def __init__(self, intent_name: Optional[str]):
        self.intent_name = intent_name
        super().__init__(f"No intent registered for '{intent_name}'", details={"intent_name": intent_name})


class InvalidIntent(SkillRouterError):
    """Raised when registering a missing handler or one without a name."""
