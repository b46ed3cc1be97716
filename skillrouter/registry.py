"""Name-keyed store of intent handlers with separate default and launch slots.

The default and launch handlers are independent references: they need not
be registered by name, and clearing one never touches the name map.
"""

import logging
from typing import Dict, List, Optional

from skillrouter.exceptions import InvalidIntent
from skillrouter.intent import IntentHandler

log = logging.getLogger(__name__)


class IntentRegistry:
    def __init__(self):
        self.handlers: Dict[str, IntentHandler] = {}
        self.default: Optional[IntentHandler] = None
        self.launch: Optional[IntentHandler] = None

    def register(self, handler: Optional[IntentHandler]) -> None:
        """Register ``handler`` under its name; a later registration of the same name wins."""
        if handler is None:
            raise InvalidIntent("Cannot register a missing intent handler")
        name = handler.name
        if not name or not name.strip():
            raise InvalidIntent("Intent handler name must not be blank", details={"handler": repr(handler)})
        if name in self.handlers:
            log.warning("Intent '%s' is already registered, replacing it with %r", name, handler)
        self.handlers[name] = handler
        log.debug("Registered intent '%s'", name)

    def unregister(self, name: Optional[str]) -> None:
        if not name or not name.strip():
            return
        if self.handlers.pop(name, None) is not None:
            log.debug("Unregistered intent '%s'", name)

    def get(self, name: Optional[str]) -> Optional[IntentHandler]:
        if name is None:
            return None
        return self.handlers.get(name)

    def intents(self) -> List[IntentHandler]:
        """Registered handlers in registration order."""
        return list(self.handlers.values())

    def set_default(self, handler: Optional[IntentHandler]) -> None:
        self.default = handler

    def clear_default(self) -> None:
        self.default = None

    def set_launch(self, handler: Optional[IntentHandler]) -> None:
        self.launch = handler

    def clear_launch(self) -> None:
        self.launch = None

    def __contains__(self, name: object) -> bool:
        return name in self.handlers

    def __len__(self) -> int:
        return len(self.handlers)
