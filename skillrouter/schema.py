"""Interaction-model exports for registering the skill with the voice platform.

Both documents are projections of the registry and are produced on demand;
nothing on the request path reads them.
"""

from skillrouter.models import IntentSchema, IntentSchemaEntry
from skillrouter.registry import IntentRegistry


def export_schema(registry: IntentRegistry) -> str:
    """Pretty-printed JSON intent schema, ``{"intents": [...]}`` even when empty."""
    schema = IntentSchema(
        intents=[IntentSchemaEntry(intent=h.name, slots=list(h.slots)) for h in registry.intents()]
    )
    return schema.model_dump_json(indent=2)


def export_utterances(registry: IntentRegistry) -> str:
    """One ``<IntentName> <utterance>`` line per sample utterance, newline-joined."""
    lines = []
    for handler in registry.intents():
        for utterance in handler.utterances:
            lines.append(f"{handler.name} {utterance}")
    return "\n".join(lines)
