"""Intent handlers: the units of behaviour a skill routes requests to."""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Tuple, Union

from skillrouter.models import SkillRequest, SkillResponse, SlotDeclaration

SlotSpec = Union[SlotDeclaration, Tuple[str, str]]


def _as_slot(spec: SlotSpec) -> SlotDeclaration:
    if isinstance(spec, SlotDeclaration):
        return spec
    name, slot_type = spec
    return SlotDeclaration(name=name, type=slot_type)


class IntentHandler(ABC):
    """A named handler for one recognised intent.

    The router only looks at ``name``. ``slots`` and ``utterances`` are read
    when exporting the interaction model and never at request time.

    Usage::
        class HelloIntent(IntentHandler):
            def __init__(self):
                super().__init__("Hello", utterances=["say hello", "greet me"])

            def execute(self, request):
                return SkillResponse.speak("Hello there")
    """

    def __init__(self, name: str, slots: Iterable[SlotSpec] = (), utterances: Iterable[str] = ()):
        self.name = name
        self.slots: List[SlotDeclaration] = [_as_slot(s) for s in slots]
        self.utterances: List[str] = list(utterances)

    @abstractmethod
    def execute(self, request: SkillRequest) -> SkillResponse:
        """Produce the response for ``request``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class FunctionIntent(IntentHandler):
    """Adapts a plain ``func(request) -> SkillResponse`` callable."""

    def __init__(
        self,
        name: str,
        func: Callable[[SkillRequest], SkillResponse],
        slots: Iterable[SlotSpec] = (),
        utterances: Iterable[str] = (),
    ):
        super().__init__(name, slots=slots, utterances=utterances)
        self.func = func

    def execute(self, request: SkillRequest) -> SkillResponse:
        return self.func(request)
