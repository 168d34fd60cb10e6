"""Sequence diagram builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

from mystery_forge.core.text_sanitizer import quote, sanitize_text
from mystery_forge.diagrams.common import INDENT

ParticipantKind = Literal["participant", "actor"]
MessageType = Literal["solid", "dotted", "async", "sync"]

# "sync" has no entry of its own and renders with the solid arrow.
_MESSAGE_ARROWS: Final[dict[str, str]] = {
    "solid": "->>",
    "dotted": "-->>",
    "async": "-)",
}
_DEFAULT_ARROW: Final = "->>"


@dataclass(frozen=True)
class Participant:
    id: str
    alias: str | None = None
    kind: ParticipantKind = "participant"


@dataclass(frozen=True)
class Message:
    from_id: str
    to_id: str
    text: str
    type: MessageType | str = "solid"
    activate: bool = False
    deactivate: bool = False


class SequenceDiagramBuilder:
    """Participants in declaration order, then messages in call order."""

    def __init__(self, autonumber: bool = False) -> None:
        self._autonumber = autonumber
        self._participants: list[Participant] = []
        self._messages: list[Message] = []

    def add_participant(
        self,
        participant_id: str,
        alias: str | None = None,
        kind: ParticipantKind = "participant",
    ) -> SequenceDiagramBuilder:
        self._participants.append(Participant(id=participant_id, alias=alias, kind=kind))
        return self

    def add_message(
        self,
        from_id: str,
        to_id: str,
        text: str,
        message_type: MessageType | str = "solid",
        *,
        activate: bool = False,
        deactivate: bool = False,
    ) -> SequenceDiagramBuilder:
        self._messages.append(
            Message(
                from_id=from_id,
                to_id=to_id,
                text=text,
                type=message_type,
                activate=activate,
                deactivate=deactivate,
            )
        )
        return self

    def build(self) -> str:
        lines = ["sequenceDiagram"]
        if self._autonumber:
            lines.append(f"{INDENT}autonumber")
        for participant in self._participants:
            alias = f" as {quote(participant.alias)}" if participant.alias else ""
            lines.append(f"{INDENT}{participant.kind} {participant.id}{alias}")
        for message in self._messages:
            arrow = _MESSAGE_ARROWS.get(message.type, _DEFAULT_ARROW)
            lines.append(
                f"{INDENT}{message.from_id}{arrow}{message.to_id}: {sanitize_text(message.text)}"
            )
            if message.activate:
                lines.append(f"{INDENT}activate {message.to_id}")
            if message.deactivate:
                lines.append(f"{INDENT}deactivate {message.from_id}")
        return "\n".join(lines)
