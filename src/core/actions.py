"""Action extraction and classification (core domain)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from core.models import Action, ActionKind, ChatMessage

BOLD_MARKER = "**"
MIN_SEGMENTS = 3


@dataclass(frozen=True)
class ActionRule:
    """Maps a keyword found in the verb segment to an action kind."""

    keyword: str
    kind: ActionKind


# Evaluated in order, first hit wins. "commented" must be tested before
# "note" because bot comments can mention notes.
ACTION_RULES: Tuple[ActionRule, ...] = (
    ActionRule("commented", ActionKind.COMMENT_ADDED),
    ActionRule("note", ActionKind.NOTE_ADDED),
    ActionRule("updated", ActionKind.UPDATE),
    ActionRule("submitted", ActionKind.SUBMIT),
    ActionRule("verified", ActionKind.VERIFY),
)


def classify(verb: str, rules: Iterable[ActionRule] = ACTION_RULES) -> ActionKind:
    """Return the kind of the first rule whose keyword occurs in ``verb``."""

    for rule in rules:
        if rule.keyword in verb:
            return rule.kind
    return ActionKind.UNKNOWN


def split_segments(content: str) -> List[str]:
    return [segment for segment in content.split(BOLD_MARKER) if segment]


def extract_action(message: ChatMessage) -> Optional[Action]:
    """Build an Action from a bot message, or None if it has no bold structure.

    The bot writes ``**user** verb phrase **mission**``; the first three
    non-empty segments are author, verb and subject, used verbatim.
    """

    segments = split_segments(message.content)
    if len(segments) < MIN_SEGMENTS:
        return None
    return Action(
        row=message.row,
        author=segments[0],
        kind=classify(segments[1]),
        subject=segments[2],
        timestamp=message.timestamp,
    )


def extract_actions(messages: Iterable[ChatMessage], excluded_subject: str) -> Tuple[Action, ...]:
    """Extract all actions, drop the excluded subject and sort by timestamp.

    The sort is stable, so actions sharing a timestamp stay in row order.
    """

    actions = []
    for message in messages:
        action = extract_action(message)
        if action is None or action.subject == excluded_subject:
            continue
        actions.append(action)
    return tuple(sorted(actions, key=lambda action: action.timestamp))
