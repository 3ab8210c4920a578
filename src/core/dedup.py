"""Submission deduplication (core domain)."""

from __future__ import annotations

from typing import Iterable, Tuple

from core.grouping import group_by
from core.models import Action, ActionKind


def first_submissions(actions: Iterable[Action]) -> Tuple[Action, ...]:
    """Keep the first Submit action for each subject.

    Input is expected in timestamp order, so a mission resubmitted later is
    credited to its first submission. Non-submit actions are dropped.
    """

    submissions = (action for action in actions if action.kind is ActionKind.SUBMIT)
    groups = group_by(submissions, key=lambda action: action.subject)
    return tuple(members[0] for members in groups.values())
