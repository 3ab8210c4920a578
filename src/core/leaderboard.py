"""Leaderboards of the most active authors per action kind (core domain)."""

from __future__ import annotations

from typing import Iterable, List

from core.config import DEFAULT_LEADERBOARD_SIZE
from core.grouping import group_by
from core.models import Action, ActionKind, AuthorGroup, LeaderboardEntry


def group_authors(actions: Iterable[Action], kind: ActionKind) -> List[AuthorGroup]:
    """Group actions of ``kind`` by author, in order of first appearance."""

    selected = (action for action in actions if action.kind is kind)
    groups = group_by(selected, key=lambda action: action.author)
    return [AuthorGroup(author=author, members=members) for author, members in groups.items()]


def rank_authors(
    actions: Iterable[Action],
    kind: ActionKind,
    limit: int = DEFAULT_LEADERBOARD_SIZE,
) -> List[LeaderboardEntry]:
    """Return at most ``limit`` authors ranked by how often they did ``kind``.

    Ties on count are broken by author name so the output is deterministic.
    """

    groups = sorted(group_authors(actions, kind), key=lambda group: (-group.count, group.author))
    return [
        LeaderboardEntry(rank=position, author=group.author, count=group.count)
        for position, group in enumerate(groups[:limit], start=1)
    ]
