from __future__ import annotations

from typing import Dict, List

from enclosures.systems.grouping import GroupKey, GroupStatus


def newly_captured(
    before: Dict[GroupKey, GroupStatus], after: Dict[GroupKey, GroupStatus]
) -> List[GroupStatus]:
    """Groups enclosed after a move that were open, or did not exist, before it.

    A group whose membership changed has a new key, so a group that grew into an
    enclosure is scored once at its merged size.
    """
    captured: List[GroupStatus] = []
    for key, status in after.items():
        if not status.enclosed:
            continue
        previous = before.get(key)
        if previous is not None and previous.enclosed:
            continue
        captured.append(status)
    return captured


def capture_score(captured: List[GroupStatus]) -> int:
    return sum(status.size for status in captured)
