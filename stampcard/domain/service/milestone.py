"""Milestone detection.

A milestone fires once per user when the counter crosses 5 or 10. The
client keeps the set of milestones it has already celebrated and sends it
along with the count it saw last.
"""

from collections.abc import Iterable

from stampcard.domain.value import MILESTONES


def crossed_milestones(
    previous: int, current: int, already_shown: Iterable[int] = ()
) -> list[int]:
    """Milestones crossed between two observed counts.

    Args:
        previous: Count the client saw last
        current: Count just observed
        already_shown: Milestones already celebrated for this user

    Returns:
        Milestones ``m`` with ``previous < m <= current``, minus those shown
    """
    shown = set(already_shown)
    return [m for m in MILESTONES if previous < m <= current and m not in shown]
