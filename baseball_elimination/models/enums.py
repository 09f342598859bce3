from enum import Enum


class EliminationStatus(str, Enum):
    NOT_ELIMINATED = "NOT_ELIMINATED"
    ELIMINATED_TRIVIAL = "ELIMINATED_TRIVIAL"  # Another team already has more wins
    ELIMINATED_BY_MIN_CUT = "ELIMINATED_BY_MIN_CUT"  # Proven by the flow network


# Terminal states that count as eliminated
ELIMINATED_STATUSES = frozenset(
    {EliminationStatus.ELIMINATED_TRIVIAL, EliminationStatus.ELIMINATED_BY_MIN_CUT}
)
