# baseball_elimination/models/team.py
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, computed_field


class TeamRecord(BaseModel):
    """One team's standing plus its row of the head-to-head schedule."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    wins: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)
    remaining: int = Field(..., ge=0)
    # Games left against every team of the division, in division order
    against: Tuple[NonNegativeInt, ...] = ()

    @computed_field  # type: ignore[misc]
    @property
    def max_possible_wins(self) -> int:
        """Best total this team can still finish with."""
        return self.wins + self.remaining
