from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from .enums import EliminationStatus, ELIMINATED_STATUSES


class EliminationResult(BaseModel):
    """Outcome of the elimination analysis for a single team."""

    model_config = ConfigDict(frozen=True)

    team: str
    status: EliminationStatus
    certificate: Optional[FrozenSet[str]] = Field(
        None,
        description="Teams proving the elimination; None when the team is still alive.",
    )

    @computed_field  # type: ignore[misc]
    @property
    def eliminated(self) -> bool:
        return self.status in ELIMINATED_STATUSES

    @model_validator(mode="after")
    def check_certificate(self) -> "EliminationResult":
        # An eliminated team always carries a non-empty proof, a live team none
        if self.eliminated and not self.certificate:
            raise ValueError(f"Eliminated team {self.team!r} needs a certificate.")
        if not self.eliminated and self.certificate is not None:
            raise ValueError(
                f"Team {self.team!r} is not eliminated but has a certificate."
            )
        return self
