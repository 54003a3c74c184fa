"""Application DTOs for Ballot Workflow."""

from ballot_workflow.application.dtos.voting import (
    ElectionStatusDTO,
    PhaseTransitionResultDTO,
)

__all__: list[str] = ["ElectionStatusDTO", "PhaseTransitionResultDTO"]
