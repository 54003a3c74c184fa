"""Voting DTOs returned by the workflow service.

Application-layer DTOs for phase transitions and election snapshots.
The API layer converts these to Pydantic response models, so the
application layer keeps no dependency on the API layer.
"""

from dataclasses import dataclass

from ballot_workflow.domain.models.workflow_status import WorkflowStatus


@dataclass(frozen=True)
class PhaseTransitionResultDTO:
    """Result of a successful phase transition.

    Attributes:
        previous_status: Phase before the transition.
        new_status: Phase after the transition.
        winning_proposal_id: Set only by the tally transition, and only
            when at least one proposal exists.
    """

    previous_status: WorkflowStatus
    new_status: WorkflowStatus
    winning_proposal_id: int | None = None


@dataclass(frozen=True)
class ElectionStatusDTO:
    """Public snapshot of the election, readable by anyone.

    Attributes:
        workflow_status: Current phase.
        winning_proposal_id: Winner index, None until tallied.
        voter_count: Number of registered voters.
        proposal_count: Number of stored proposals, genesis included.
    """

    workflow_status: WorkflowStatus
    winning_proposal_id: int | None
    voter_count: int
    proposal_count: int
