"""Workflow status for the voting state machine.

The election moves through six phases in a fixed order. Each phase has
exactly one successor, the last one has none, and no phase is ever
revisited.

State Machine:
    RegisteringVoters -> ProposalsRegistrationStarted
    ProposalsRegistrationStarted -> ProposalsRegistrationEnded
    ProposalsRegistrationEnded -> VotingSessionStarted
    VotingSessionStarted -> VotingSessionEnded
    VotingSessionEnded -> VotesTallied (terminal)
"""

from __future__ import annotations

from enum import Enum


class WorkflowStatus(Enum):
    """Phase of the voting workflow.

    States:
        REGISTERING_VOTERS: Administrator registers eligible voters
        PROPOSALS_REGISTRATION_STARTED: Registered voters submit proposals
        PROPOSALS_REGISTRATION_ENDED: Proposal intake closed
        VOTING_SESSION_STARTED: Registered voters cast one vote each
        VOTING_SESSION_ENDED: Voting closed, awaiting tally
        VOTES_TALLIED: Winner computed (terminal)
    """

    REGISTERING_VOTERS = "RegisteringVoters"
    PROPOSALS_REGISTRATION_STARTED = "ProposalsRegistrationStarted"
    PROPOSALS_REGISTRATION_ENDED = "ProposalsRegistrationEnded"
    VOTING_SESSION_STARTED = "VotingSessionStarted"
    VOTING_SESSION_ENDED = "VotingSessionEnded"
    VOTES_TALLIED = "VotesTallied"

    @property
    def step(self) -> int:
        """Ordinal position of this phase in the workflow (0-5)."""
        return WORKFLOW_SEQUENCE.index(self)

    def is_terminal(self) -> bool:
        """Check if this is the final phase.

        Returns:
            True for VOTES_TALLIED, False otherwise.
        """
        return self.next_status() is None

    def next_status(self) -> WorkflowStatus | None:
        """Get the only legal successor of this phase.

        Returns:
            The next phase, or None for the terminal phase.
        """
        return NEXT_STATUS.get(self)


WORKFLOW_SEQUENCE: tuple[WorkflowStatus, ...] = (
    WorkflowStatus.REGISTERING_VOTERS,
    WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
    WorkflowStatus.PROPOSALS_REGISTRATION_ENDED,
    WorkflowStatus.VOTING_SESSION_STARTED,
    WorkflowStatus.VOTING_SESSION_ENDED,
    WorkflowStatus.VOTES_TALLIED,
)

# Transition matrix: each phase maps to its single successor
NEXT_STATUS: dict[WorkflowStatus, WorkflowStatus] = {
    current: following
    for current, following in zip(WORKFLOW_SEQUENCE, WORKFLOW_SEQUENCE[1:])
}
