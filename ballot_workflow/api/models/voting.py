"""Voting API request/response models.

Pydantic models for the election workflow endpoints.

Developer Golden Rules:
1. VALIDATE EARLY - Pydantic handles schema validation
2. FAIL LOUD - Rejected operations return RFC 7807 problem details
3. TYPE SAFETY - All fields typed, no Any
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ballot_workflow.application.dtos.voting import (
    ElectionStatusDTO,
    PhaseTransitionResultDTO,
)
from ballot_workflow.domain.models.proposal import Proposal
from ballot_workflow.domain.models.voter import Voter


class AddVoterRequest(BaseModel):
    """Request to register a voter (administrator only).

    Attributes:
        voter_id: Identity to register.
    """

    voter_id: str = Field(
        ...,
        min_length=1,
        description="Identity (address or principal) to register as a voter",
    )


class AddProposalRequest(BaseModel):
    """Request to submit a proposal (registered voters only).

    Blank descriptions pass schema validation and are rejected by the
    workflow with an Empty Description problem, so the response carries
    the voter identity.

    Attributes:
        description: Proposal text.
    """

    description: str = Field(..., description="Proposal text")


class SetVoteRequest(BaseModel):
    """Request to cast a vote (registered voters only).

    Attributes:
        proposal_id: Index of the chosen proposal.
    """

    proposal_id: int = Field(..., description="Index of the chosen proposal")


class VoterResponse(BaseModel):
    """A voter record."""

    voter_id: str
    is_registered: bool
    has_voted: bool
    voted_proposal_id: int

    @classmethod
    def from_domain(cls, voter: Voter) -> VoterResponse:
        return cls(
            voter_id=voter.voter_id,
            is_registered=voter.is_registered,
            has_voted=voter.has_voted,
            voted_proposal_id=voter.voted_proposal_id,
        )


class ProposalResponse(BaseModel):
    """A proposal record."""

    proposal_id: int
    description: str
    vote_count: int = Field(..., ge=0)
    is_genesis: bool = False

    @classmethod
    def from_domain(cls, proposal: Proposal) -> ProposalResponse:
        return cls(
            proposal_id=proposal.proposal_id,
            description=proposal.description,
            vote_count=proposal.vote_count,
            is_genesis=proposal.is_genesis,
        )


class ProposalListResponse(BaseModel):
    """All proposals in index order."""

    proposals: list[ProposalResponse]
    total_count: int


class PhaseTransitionResponse(BaseModel):
    """Result of a phase transition.

    Attributes:
        previous_status: Phase before the transition.
        new_status: Phase after the transition.
        winning_proposal_id: Set by the tally transition only.
    """

    previous_status: str
    new_status: str
    winning_proposal_id: int | None = None

    @classmethod
    def from_dto(cls, result: PhaseTransitionResultDTO) -> PhaseTransitionResponse:
        return cls(
            previous_status=result.previous_status.value,
            new_status=result.new_status.value,
            winning_proposal_id=result.winning_proposal_id,
        )


class ElectionStatusResponse(BaseModel):
    """Public election status, readable without registration."""

    workflow_status: str
    workflow_step: int = Field(..., ge=0, le=5)
    winning_proposal_id: int | None = None
    voter_count: int = Field(..., ge=0)
    proposal_count: int = Field(..., ge=0)

    @classmethod
    def from_dto(cls, status: ElectionStatusDTO) -> ElectionStatusResponse:
        return cls(
            workflow_status=status.workflow_status.value,
            workflow_step=status.workflow_status.step,
            winning_proposal_id=status.winning_proposal_id,
            voter_count=status.voter_count,
            proposal_count=status.proposal_count,
        )


class VotingErrorResponse(BaseModel):
    """RFC 7807 problem details for rejected voting operations."""

    type: str
    title: str
    status: int
    detail: str
    instance: str | None = None


class WorkflowAction(str, Enum):
    """Phase transitions addressable through POST /workflow/{action}.

    Tallying has its own endpoint since it also produces the winner.
    """

    START_PROPOSALS_REGISTERING = "start-proposals-registering"
    END_PROPOSALS_REGISTERING = "end-proposals-registering"
    START_VOTING_SESSION = "start-voting-session"
    END_VOTING_SESSION = "end-voting-session"


class WinnerResponse(BaseModel):
    """Tally result.

    Attributes:
        winning_proposal_id: Index of the winner, None when no proposal
            was ever stored.
        proposal: The winning proposal record, if any.
    """

    winning_proposal_id: int | None = None
    proposal: ProposalResponse | None = None
