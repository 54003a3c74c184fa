"""
API models (Pydantic DTOs) for Ballot Workflow.

This module contains all Pydantic request/response models
used by API endpoints.
"""

from ballot_workflow.api.models.voting import (
    AddProposalRequest,
    AddVoterRequest,
    ElectionStatusResponse,
    PhaseTransitionResponse,
    ProposalListResponse,
    ProposalResponse,
    SetVoteRequest,
    VoterResponse,
    VotingErrorResponse,
    WinnerResponse,
    WorkflowAction,
)

__all__: list[str] = [
    "AddProposalRequest",
    "AddVoterRequest",
    "ElectionStatusResponse",
    "PhaseTransitionResponse",
    "ProposalListResponse",
    "ProposalResponse",
    "SetVoteRequest",
    "VoterResponse",
    "VotingErrorResponse",
    "WinnerResponse",
    "WorkflowAction",
]
