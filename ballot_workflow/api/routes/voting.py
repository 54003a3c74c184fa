"""Voting API routes.

FastAPI router for the election workflow. The administrator drives the
phases and registers voters; registered voters submit proposals, vote
and read the ballot. The caller is identified by the X-Voter-Id header.

Rejected operations are returned as RFC 7807 problem details:
- 401: Missing X-Voter-Id header
- 403: Caller lacks the required role
- 404: Proposal index does not exist or cannot receive votes
- 409: Wrong phase, invalid transition, duplicate registration, second vote
- 422: Empty proposal description or invalid voter identity
"""

from collections.abc import Awaitable, Callable

from fastapi import APIRouter, Depends, HTTPException, Request

from ballot_workflow.api.dependencies.voting import get_caller_id, get_voting_service
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
from ballot_workflow.application.dtos.voting import PhaseTransitionResultDTO
from ballot_workflow.application.services.voting_workflow_service import (
    VotingWorkflowService,
)
from ballot_workflow.domain.errors import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    EmptyDescriptionError,
    InvalidPhaseError,
    ProposalNotFoundError,
    UnauthorizedError,
)

router = APIRouter(prefix="/v1/election", tags=["election"])

_VotingError = (
    UnauthorizedError,
    InvalidPhaseError,
    AlreadyRegisteredError,
    AlreadyVotedError,
    EmptyDescriptionError,
    ProposalNotFoundError,
)


def _problem(
    error: UnauthorizedError
    | InvalidPhaseError
    | AlreadyRegisteredError
    | AlreadyVotedError
    | EmptyDescriptionError
    | ProposalNotFoundError,
    request: Request,
) -> HTTPException:
    error_detail = error.to_rfc7807_dict()
    error_detail["instance"] = str(request.url)
    return HTTPException(status_code=error_detail["status"], detail=error_detail)


def _invalid_input(error: ValueError, request: Request) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={
            "type": "urn:ballot-workflow:validation:invalid-input",
            "title": "Invalid Input",
            "status": 422,
            "detail": str(error),
            "instance": str(request.url),
        },
    )


_ERROR_RESPONSES: dict[int | str, dict] = {
    401: {"model": VotingErrorResponse, "description": "Missing caller identity"},
    403: {"model": VotingErrorResponse, "description": "Caller lacks the role"},
    409: {"model": VotingErrorResponse, "description": "Rejected in this phase"},
}


@router.get(
    "/status",
    response_model=ElectionStatusResponse,
    summary="Get election status",
    description="Public snapshot of the phase, winner and record counts.",
)
async def get_status(
    service: VotingWorkflowService = Depends(get_voting_service),
) -> ElectionStatusResponse:
    return ElectionStatusResponse.from_dto(await service.get_status())


@router.post(
    "/voters",
    response_model=VoterResponse,
    status_code=201,
    summary="Register a voter",
    description="Administrator only, while voters are being registered.",
    responses={
        **_ERROR_RESPONSES,
        422: {"model": VotingErrorResponse, "description": "Invalid identity"},
    },
)
async def add_voter(
    request: Request,
    body: AddVoterRequest,
    caller_id: str = Depends(get_caller_id),
    service: VotingWorkflowService = Depends(get_voting_service),
) -> VoterResponse:
    try:
        voter = await service.add_voter(caller_id, body.voter_id)
    except _VotingError as e:
        raise _problem(e, request) from None
    except ValueError as e:
        raise _invalid_input(e, request) from None
    return VoterResponse.from_domain(voter)


@router.get(
    "/voters/{voter_id}",
    response_model=VoterResponse,
    summary="Get a voter record",
    description=(
        "Registered voters only. An identity without a record is reported "
        "as unregistered."
    ),
    responses=_ERROR_RESPONSES,
)
async def get_voter(
    request: Request,
    voter_id: str,
    caller_id: str = Depends(get_caller_id),
    service: VotingWorkflowService = Depends(get_voting_service),
) -> VoterResponse:
    try:
        voter = await service.get_voter(caller_id, voter_id)
    except _VotingError as e:
        raise _problem(e, request) from None
    return VoterResponse.from_domain(voter)


@router.post(
    "/proposals",
    response_model=ProposalResponse,
    status_code=201,
    summary="Submit a proposal",
    description="Registered voters only, while proposal intake is open.",
    responses={
        **_ERROR_RESPONSES,
        422: {"model": VotingErrorResponse, "description": "Empty description"},
    },
)
async def add_proposal(
    request: Request,
    body: AddProposalRequest,
    caller_id: str = Depends(get_caller_id),
    service: VotingWorkflowService = Depends(get_voting_service),
) -> ProposalResponse:
    try:
        proposal = await service.add_proposal(caller_id, body.description)
    except _VotingError as e:
        raise _problem(e, request) from None
    return ProposalResponse.from_domain(proposal)


@router.get(
    "/proposals",
    response_model=ProposalListResponse,
    summary="List proposals",
    responses=_ERROR_RESPONSES,
)
async def get_proposals(
    request: Request,
    caller_id: str = Depends(get_caller_id),
    service: VotingWorkflowService = Depends(get_voting_service),
) -> ProposalListResponse:
    try:
        proposals = await service.get_proposals(caller_id)
    except _VotingError as e:
        raise _problem(e, request) from None
    return ProposalListResponse(
        proposals=[ProposalResponse.from_domain(p) for p in proposals],
        total_count=len(proposals),
    )


@router.get(
    "/proposals/{proposal_id}",
    response_model=ProposalResponse,
    summary="Get one proposal",
    responses={
        **_ERROR_RESPONSES,
        404: {"model": VotingErrorResponse, "description": "No such proposal"},
    },
)
async def get_one_proposal(
    request: Request,
    proposal_id: int,
    caller_id: str = Depends(get_caller_id),
    service: VotingWorkflowService = Depends(get_voting_service),
) -> ProposalResponse:
    try:
        proposal = await service.get_one_proposal(caller_id, proposal_id)
    except _VotingError as e:
        raise _problem(e, request) from None
    return ProposalResponse.from_domain(proposal)


@router.post(
    "/votes",
    response_model=VoterResponse,
    summary="Cast a vote",
    description="Registered voters only, once, while the voting session is open.",
    responses={
        **_ERROR_RESPONSES,
        404: {"model": VotingErrorResponse, "description": "No votable proposal"},
    },
)
async def set_vote(
    request: Request,
    body: SetVoteRequest,
    caller_id: str = Depends(get_caller_id),
    service: VotingWorkflowService = Depends(get_voting_service),
) -> VoterResponse:
    try:
        voter = await service.set_vote(caller_id, body.proposal_id)
    except _VotingError as e:
        raise _problem(e, request) from None
    return VoterResponse.from_domain(voter)


def _transition_for(
    service: VotingWorkflowService, action: WorkflowAction
) -> Callable[[str], Awaitable[PhaseTransitionResultDTO]]:
    return {
        WorkflowAction.START_PROPOSALS_REGISTERING: service.start_proposals_registering,
        WorkflowAction.END_PROPOSALS_REGISTERING: service.end_proposals_registering,
        WorkflowAction.START_VOTING_SESSION: service.start_voting_session,
        WorkflowAction.END_VOTING_SESSION: service.end_voting_session,
    }[action]


@router.post(
    "/workflow/{action}",
    response_model=PhaseTransitionResponse,
    summary="Advance the workflow",
    description="Administrator only. Each phase can only move to its successor.",
    responses=_ERROR_RESPONSES,
)
async def advance_workflow(
    request: Request,
    action: WorkflowAction,
    caller_id: str = Depends(get_caller_id),
    service: VotingWorkflowService = Depends(get_voting_service),
) -> PhaseTransitionResponse:
    transition = _transition_for(service, action)
    try:
        result = await transition(caller_id)
    except _VotingError as e:
        raise _problem(e, request) from None
    return PhaseTransitionResponse.from_dto(result)


@router.post(
    "/tally",
    response_model=PhaseTransitionResponse,
    summary="Tally the votes",
    description="Administrator only, once the voting session has ended.",
    responses=_ERROR_RESPONSES,
)
async def tally_votes(
    request: Request,
    caller_id: str = Depends(get_caller_id),
    service: VotingWorkflowService = Depends(get_voting_service),
) -> PhaseTransitionResponse:
    try:
        result = await service.tally_votes(caller_id)
    except _VotingError as e:
        raise _problem(e, request) from None
    return PhaseTransitionResponse.from_dto(result)


@router.get(
    "/winner",
    response_model=WinnerResponse,
    summary="Get the winning proposal",
    description="Public once votes are tallied.",
    responses={
        409: {"model": VotingErrorResponse, "description": "Not tallied yet"},
    },
)
async def get_winner(
    request: Request,
    service: VotingWorkflowService = Depends(get_voting_service),
) -> WinnerResponse:
    try:
        proposal = await service.get_winning_proposal()
    except _VotingError as e:
        raise _problem(e, request) from None
    if proposal is None:
        return WinnerResponse()
    return WinnerResponse(
        winning_proposal_id=proposal.proposal_id,
        proposal=ProposalResponse.from_domain(proposal),
    )
