"""Voting dependency injection for FastAPI routes.

Wires the process-wide VotingWorkflowService from bootstrap and resolves
the caller identity from the X-Voter-Id header.
"""

from fastapi import Header, HTTPException, Request

from ballot_workflow.application.services.voting_workflow_service import (
    VotingWorkflowService,
)
from ballot_workflow.bootstrap.voting import get_voting_workflow_service

VOTER_ID_HEADER = "X-Voter-Id"


def get_voting_service() -> VotingWorkflowService:
    """Get the voting workflow service for route handlers."""
    return get_voting_workflow_service()


async def get_caller_id(
    request: Request,
    x_voter_id: str | None = Header(default=None, alias=VOTER_ID_HEADER),
) -> str:
    """Resolve the caller identity.

    Raises:
        HTTPException: 401 if the X-Voter-Id header is missing or blank.
    """
    if not x_voter_id or not x_voter_id.strip():
        raise HTTPException(
            status_code=401,
            detail={
                "type": "urn:ballot-workflow:access:missing-identity",
                "title": "Missing Caller Identity",
                "status": 401,
                "detail": f"The {VOTER_ID_HEADER} header is required",
                "instance": str(request.url),
            },
        )
    return x_voter_id
