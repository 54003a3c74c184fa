"""FastAPI dependencies for Ballot Workflow."""

from ballot_workflow.api.dependencies.voting import (
    VOTER_ID_HEADER,
    get_caller_id,
    get_voting_service,
)

__all__ = ["VOTER_ID_HEADER", "get_caller_id", "get_voting_service"]
