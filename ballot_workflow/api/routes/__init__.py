"""API routes for Ballot Workflow."""

from ballot_workflow.api.routes.voting import router as voting_router

__all__ = ["voting_router"]
