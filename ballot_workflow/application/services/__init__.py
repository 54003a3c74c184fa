"""Application services - Use case orchestration.

Available services:
- VotingWorkflowService: single-writer driver of the election workflow
"""

from ballot_workflow.application.services.voting_workflow_service import (
    VotingWorkflowService,
)

__all__: list[str] = ["VotingWorkflowService"]
