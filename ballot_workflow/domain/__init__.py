"""
Domain layer - pure voting logic for Ballot Workflow.

This layer contains:
- Domain models (WorkflowStatus, Voter, Proposal, Election)
- Domain events (voter registered, proposal registered, vote cast,
  workflow status changed)
- Domain services (access control, tally)
- Domain exceptions

This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from ballot_workflow.domain.exceptions import BallotWorkflowError

__all__: list[str] = ["BallotWorkflowError"]
