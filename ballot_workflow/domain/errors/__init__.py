"""Domain errors for Ballot Workflow.

Provides specific exception classes for each way a voting operation
can be rejected. All exceptions inherit from BallotWorkflowError.
"""

from ballot_workflow.domain.errors.access import (
    ROLE_ADMINISTRATOR,
    ROLE_VOTER,
    UnauthorizedError,
)
from ballot_workflow.domain.errors.ballot import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    BallotError,
    EmptyDescriptionError,
    ProposalNotFoundError,
)
from ballot_workflow.domain.errors.workflow import (
    InvalidPhaseError,
    InvalidPhaseTransitionError,
)

__all__: list[str] = [
    "ROLE_ADMINISTRATOR",
    "ROLE_VOTER",
    "AlreadyRegisteredError",
    "AlreadyVotedError",
    "BallotError",
    "EmptyDescriptionError",
    "InvalidPhaseError",
    "InvalidPhaseTransitionError",
    "ProposalNotFoundError",
    "UnauthorizedError",
]
