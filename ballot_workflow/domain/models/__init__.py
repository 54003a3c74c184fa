"""Domain models for Ballot Workflow.

Contains the value objects of the voting workflow. These models are
immutable and contain no infrastructure dependencies.

The Election aggregate lives in ballot_workflow.domain.models.election
and is imported from there directly, since it depends on the domain
events and services that in turn depend on these value objects.
"""

from ballot_workflow.domain.models.proposal import GENESIS_DESCRIPTION, Proposal
from ballot_workflow.domain.models.voter import Voter
from ballot_workflow.domain.models.workflow_status import (
    NEXT_STATUS,
    WORKFLOW_SEQUENCE,
    WorkflowStatus,
)

__all__: list[str] = [
    "GENESIS_DESCRIPTION",
    "NEXT_STATUS",
    "WORKFLOW_SEQUENCE",
    "Proposal",
    "Voter",
    "WorkflowStatus",
]
