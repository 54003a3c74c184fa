"""
Domain events for Ballot Workflow.

Notifications describing committed state changes in the election.
All events are immutable and timestamped.
"""

from ballot_workflow.domain.events.voting import (
    PROPOSAL_REGISTERED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    VOTING_EVENT_SCHEMA_VERSION,
    WORKFLOW_STATUS_CHANGED_EVENT_TYPE,
    ProposalRegisteredEvent,
    VoteCastEvent,
    VoterRegisteredEvent,
    VotingEvent,
    WorkflowStatusChangedEvent,
    event_from_dict,
)

__all__: list[str] = [
    "PROPOSAL_REGISTERED_EVENT_TYPE",
    "VOTE_CAST_EVENT_TYPE",
    "VOTER_REGISTERED_EVENT_TYPE",
    "VOTING_EVENT_SCHEMA_VERSION",
    "WORKFLOW_STATUS_CHANGED_EVENT_TYPE",
    "ProposalRegisteredEvent",
    "VoteCastEvent",
    "VoterRegisteredEvent",
    "VotingEvent",
    "WorkflowStatusChangedEvent",
    "event_from_dict",
]
