"""Voting event payloads for the election workflow.

This module defines the notifications emitted after each committed change:
- VoterRegisteredEvent: The administrator registered a voter
- ProposalRegisteredEvent: A voter submitted a proposal
- VoteCastEvent: A voter cast their vote
- WorkflowStatusChangedEvent: The election moved to its next phase

Events are one-way notifications. They are created only after the
state change they describe has been applied, and they are immutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Union

from ballot_workflow.domain.models.workflow_status import WorkflowStatus

VOTER_REGISTERED_EVENT_TYPE: str = "voting.voter.registered"
PROPOSAL_REGISTERED_EVENT_TYPE: str = "voting.proposal.registered"
VOTE_CAST_EVENT_TYPE: str = "voting.vote.cast"
WORKFLOW_STATUS_CHANGED_EVENT_TYPE: str = "voting.workflow_status.changed"

# Schema version for voting events
VOTING_EVENT_SCHEMA_VERSION: str = "1.0.0"


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=True)
class VoterRegisteredEvent:
    """Payload for voter registered events.

    Attributes:
        voter_id: Identity that was registered.
        occurred_at: When the registration was committed (UTC).
    """

    voter_id: str
    occurred_at: datetime = field(default_factory=_utc_now, compare=False)

    event_type = VOTER_REGISTERED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        """Convert payload to dict for delivery to observers."""
        return {
            "event_type": self.event_type,
            "voter_id": self.voter_id,
            "occurred_at": self.occurred_at.isoformat(),
            "schema_version": VOTING_EVENT_SCHEMA_VERSION,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VoterRegisteredEvent:
        """Deserialize from dictionary.

        Raises:
            KeyError: If required fields are missing.
        """
        return cls(
            voter_id=data["voter_id"],
            occurred_at=datetime.fromisoformat(data["occurred_at"]),
        )


@dataclass(frozen=True, eq=True)
class ProposalRegisteredEvent:
    """Payload for proposal registered events.

    Attributes:
        proposal_id: Index assigned to the new proposal.
        occurred_at: When the proposal was committed (UTC).
    """

    proposal_id: int
    occurred_at: datetime = field(default_factory=_utc_now, compare=False)

    event_type = PROPOSAL_REGISTERED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        """Convert payload to dict for delivery to observers."""
        return {
            "event_type": self.event_type,
            "proposal_id": self.proposal_id,
            "occurred_at": self.occurred_at.isoformat(),
            "schema_version": VOTING_EVENT_SCHEMA_VERSION,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProposalRegisteredEvent:
        """Deserialize from dictionary.

        Raises:
            KeyError: If required fields are missing.
        """
        return cls(
            proposal_id=int(data["proposal_id"]),
            occurred_at=datetime.fromisoformat(data["occurred_at"]),
        )


@dataclass(frozen=True, eq=True)
class VoteCastEvent:
    """Payload for vote cast events.

    Attributes:
        voter_id: Voter who cast the vote.
        proposal_id: Proposal index that received the vote.
        occurred_at: When the vote was committed (UTC).
    """

    voter_id: str
    proposal_id: int
    occurred_at: datetime = field(default_factory=_utc_now, compare=False)

    event_type = VOTE_CAST_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        """Convert payload to dict for delivery to observers."""
        return {
            "event_type": self.event_type,
            "voter_id": self.voter_id,
            "proposal_id": self.proposal_id,
            "occurred_at": self.occurred_at.isoformat(),
            "schema_version": VOTING_EVENT_SCHEMA_VERSION,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VoteCastEvent:
        """Deserialize from dictionary.

        Raises:
            KeyError: If required fields are missing.
        """
        return cls(
            voter_id=data["voter_id"],
            proposal_id=int(data["proposal_id"]),
            occurred_at=datetime.fromisoformat(data["occurred_at"]),
        )


@dataclass(frozen=True, eq=True)
class WorkflowStatusChangedEvent:
    """Payload for workflow status change events.

    The new_status of every emitted event equals the status observable
    right after the transition that produced it.

    Attributes:
        previous_status: Phase before the transition.
        new_status: Phase after the transition.
        occurred_at: When the transition was committed (UTC).
    """

    previous_status: WorkflowStatus
    new_status: WorkflowStatus
    occurred_at: datetime = field(default_factory=_utc_now, compare=False)

    event_type = WORKFLOW_STATUS_CHANGED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        """Convert payload to dict for delivery to observers.

        Both the phase names and their ordinal steps are included.
        """
        return {
            "event_type": self.event_type,
            "previous_status": self.previous_status.value,
            "new_status": self.new_status.value,
            "previous_step": self.previous_status.step,
            "new_step": self.new_status.step,
            "occurred_at": self.occurred_at.isoformat(),
            "schema_version": VOTING_EVENT_SCHEMA_VERSION,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WorkflowStatusChangedEvent:
        """Deserialize from dictionary.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If a status value is unknown.
        """
        return cls(
            previous_status=WorkflowStatus(data["previous_status"]),
            new_status=WorkflowStatus(data["new_status"]),
            occurred_at=datetime.fromisoformat(data["occurred_at"]),
        )


VotingEvent = Union[
    VoterRegisteredEvent,
    ProposalRegisteredEvent,
    VoteCastEvent,
    WorkflowStatusChangedEvent,
]

_EVENT_CLASSES: dict[str, type] = {
    VOTER_REGISTERED_EVENT_TYPE: VoterRegisteredEvent,
    PROPOSAL_REGISTERED_EVENT_TYPE: ProposalRegisteredEvent,
    VOTE_CAST_EVENT_TYPE: VoteCastEvent,
    WORKFLOW_STATUS_CHANGED_EVENT_TYPE: WorkflowStatusChangedEvent,
}


def event_from_dict(data: dict[str, Any]) -> VotingEvent:
    """Rebuild any voting event from its dict form.

    Args:
        data: Output of one of the events' to_dict().

    Returns:
        The matching event instance.

    Raises:
        ValueError: If event_type is unknown.
    """
    event_class = _EVENT_CLASSES.get(data.get("event_type", ""))
    if event_class is None:
        raise ValueError(f"Unknown voting event type: {data.get('event_type')!r}")
    return event_class.from_dict(data)  # type: ignore[attr-defined, no-any-return]
