"""Unit tests for voting event payloads."""

from datetime import datetime, timezone

import pytest

from ballot_workflow.domain.events.voting import (
    PROPOSAL_REGISTERED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    VOTING_EVENT_SCHEMA_VERSION,
    WORKFLOW_STATUS_CHANGED_EVENT_TYPE,
    ProposalRegisteredEvent,
    VoteCastEvent,
    VoterRegisteredEvent,
    WorkflowStatusChangedEvent,
    event_from_dict,
)
from ballot_workflow.domain.models.workflow_status import WorkflowStatus


class TestEventTypes:
    """Each payload advertises its event type."""

    def test_event_type_constants(self) -> None:
        assert VoterRegisteredEvent("alice").event_type == VOTER_REGISTERED_EVENT_TYPE
        assert ProposalRegisteredEvent(1).event_type == PROPOSAL_REGISTERED_EVENT_TYPE
        assert VoteCastEvent("alice", 1).event_type == VOTE_CAST_EVENT_TYPE
        assert (
            WorkflowStatusChangedEvent(
                WorkflowStatus.REGISTERING_VOTERS,
                WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
            ).event_type
            == WORKFLOW_STATUS_CHANGED_EVENT_TYPE
        )

    def test_occurred_at_is_utc(self) -> None:
        event = VoterRegisteredEvent("alice")

        assert event.occurred_at.tzinfo == timezone.utc

    def test_equality_ignores_timestamp(self) -> None:
        earlier = VoteCastEvent(
            "alice", 1, occurred_at=datetime(2020, 1, 1, tzinfo=timezone.utc)
        )

        assert earlier == VoteCastEvent("alice", 1)


class TestWorkflowStatusChangedEvent:
    """Tests for the status change payload."""

    def test_to_dict_includes_names_and_steps(self) -> None:
        event = WorkflowStatusChangedEvent(
            previous_status=WorkflowStatus.VOTING_SESSION_ENDED,
            new_status=WorkflowStatus.VOTES_TALLIED,
        )

        data = event.to_dict()

        assert data["previous_status"] == "VotingSessionEnded"
        assert data["new_status"] == "VotesTallied"
        assert data["previous_step"] == 4
        assert data["new_step"] == 5
        assert data["schema_version"] == VOTING_EVENT_SCHEMA_VERSION

    def test_from_dict_unknown_status_raises(self) -> None:
        data = WorkflowStatusChangedEvent(
            WorkflowStatus.REGISTERING_VOTERS,
            WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
        ).to_dict()
        data["new_status"] = "Recounting"

        with pytest.raises(ValueError):
            WorkflowStatusChangedEvent.from_dict(data)


class TestEventFromDict:
    """Tests for rebuilding events by type."""

    @pytest.mark.parametrize(
        "event",
        [
            VoterRegisteredEvent("alice"),
            ProposalRegisteredEvent(2),
            VoteCastEvent("bob", 2),
            WorkflowStatusChangedEvent(
                WorkflowStatus.PROPOSALS_REGISTRATION_ENDED,
                WorkflowStatus.VOTING_SESSION_STARTED,
            ),
        ],
    )
    def test_rebuilds_matching_class(self, event) -> None:
        rebuilt = event_from_dict(event.to_dict())

        assert type(rebuilt) is type(event)
        assert rebuilt == event
        assert rebuilt.occurred_at == event.occurred_at

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown voting event type"):
            event_from_dict({"event_type": "voting.recount"})

    def test_missing_field_raises(self) -> None:
        with pytest.raises(KeyError):
            event_from_dict({"event_type": VOTE_CAST_EVENT_TYPE})
