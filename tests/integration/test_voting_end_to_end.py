"""Integration tests for a complete election.

Runs a full election through the HTTP API wired by bootstrap (no
dependency overrides): three identities A, B and C, with C as the
administrator. C also registers itself to vote. A proposes "good" and
"bad", A votes for "good", B and C vote for "bad".
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from ballot_workflow.api.main import app
from ballot_workflow.bootstrap.voting import (
    get_event_emitter,
    reset_voting_dependencies,
)
from ballot_workflow.config.voting_config import VotingConfig
from ballot_workflow.domain.events.voting import (
    VOTE_CAST_EVENT_TYPE,
    WORKFLOW_STATUS_CHANGED_EVENT_TYPE,
)

BASE = "/v1/election"
VOTER_A = {"X-Voter-Id": "0xA"}
VOTER_B = {"X-Voter-Id": "0xB"}
ADMIN_C = {"X-Voter-Id": "0xC"}


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Fresh election administered by C."""
    reset_voting_dependencies(
        VotingConfig(administrator_id="0xC", environment="development")
    )
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    reset_voting_dependencies()


def _ok(response) -> dict:
    assert response.status_code in (200, 201), response.json()
    return response.json()


class TestFullElection:
    """A complete election from voter registration to the winner."""

    def test_most_voted_proposal_wins(self, client: TestClient) -> None:
        _ok(client.post(f"{BASE}/voters", json={"voter_id": "0xA"}, headers=ADMIN_C))
        _ok(client.post(f"{BASE}/voters", json={"voter_id": "0xB"}, headers=ADMIN_C))
        _ok(client.post(f"{BASE}/voters", json={"voter_id": "0xC"}, headers=ADMIN_C))

        _ok(client.post(f"{BASE}/workflow/start-proposals-registering", headers=ADMIN_C))
        good = _ok(
            client.post(f"{BASE}/proposals", json={"description": "good"}, headers=VOTER_A)
        )
        bad = _ok(
            client.post(f"{BASE}/proposals", json={"description": "bad"}, headers=VOTER_A)
        )
        assert good["proposal_id"] == 1
        assert bad["proposal_id"] == 2

        _ok(client.post(f"{BASE}/workflow/end-proposals-registering", headers=ADMIN_C))
        _ok(client.post(f"{BASE}/workflow/start-voting-session", headers=ADMIN_C))
        _ok(client.post(f"{BASE}/votes", json={"proposal_id": 1}, headers=VOTER_A))
        _ok(client.post(f"{BASE}/votes", json={"proposal_id": 2}, headers=VOTER_B))
        _ok(client.post(f"{BASE}/votes", json={"proposal_id": 2}, headers=ADMIN_C))
        _ok(client.post(f"{BASE}/workflow/end-voting-session", headers=ADMIN_C))

        tally = _ok(client.post(f"{BASE}/tally", headers=ADMIN_C))
        assert tally["winning_proposal_id"] == 2

        winner = _ok(client.get(f"{BASE}/winner"))
        assert winner["proposal"]["description"] == "bad"
        assert winner["proposal"]["vote_count"] == 2

        status = _ok(client.get(f"{BASE}/status"))
        assert status["workflow_status"] == "VotesTallied"
        assert status["workflow_step"] == 5
        assert status["voter_count"] == 3
        assert status["proposal_count"] == 3

        voter_a = _ok(client.get(f"{BASE}/voters/0xA", headers=VOTER_B))
        assert voter_a["has_voted"] is True
        assert voter_a["voted_proposal_id"] == 1

        emitter = get_event_emitter()
        assert len(emitter.get_events(VOTE_CAST_EVENT_TYPE)) == 3
        assert len(emitter.get_events(WORKFLOW_STATUS_CHANGED_EVENT_TYPE)) == 5

    def test_rejections_along_the_way(self, client: TestClient) -> None:
        _ok(client.post(f"{BASE}/voters", json={"voter_id": "0xA"}, headers=ADMIN_C))

        # Unregistered B cannot propose, administrator C is not a voter
        _ok(client.post(f"{BASE}/workflow/start-proposals-registering", headers=ADMIN_C))
        assert (
            client.post(
                f"{BASE}/proposals", json={"description": "x"}, headers=VOTER_B
            ).status_code
            == 403
        )
        assert (
            client.post(
                f"{BASE}/proposals", json={"description": "x"}, headers=ADMIN_C
            ).status_code
            == 403
        )

        # A cannot drive the workflow
        assert (
            client.post(
                f"{BASE}/workflow/end-proposals-registering", headers=VOTER_A
            ).status_code
            == 403
        )

        # Tally is rejected until voting has ended, then runs once
        assert client.post(f"{BASE}/tally", headers=ADMIN_C).status_code == 409
        _ok(client.post(f"{BASE}/workflow/end-proposals-registering", headers=ADMIN_C))
        _ok(client.post(f"{BASE}/workflow/start-voting-session", headers=ADMIN_C))
        _ok(client.post(f"{BASE}/workflow/end-voting-session", headers=ADMIN_C))
        _ok(client.post(f"{BASE}/tally", headers=ADMIN_C))
        assert client.post(f"{BASE}/tally", headers=ADMIN_C).status_code == 409

        # No proposal besides genesis: genesis wins with no votes
        assert _ok(client.get(f"{BASE}/winner"))["winning_proposal_id"] == 0
