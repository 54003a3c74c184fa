"""Unit tests for voting API routes.

Exercises each endpoint through the FastAPI app with a service wired to
in-memory stubs, including the RFC 7807 error mapping.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from ballot_workflow.api.dependencies.voting import get_voting_service
from ballot_workflow.api.main import app
from ballot_workflow.application.services.voting_workflow_service import (
    VotingWorkflowService,
)
from ballot_workflow.infrastructure.stubs.election_repository_stub import (
    ElectionRepositoryStub,
)
from ballot_workflow.infrastructure.stubs.voting_event_emitter_stub import (
    VotingEventEmitterStub,
)

BASE = "/v1/election"
ADMIN_HEADERS = {"X-Voter-Id": "admin"}
ALICE_HEADERS = {"X-Voter-Id": "alice"}
MALLORY_HEADERS = {"X-Voter-Id": "mallory"}


@pytest.fixture
def voting_service(
    election_repository: ElectionRepositoryStub,
    event_emitter: VotingEventEmitterStub,
) -> VotingWorkflowService:
    """Create voting service with test dependencies."""
    return VotingWorkflowService(
        repository=election_repository, event_emitter=event_emitter
    )


@pytest.fixture
def client(voting_service: VotingWorkflowService) -> Iterator[TestClient]:
    """Create test client with dependency overrides."""
    app.dependency_overrides[get_voting_service] = lambda: voting_service

    client = TestClient(app, raise_server_exceptions=False)
    yield client

    app.dependency_overrides.clear()


def _advance(client: TestClient, *actions: str) -> None:
    for action in actions:
        response = client.post(f"{BASE}/workflow/{action}", headers=ADMIN_HEADERS)
        assert response.status_code == 200, response.json()


def _register(client: TestClient, *voter_ids: str) -> None:
    for voter_id in voter_ids:
        response = client.post(
            f"{BASE}/voters", json={"voter_id": voter_id}, headers=ADMIN_HEADERS
        )
        assert response.status_code == 201, response.json()


class TestVotingRouter:
    """Tests for router configuration."""

    def test_router_prefix_and_tags(self) -> None:
        from ballot_workflow.api.routes.voting import router

        assert router.prefix == "/v1/election"
        assert "election" in router.tags

    def test_app_version(self, project_version: str) -> None:
        assert app.version == project_version


class TestStatusEndpoint:
    """Tests for GET /status."""

    def test_public_status(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/status")

        assert response.status_code == 200
        assert response.json() == {
            "workflow_status": "RegisteringVoters",
            "workflow_step": 0,
            "winning_proposal_id": None,
            "voter_count": 0,
            "proposal_count": 0,
        }

    def test_correlation_id_echoed(self, client: TestClient) -> None:
        response = client.get(
            f"{BASE}/status", headers={"X-Correlation-ID": "corr-123"}
        )

        assert response.headers["X-Correlation-ID"] == "corr-123"

    def test_correlation_id_generated(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/status")

        assert response.headers["X-Correlation-ID"]


class TestVoterEndpoints:
    """Tests for POST /voters and GET /voters/{voter_id}."""

    def test_register_voter(self, client: TestClient) -> None:
        response = client.post(
            f"{BASE}/voters", json={"voter_id": "alice"}, headers=ADMIN_HEADERS
        )

        assert response.status_code == 201
        assert response.json() == {
            "voter_id": "alice",
            "is_registered": True,
            "has_voted": False,
            "voted_proposal_id": 0,
        }

    def test_missing_identity_is_401(self, client: TestClient) -> None:
        response = client.post(f"{BASE}/voters", json={"voter_id": "alice"})

        assert response.status_code == 401
        assert response.json()["detail"]["title"] == "Missing Caller Identity"

    def test_non_admin_is_403(self, client: TestClient) -> None:
        response = client.post(
            f"{BASE}/voters", json={"voter_id": "bob"}, headers=ALICE_HEADERS
        )

        assert response.status_code == 403
        detail = response.json()["detail"]
        assert detail["type"] == "urn:ballot-workflow:access:unauthorized"
        assert detail["instance"].endswith(f"{BASE}/voters")

    def test_duplicate_is_409(self, client: TestClient) -> None:
        _register(client, "alice")

        response = client.post(
            f"{BASE}/voters", json={"voter_id": "alice"}, headers=ADMIN_HEADERS
        )

        assert response.status_code == 409
        assert response.json()["detail"]["voter_id"] == "alice"

    def test_blank_identity_is_422(self, client: TestClient) -> None:
        response = client.post(
            f"{BASE}/voters", json={"voter_id": "   "}, headers=ADMIN_HEADERS
        )

        assert response.status_code == 422
        assert response.json()["detail"]["title"] == "Invalid Input"

    def test_registration_closed_is_409(self, client: TestClient) -> None:
        _advance(client, "start-proposals-registering")

        response = client.post(
            f"{BASE}/voters", json={"voter_id": "alice"}, headers=ADMIN_HEADERS
        )

        assert response.status_code == 409
        assert response.json()["detail"]["current_status"] == (
            "ProposalsRegistrationStarted"
        )

    def test_get_voter(self, client: TestClient) -> None:
        _register(client, "alice")

        response = client.get(f"{BASE}/voters/nobody", headers=ALICE_HEADERS)

        assert response.status_code == 200
        assert response.json()["is_registered"] is False

    def test_get_voter_requires_registration(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/voters/alice", headers=MALLORY_HEADERS)

        assert response.status_code == 403


class TestProposalEndpoints:
    """Tests for proposal submission and reads."""

    def test_submit_and_read(self, client: TestClient) -> None:
        _register(client, "alice")
        _advance(client, "start-proposals-registering")

        response = client.post(
            f"{BASE}/proposals", json={"description": "good"}, headers=ALICE_HEADERS
        )

        assert response.status_code == 201
        assert response.json()["proposal_id"] == 1

        listing = client.get(f"{BASE}/proposals", headers=ALICE_HEADERS).json()
        assert listing["total_count"] == 2
        assert [p["description"] for p in listing["proposals"]] == ["GENESIS", "good"]
        assert listing["proposals"][0]["is_genesis"] is True

    def test_empty_description_is_422(self, client: TestClient) -> None:
        _register(client, "alice")
        _advance(client, "start-proposals-registering")

        response = client.post(
            f"{BASE}/proposals", json={"description": ""}, headers=ALICE_HEADERS
        )

        assert response.status_code == 422
        assert response.json()["detail"]["type"] == (
            "urn:ballot-workflow:ballot:empty-description"
        )

    def test_get_unknown_proposal_is_404(self, client: TestClient) -> None:
        _register(client, "alice")

        response = client.get(f"{BASE}/proposals/5", headers=ALICE_HEADERS)

        assert response.status_code == 404
        assert response.json()["detail"]["proposal_id"] == 5

    def test_wrong_phase_is_409(self, client: TestClient) -> None:
        _register(client, "alice")

        response = client.post(
            f"{BASE}/proposals", json={"description": "early"}, headers=ALICE_HEADERS
        )

        assert response.status_code == 409


class TestVoteEndpoint:
    """Tests for POST /votes."""

    @pytest.fixture
    def voting_open(self, client: TestClient) -> TestClient:
        _register(client, "alice")
        _advance(client, "start-proposals-registering")
        client.post(
            f"{BASE}/proposals", json={"description": "good"}, headers=ALICE_HEADERS
        )
        _advance(client, "end-proposals-registering", "start-voting-session")
        return client

    def test_cast_vote(self, voting_open: TestClient) -> None:
        response = voting_open.post(
            f"{BASE}/votes", json={"proposal_id": 1}, headers=ALICE_HEADERS
        )

        assert response.status_code == 200
        assert response.json()["has_voted"] is True
        assert response.json()["voted_proposal_id"] == 1

    def test_second_vote_is_409(self, voting_open: TestClient) -> None:
        voting_open.post(f"{BASE}/votes", json={"proposal_id": 1}, headers=ALICE_HEADERS)

        response = voting_open.post(
            f"{BASE}/votes", json={"proposal_id": 1}, headers=ALICE_HEADERS
        )

        assert response.status_code == 409
        assert response.json()["detail"]["title"] == "Already Voted"

    def test_genesis_vote_is_404(self, voting_open: TestClient) -> None:
        response = voting_open.post(
            f"{BASE}/votes", json={"proposal_id": 0}, headers=ALICE_HEADERS
        )

        assert response.status_code == 404

    def test_non_integer_proposal_is_422(self, voting_open: TestClient) -> None:
        response = voting_open.post(
            f"{BASE}/votes", json={"proposal_id": "one"}, headers=ALICE_HEADERS
        )

        assert response.status_code == 422


class TestWorkflowEndpoints:
    """Tests for phase transitions, tally and winner."""

    def test_transition_result(self, client: TestClient) -> None:
        response = client.post(
            f"{BASE}/workflow/start-proposals-registering", headers=ADMIN_HEADERS
        )

        assert response.status_code == 200
        assert response.json() == {
            "previous_status": "RegisteringVoters",
            "new_status": "ProposalsRegistrationStarted",
            "winning_proposal_id": None,
        }

    def test_unknown_action_is_422(self, client: TestClient) -> None:
        response = client.post(f"{BASE}/workflow/reopen", headers=ADMIN_HEADERS)

        assert response.status_code == 422

    def test_skipped_phase_is_409(self, client: TestClient) -> None:
        response = client.post(
            f"{BASE}/workflow/start-voting-session", headers=ADMIN_HEADERS
        )

        assert response.status_code == 409
        assert response.json()["detail"]["type"] == (
            "urn:ballot-workflow:workflow:invalid-transition"
        )

    def test_winner_before_tally_is_409(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/winner")

        assert response.status_code == 409

    def test_tally_and_winner(self, client: TestClient) -> None:
        _advance(
            client,
            "start-proposals-registering",
            "end-proposals-registering",
            "start-voting-session",
            "end-voting-session",
        )

        tally = client.post(f"{BASE}/tally", headers=ADMIN_HEADERS)
        winner = client.get(f"{BASE}/winner")

        assert tally.status_code == 200
        assert tally.json()["new_status"] == "VotesTallied"
        assert tally.json()["winning_proposal_id"] == 0
        assert winner.json()["winning_proposal_id"] == 0
        assert winner.json()["proposal"]["description"] == "GENESIS"

    def test_tally_by_voter_is_403(self, client: TestClient) -> None:
        _register(client, "alice")

        response = client.post(f"{BASE}/tally", headers=ALICE_HEADERS)

        assert response.status_code == 403
