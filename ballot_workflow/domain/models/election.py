"""Election aggregate: the single owned state of a voting round.

The Election owns the workflow status, the voter registry, the proposal
list and the tally result. Every operation follows the same order:

1. Access check (administrator or registered voter)
2. Phase check (the operation's own phase only)
3. Record checks (duplicates, empty text, unknown index)
4. Mutation, applied only after every check passed
5. Return the event describing the committed change

Because all checks run before the first write, a rejected operation
leaves the Election exactly as it was.
"""

from __future__ import annotations

from ballot_workflow.domain.errors.ballot import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    EmptyDescriptionError,
    ProposalNotFoundError,
)
from ballot_workflow.domain.errors.workflow import (
    InvalidPhaseError,
    InvalidPhaseTransitionError,
)
from ballot_workflow.domain.events.voting import (
    ProposalRegisteredEvent,
    VoteCastEvent,
    VoterRegisteredEvent,
    WorkflowStatusChangedEvent,
)
from ballot_workflow.domain.models.proposal import GENESIS_DESCRIPTION, Proposal
from ballot_workflow.domain.models.voter import Voter
from ballot_workflow.domain.models.workflow_status import WorkflowStatus
from ballot_workflow.domain.services.access_control import AccessController
from ballot_workflow.domain.services.tally import find_winning_proposal_id


class Election:
    """A single-authority plurality election.

    Proposal indices are 0-based. With genesis seeding enabled (the
    default), opening proposal intake stores a GENESIS proposal at
    index 0, so voter proposals start at index 1. The genesis proposal
    can be read but a vote for it is rejected as ProposalNotFoundError.

    Example:
        >>> election = Election(administrator_id="admin")
        >>> _ = election.add_voter("admin", "alice")
        >>> _ = election.start_proposals_registering("admin")
        >>> election.add_proposal("alice", "a good proposal").proposal_id
        1
    """

    def __init__(
        self,
        administrator_id: str,
        seed_genesis_proposal: bool = True,
        genesis_description: str = GENESIS_DESCRIPTION,
    ) -> None:
        """Initialize an election in the RegisteringVoters phase.

        Args:
            administrator_id: Identity allowed to administer the election.
            seed_genesis_proposal: Whether opening proposal intake stores
                a genesis proposal at index 0.
            genesis_description: Text of the genesis proposal.

        Raises:
            ValueError: If administrator_id is empty or the genesis
                description is blank while seeding is enabled.
        """
        if seed_genesis_proposal and not genesis_description.strip():
            raise ValueError("Genesis description must not be empty")

        self._access = AccessController(administrator_id)
        self._seed_genesis_proposal = seed_genesis_proposal
        self._genesis_description = genesis_description
        self._workflow_status = WorkflowStatus.REGISTERING_VOTERS
        self._voters: dict[str, Voter] = {}
        self._proposals: list[Proposal] = []
        self._winning_proposal_id: int | None = None

    # ------------------------------------------------------------------
    # Public state
    # ------------------------------------------------------------------

    @property
    def administrator_id(self) -> str:
        return self._access.administrator_id

    @property
    def seeds_genesis_proposal(self) -> bool:
        return self._seed_genesis_proposal

    @property
    def workflow_status(self) -> WorkflowStatus:
        return self._workflow_status

    @property
    def winning_proposal_id(self) -> int | None:
        """Index of the winning proposal, None until votes are tallied."""
        return self._winning_proposal_id

    @property
    def voters(self) -> dict[str, Voter]:
        """Copy of the voter registry keyed by identity."""
        return dict(self._voters)

    @property
    def proposals(self) -> tuple[Proposal, ...]:
        return tuple(self._proposals)

    def is_registered(self, voter_id: str) -> bool:
        return voter_id in self._voters

    # ------------------------------------------------------------------
    # Read accessors (registered voters, any phase)
    # ------------------------------------------------------------------

    def get_voter(self, caller_id: str, voter_id: str) -> Voter:
        """Read a voter record.

        An identity without a record yields an empty, unregistered Voter.

        Raises:
            UnauthorizedError: If the caller is not a registered voter.
        """
        self._access.require_voter(caller_id, self._voters, "get_voter")
        return self._voters.get(voter_id, Voter.unregistered(voter_id))

    def get_one_proposal(self, caller_id: str, proposal_id: int) -> Proposal:
        """Read a proposal by index.

        Raises:
            UnauthorizedError: If the caller is not a registered voter.
            ProposalNotFoundError: If the index is out of range.
        """
        self._access.require_voter(caller_id, self._voters, "get_one_proposal")
        return self._lookup_proposal(proposal_id)

    def get_proposals(self, caller_id: str) -> tuple[Proposal, ...]:
        """Read every proposal in index order.

        Raises:
            UnauthorizedError: If the caller is not a registered voter.
        """
        self._access.require_voter(caller_id, self._voters, "get_proposals")
        return tuple(self._proposals)

    def get_winning_proposal(self) -> Proposal | None:
        """Read the winning proposal once votes are tallied.

        Returns:
            The winning Proposal, or None if no proposal was ever stored.

        Raises:
            InvalidPhaseError: If votes have not been tallied yet.
        """
        if self._workflow_status is not WorkflowStatus.VOTES_TALLIED:
            raise InvalidPhaseError(
                current_status=self._workflow_status,
                required_status=WorkflowStatus.VOTES_TALLIED,
                operation="get_winning_proposal",
            )
        if self._winning_proposal_id is None:
            return None
        return self._proposals[self._winning_proposal_id]

    # ------------------------------------------------------------------
    # Voter registration (administrator, RegisteringVoters)
    # ------------------------------------------------------------------

    def add_voter(self, caller_id: str, voter_id: str) -> VoterRegisteredEvent:
        """Register an identity as a voter.

        Raises:
            UnauthorizedError: If the caller is not the administrator.
            InvalidPhaseError: If voter registration is closed.
            AlreadyRegisteredError: If the identity is already registered.
            ValueError: If voter_id is empty or blank.
        """
        self._access.require_administrator(caller_id, "add_voter")
        self._require_phase(WorkflowStatus.REGISTERING_VOTERS, "add_voter")
        if not voter_id or not voter_id.strip():
            raise ValueError("Voter identity must not be empty")
        if voter_id in self._voters:
            raise AlreadyRegisteredError(voter_id)

        self._voters[voter_id] = Voter.registered(voter_id)
        return VoterRegisteredEvent(voter_id=voter_id)

    # ------------------------------------------------------------------
    # Proposals (registered voters, ProposalsRegistrationStarted)
    # ------------------------------------------------------------------

    def add_proposal(
        self, caller_id: str, description: str
    ) -> ProposalRegisteredEvent:
        """Append a proposal at the next sequential index.

        Raises:
            UnauthorizedError: If the caller is not a registered voter.
            InvalidPhaseError: If proposal intake is not open.
            EmptyDescriptionError: If the description is empty or blank.
        """
        self._access.require_voter(caller_id, self._voters, "add_proposal")
        self._require_phase(
            WorkflowStatus.PROPOSALS_REGISTRATION_STARTED, "add_proposal"
        )
        if not description or not description.strip():
            raise EmptyDescriptionError(caller_id)

        proposal_id = len(self._proposals)
        self._proposals.append(
            Proposal(proposal_id=proposal_id, description=description)
        )
        return ProposalRegisteredEvent(proposal_id=proposal_id)

    # ------------------------------------------------------------------
    # Votes (registered voters, VotingSessionStarted)
    # ------------------------------------------------------------------

    def set_vote(self, caller_id: str, proposal_id: int) -> VoteCastEvent:
        """Cast the caller's single vote.

        The proposal's vote count and the voter's record are updated
        together, after all checks passed.

        Raises:
            UnauthorizedError: If the caller is not a registered voter.
            InvalidPhaseError: If the voting session is not open.
            AlreadyVotedError: If the caller has already voted.
            ProposalNotFoundError: If the index is out of range or is
                the genesis proposal.
        """
        voter = self._access.require_voter(caller_id, self._voters, "set_vote")
        self._require_phase(WorkflowStatus.VOTING_SESSION_STARTED, "set_vote")
        if voter.has_voted:
            raise AlreadyVotedError(caller_id, voter.voted_proposal_id)
        proposal = self._lookup_proposal(proposal_id)
        if proposal.is_genesis:
            raise ProposalNotFoundError(
                proposal_id,
                len(self._proposals),
                reason="the genesis proposal cannot receive votes",
            )

        updated_voter = voter.with_vote(proposal_id)
        updated_proposal = proposal.with_vote_counted()
        self._proposals[proposal_id] = updated_proposal
        self._voters[caller_id] = updated_voter
        return VoteCastEvent(voter_id=caller_id, proposal_id=proposal_id)

    # ------------------------------------------------------------------
    # Phase transitions (administrator)
    # ------------------------------------------------------------------

    def start_proposals_registering(
        self, caller_id: str
    ) -> WorkflowStatusChangedEvent:
        """Open proposal intake, seeding the genesis proposal if enabled."""
        self._access.require_administrator(caller_id, "start_proposals_registering")
        self._require_transition(
            WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
            "start_proposals_registering",
        )
        if self._seed_genesis_proposal:
            self._proposals.append(Proposal.genesis(self._genesis_description))
        return self._advance()

    def end_proposals_registering(self, caller_id: str) -> WorkflowStatusChangedEvent:
        """Close proposal intake."""
        self._access.require_administrator(caller_id, "end_proposals_registering")
        self._require_transition(
            WorkflowStatus.PROPOSALS_REGISTRATION_ENDED,
            "end_proposals_registering",
        )
        return self._advance()

    def start_voting_session(self, caller_id: str) -> WorkflowStatusChangedEvent:
        """Open the voting session."""
        self._access.require_administrator(caller_id, "start_voting_session")
        self._require_transition(
            WorkflowStatus.VOTING_SESSION_STARTED, "start_voting_session"
        )
        return self._advance()

    def end_voting_session(self, caller_id: str) -> WorkflowStatusChangedEvent:
        """Close the voting session."""
        self._access.require_administrator(caller_id, "end_voting_session")
        self._require_transition(
            WorkflowStatus.VOTING_SESSION_ENDED, "end_voting_session"
        )
        return self._advance()

    def tally_votes(self, caller_id: str) -> WorkflowStatusChangedEvent:
        """Compute the winner and enter the terminal phase.

        Runs exactly once: afterwards the phase is terminal and any
        further call is rejected as an invalid transition.
        """
        self._access.require_administrator(caller_id, "tally_votes")
        self._require_transition(WorkflowStatus.VOTES_TALLIED, "tally_votes")
        self._winning_proposal_id = find_winning_proposal_id(self._proposals)
        return self._advance()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _lookup_proposal(self, proposal_id: int) -> Proposal:
        if proposal_id < 0 or proposal_id >= len(self._proposals):
            raise ProposalNotFoundError(proposal_id, len(self._proposals))
        return self._proposals[proposal_id]

    def _require_phase(self, required: WorkflowStatus, operation: str) -> None:
        if self._workflow_status is not required:
            raise InvalidPhaseError(
                current_status=self._workflow_status,
                required_status=required,
                operation=operation,
            )

    def _require_transition(self, target: WorkflowStatus, operation: str) -> None:
        # Only the immediate predecessor of target may enter it
        if self._workflow_status.next_status() is not target:
            required = next(
                status for status in WorkflowStatus if status.next_status() is target
            )
            raise InvalidPhaseTransitionError(
                from_status=self._workflow_status,
                to_status=target,
                required_status=required,
                operation=operation,
            )

    def _advance(self) -> WorkflowStatusChangedEvent:
        previous = self._workflow_status
        new_status = previous.next_status()
        assert new_status is not None
        self._workflow_status = new_status
        return WorkflowStatusChangedEvent(
            previous_status=previous, new_status=new_status
        )
