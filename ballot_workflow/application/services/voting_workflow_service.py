"""Voting workflow service: single-writer orchestration of the election.

This service is the only writer of the Election aggregate. It runs
every mutating operation as one atomic step under an asyncio lock:

1. Load the election from the repository
2. Apply the domain operation (access, phase and record checks first)
3. Commit the election back to the repository
4. Emit the resulting event to observers

The operation is applied to a working copy of the election, which
replaces the committed one only once the repository has saved it.
Rejections raised by the domain, and failed saves, are logged and
re-raised unchanged; they never leave partial state behind. Reads are
served from the latest committed state without taking the lock.
"""

from __future__ import annotations

import asyncio
import copy
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from structlog import BoundLogger, get_logger

from ballot_workflow.application.dtos.voting import (
    ElectionStatusDTO,
    PhaseTransitionResultDTO,
)
from ballot_workflow.domain.exceptions import BallotWorkflowError
from ballot_workflow.domain.models.proposal import Proposal
from ballot_workflow.domain.models.voter import Voter
from ballot_workflow.domain.models.workflow_status import WorkflowStatus

if TYPE_CHECKING:
    from ballot_workflow.application.ports.election_repository import (
        ElectionRepositoryProtocol,
    )
    from ballot_workflow.application.ports.voting_event_emitter import (
        VotingEventEmitterProtocol,
    )
    from ballot_workflow.domain.events.voting import (
        VotingEvent,
        WorkflowStatusChangedEvent,
    )
    from ballot_workflow.domain.models.election import Election

logger = get_logger(__name__)

_EventT = TypeVar("_EventT", bound="VotingEvent")
_T = TypeVar("_T")


class VotingWorkflowService:
    """Service driving the voting workflow for administrator and voters.

    Every public method takes the caller identity first; the election
    decides what that identity may do.

    Example:
        >>> service = VotingWorkflowService(
        ...     repository=ElectionRepositoryStub(Election("admin")),
        ...     event_emitter=VotingEventEmitterStub(),
        ... )
        >>> await service.add_voter("admin", "alice")
        >>> await service.start_proposals_registering("admin")
        >>> proposal = await service.add_proposal("alice", "a good proposal")
    """

    def __init__(
        self,
        repository: ElectionRepositoryProtocol,
        event_emitter: VotingEventEmitterProtocol,
    ) -> None:
        """Initialize the voting workflow service.

        Args:
            repository: Store holding the single election.
            event_emitter: Delivery channel for voting events.
        """
        self._repository = repository
        self._event_emitter = event_emitter
        self._lock = asyncio.Lock()

    # =====================================================================
    # Administrator operations
    # =====================================================================

    async def add_voter(self, caller_id: str, voter_id: str) -> Voter:
        """Register a voter.

        Returns:
            The new Voter record.

        Raises:
            UnauthorizedError: Caller is not the administrator
            InvalidPhaseError: Voter registration is closed
            AlreadyRegisteredError: Identity already registered
        """
        election, _ = await self._commit(
            "add_voter",
            caller_id,
            lambda election: election.add_voter(caller_id, voter_id),
            voter_id=voter_id,
        )
        return election.voters[voter_id]

    async def start_proposals_registering(
        self, caller_id: str
    ) -> PhaseTransitionResultDTO:
        """Open proposal intake (seeds the genesis proposal when enabled)."""
        return await self._transition(
            "start_proposals_registering",
            caller_id,
            lambda election: election.start_proposals_registering(caller_id),
        )

    async def end_proposals_registering(
        self, caller_id: str
    ) -> PhaseTransitionResultDTO:
        """Close proposal intake."""
        return await self._transition(
            "end_proposals_registering",
            caller_id,
            lambda election: election.end_proposals_registering(caller_id),
        )

    async def start_voting_session(self, caller_id: str) -> PhaseTransitionResultDTO:
        """Open the voting session."""
        return await self._transition(
            "start_voting_session",
            caller_id,
            lambda election: election.start_voting_session(caller_id),
        )

    async def end_voting_session(self, caller_id: str) -> PhaseTransitionResultDTO:
        """Close the voting session."""
        return await self._transition(
            "end_voting_session",
            caller_id,
            lambda election: election.end_voting_session(caller_id),
        )

    async def tally_votes(self, caller_id: str) -> PhaseTransitionResultDTO:
        """Compute the winning proposal and close the election.

        Returns:
            PhaseTransitionResultDTO carrying winning_proposal_id.

        Raises:
            UnauthorizedError: Caller is not the administrator
            InvalidPhaseTransitionError: Voting session has not ended,
                or votes were already tallied
        """
        return await self._transition(
            "tally_votes",
            caller_id,
            lambda election: election.tally_votes(caller_id),
        )

    # =====================================================================
    # Voter operations
    # =====================================================================

    async def add_proposal(self, caller_id: str, description: str) -> Proposal:
        """Submit a proposal.

        Returns:
            The stored Proposal with its assigned index.

        Raises:
            UnauthorizedError: Caller is not a registered voter
            InvalidPhaseError: Proposal intake is not open
            EmptyDescriptionError: Description is empty or blank
        """
        election, event = await self._commit(
            "add_proposal",
            caller_id,
            lambda election: election.add_proposal(caller_id, description),
        )
        return election.proposals[event.proposal_id]

    async def set_vote(self, caller_id: str, proposal_id: int) -> Voter:
        """Cast the caller's vote.

        Returns:
            The caller's Voter record after voting.

        Raises:
            UnauthorizedError: Caller is not a registered voter
            InvalidPhaseError: Voting session is not open
            AlreadyVotedError: Caller already voted
            ProposalNotFoundError: No votable proposal at that index
        """
        election, _ = await self._commit(
            "set_vote",
            caller_id,
            lambda election: election.set_vote(caller_id, proposal_id),
            proposal_id=proposal_id,
        )
        return election.voters[caller_id]

    # =====================================================================
    # Reads (latest committed state, no lock)
    # =====================================================================

    async def get_voter(self, caller_id: str, voter_id: str) -> Voter:
        """Read a voter record (registered voters only)."""
        election = await self._repository.get_election()
        return self._read(
            "get_voter", caller_id, lambda: election.get_voter(caller_id, voter_id)
        )

    async def get_one_proposal(self, caller_id: str, proposal_id: int) -> Proposal:
        """Read one proposal by index (registered voters only)."""
        election = await self._repository.get_election()
        return self._read(
            "get_one_proposal",
            caller_id,
            lambda: election.get_one_proposal(caller_id, proposal_id),
        )

    async def get_proposals(self, caller_id: str) -> tuple[Proposal, ...]:
        """Read every proposal in index order (registered voters only)."""
        election = await self._repository.get_election()
        return self._read(
            "get_proposals", caller_id, lambda: election.get_proposals(caller_id)
        )

    async def get_workflow_status(self) -> WorkflowStatus:
        election = await self._repository.get_election()
        return election.workflow_status

    async def get_winning_proposal_id(self) -> int | None:
        election = await self._repository.get_election()
        return election.winning_proposal_id

    async def get_winning_proposal(self) -> Proposal | None:
        """Read the winning proposal.

        Raises:
            InvalidPhaseError: Votes have not been tallied yet
        """
        election = await self._repository.get_election()
        return self._read("get_winning_proposal", "", election.get_winning_proposal)

    async def get_status(self) -> ElectionStatusDTO:
        """Public snapshot of phase, winner and record counts."""
        election = await self._repository.get_election()
        return ElectionStatusDTO(
            workflow_status=election.workflow_status,
            winning_proposal_id=election.winning_proposal_id,
            voter_count=len(election.voters),
            proposal_count=len(election.proposals),
        )

    # =====================================================================
    # Internals
    # =====================================================================

    async def _transition(
        self,
        operation: str,
        caller_id: str,
        apply: Callable[[Election], WorkflowStatusChangedEvent],
    ) -> PhaseTransitionResultDTO:
        election, event = await self._commit(operation, caller_id, apply)
        return PhaseTransitionResultDTO(
            previous_status=event.previous_status,
            new_status=event.new_status,
            winning_proposal_id=election.winning_proposal_id,
        )

    async def _commit(
        self,
        operation: str,
        caller_id: str,
        apply: Callable[[Election], _EventT],
        **context: object,
    ) -> tuple[Election, _EventT]:
        """Apply one mutating operation atomically and emit its event."""
        log = logger.bind(operation=operation, caller_id=caller_id, **context)

        async with self._lock:
            committed = await self._repository.get_election()
            election = copy.deepcopy(committed)
            try:
                event = apply(election)
            except (BallotWorkflowError, ValueError) as e:
                log.warning(
                    "voting_operation_rejected",
                    error_type=type(e).__name__,
                    reason=str(e),
                    workflow_status=committed.workflow_status.value,
                )
                raise

            try:
                await self._repository.save_election(election)
            except Exception:
                log.exception(
                    "voting_commit_failed",
                    workflow_status=committed.workflow_status.value,
                )
                raise
            await self._emit(event, log)

        log.info(
            "voting_operation_committed",
            workflow_status=election.workflow_status.value,
        )
        return election, event

    async def _emit(self, event: VotingEvent, log: BoundLogger) -> None:
        # State is already committed; a failed notification must not undo it
        try:
            await self._event_emitter.emit(event)
        except Exception:
            log.exception(
                "voting_event_emission_failed",
                event_type=event.event_type,
            )

    def _read(self, operation: str, caller_id: str, read: Callable[[], _T]) -> _T:
        try:
            return read()
        except BallotWorkflowError as e:
            logger.debug(
                "voting_read_rejected",
                operation=operation,
                caller_id=caller_id,
                error_type=type(e).__name__,
            )
            raise
