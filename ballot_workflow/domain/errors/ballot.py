"""Ballot store errors: voter, proposal and vote bookkeeping.

These errors carry the offending identity or index so callers can
report exactly what was rejected.
"""

from __future__ import annotations

from ballot_workflow.domain.exceptions import BallotWorkflowError


class BallotError(BallotWorkflowError):
    """Base error for voter, proposal and vote records."""

    pass


class AlreadyRegisteredError(BallotError):
    """Raised when the administrator registers the same identity twice.

    HTTP Status: 409 Conflict

    Attributes:
        voter_id: The identity that already has a Voter record.
    """

    def __init__(self, voter_id: str) -> None:
        """Initialize the error.

        Args:
            voter_id: The identity that already has a Voter record.
        """
        self.voter_id = voter_id
        super().__init__(f"Voter {voter_id!r} is already registered")

    def to_rfc7807_dict(self) -> dict:
        """Serialize to RFC 7807 problem details format."""
        return {
            "type": "urn:ballot-workflow:ballot:already-registered",
            "title": "Already Registered",
            "status": 409,
            "detail": str(self),
            "voter_id": self.voter_id,
        }


class AlreadyVotedError(BallotError):
    """Raised when a voter casts a second vote.

    HTTP Status: 409 Conflict

    Attributes:
        voter_id: The voter attempting to vote again.
        voted_proposal_id: The proposal index of the existing vote.
    """

    def __init__(self, voter_id: str, voted_proposal_id: int) -> None:
        """Initialize the error.

        Args:
            voter_id: The voter attempting to vote again.
            voted_proposal_id: The proposal index of the existing vote.
        """
        self.voter_id = voter_id
        self.voted_proposal_id = voted_proposal_id
        super().__init__(
            f"Voter {voter_id!r} has already voted for proposal {voted_proposal_id}"
        )

    def to_rfc7807_dict(self) -> dict:
        """Serialize to RFC 7807 problem details format."""
        return {
            "type": "urn:ballot-workflow:ballot:already-voted",
            "title": "Already Voted",
            "status": 409,
            "detail": str(self),
            "voter_id": self.voter_id,
            "voted_proposal_id": self.voted_proposal_id,
        }


class EmptyDescriptionError(BallotError):
    """Raised when a proposal is submitted with empty or blank text.

    HTTP Status: 422 Unprocessable Entity

    Attributes:
        voter_id: The voter who submitted the proposal.
    """

    def __init__(self, voter_id: str) -> None:
        """Initialize the error.

        Args:
            voter_id: The voter who submitted the proposal.
        """
        self.voter_id = voter_id
        super().__init__(
            f"Proposal from {voter_id!r} rejected: description must not be empty"
        )

    def to_rfc7807_dict(self) -> dict:
        """Serialize to RFC 7807 problem details format."""
        return {
            "type": "urn:ballot-workflow:ballot:empty-description",
            "title": "Empty Description",
            "status": 422,
            "detail": str(self),
            "voter_id": self.voter_id,
        }


class ProposalNotFoundError(BallotError):
    """Raised when a proposal index has no votable or readable proposal.

    HTTP Status: 404 Not Found

    Attributes:
        proposal_id: The requested proposal index.
        proposal_count: Number of proposals currently stored.
    """

    def __init__(
        self, proposal_id: int, proposal_count: int, reason: str | None = None
    ) -> None:
        """Initialize the error.

        Args:
            proposal_id: The requested proposal index.
            proposal_count: Number of proposals currently stored.
            reason: Optional extra detail appended to the message.
        """
        self.proposal_id = proposal_id
        self.proposal_count = proposal_count
        message = f"Proposal not found: {proposal_id} ({proposal_count} proposals)"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    def to_rfc7807_dict(self) -> dict:
        """Serialize to RFC 7807 problem details format."""
        return {
            "type": "urn:ballot-workflow:ballot:proposal-not-found",
            "title": "Proposal Not Found",
            "status": 404,
            "detail": str(self),
            "proposal_id": self.proposal_id,
            "proposal_count": self.proposal_count,
        }
