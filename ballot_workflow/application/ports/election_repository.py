"""Election repository port.

Defines the contract for storing the single Election aggregate.
Follows hexagonal architecture with port/adapter pattern: the
persistence backend is chosen by the host, the service only sees
this protocol.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ballot_workflow.domain.models.election import Election


class ElectionRepositoryProtocol(Protocol):
    """Protocol for election persistence.

    Implementations hold exactly one election. Saving after every
    successful operation makes that operation's result the latest
    committed state, which readers may observe without locking.
    """

    @abstractmethod
    async def get_election(self) -> Election:
        """Load the current election.

        Returns:
            The Election aggregate.
        """
        ...

    @abstractmethod
    async def save_election(self, election: Election) -> None:
        """Commit the election, replacing the stored one.

        The service hands over a working copy; until this returns,
        get_election still yields the previous state.

        Args:
            election: The aggregate after a successful operation.
        """
        ...
