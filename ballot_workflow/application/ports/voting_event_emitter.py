"""Voting event emitter port.

Defines the contract for delivering voting notifications to external
observers. Delivery is one-way: observers do not acknowledge events,
and the workflow never waits on them.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ballot_workflow.domain.events.voting import VotingEvent


class VotingEventEmitterProtocol(Protocol):
    """Protocol for emitting voting events.

    Events are emitted only after the change they describe has been
    committed, in the order the changes happened.
    """

    @abstractmethod
    async def emit(self, event: VotingEvent) -> None:
        """Deliver one event to observers.

        Args:
            event: The committed voting event.
        """
        ...
