"""In-memory voting event emitter.

Captures every emitted event in order and forwards it to subscribed
observers. Observers are plain callables; delivery is one-way and
their return values are ignored. An observer that raises is logged
and skipped, the remaining observers still receive the event.

Usage in tests:
    emitter = VotingEventEmitterStub()
    service = VotingWorkflowService(repository=..., event_emitter=emitter)

    await service.start_proposals_registering("admin")

    assert emitter.get_events(WORKFLOW_STATUS_CHANGED_EVENT_TYPE)[0].new_status == (
        WorkflowStatus.PROPOSALS_REGISTRATION_STARTED
    )

    # Failure path: emission errors are logged by the service, never raised
    emitter.fail_exception = RuntimeError("observer down")
"""

from __future__ import annotations

from collections.abc import Callable

from ballot_workflow.application.ports.voting_event_emitter import (
    VotingEventEmitterProtocol,
)
from ballot_workflow.domain.events.voting import VotingEvent
from ballot_workflow.infrastructure.observability.logging import (
    get_logger_for_service,
)

VotingObserver = Callable[[VotingEvent], None]


class VotingEventEmitterStub(VotingEventEmitterProtocol):
    """Stub implementation capturing voting events for assertions.

    Attributes:
        emitted_events: All emitted events, oldest first.
        fail_exception: If set, emit() raises this exception instead of
            recording the event.
    """

    def __init__(self) -> None:
        """Initialize the stub with no events and no observers."""
        self.emitted_events: list[VotingEvent] = []
        self.fail_exception: Exception | None = None
        self._observers: list[VotingObserver] = []
        self._log = get_logger_for_service(type(self).__name__)

    def subscribe(self, observer: VotingObserver) -> None:
        """Register an observer called with every subsequent event."""
        self._observers.append(observer)

    def unsubscribe(self, observer: VotingObserver) -> None:
        """Remove a previously registered observer.

        Raises:
            ValueError: If the observer was never subscribed.
        """
        self._observers.remove(observer)

    async def emit(self, event: VotingEvent) -> None:
        """Record the event and forward it to observers.

        Raises:
            Exception: fail_exception, when configured.
        """
        if self.fail_exception is not None:
            raise self.fail_exception

        self.emitted_events.append(event)
        self._log.debug("voting_event_emitted", **event.to_dict())
        for observer in list(self._observers):
            try:
                observer(event)
            except Exception:
                self._log.exception(
                    "voting_observer_failed",
                    event_type=event.event_type,
                    observer=getattr(observer, "__qualname__", repr(observer)),
                )

    def get_events(self, event_type: str | None = None) -> list[VotingEvent]:
        """Get emitted events, optionally only those of one type.

        Args:
            event_type: Event type constant to filter on.

        Returns:
            Matching events, oldest first.
        """
        if event_type is None:
            return list(self.emitted_events)
        return [e for e in self.emitted_events if e.event_type == event_type]

    def reset(self) -> None:
        """Clear recorded events and failure configuration."""
        self.emitted_events.clear()
        self.fail_exception = None
