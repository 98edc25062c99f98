"""Operation outcomes reported to the UI collaborator."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import structlog
from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from ..monitoring import metrics_collector


class Status(str, Enum):
    """How an operation ended."""

    APPLIED = "applied"
    NOOP = "noop"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Outcome:
    """Observable result of one engine operation."""

    action: str
    status: Status
    message: str
    target_id: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is Status.APPLIED


MutationResult = Result[Outcome, Outcome]
Listener = Callable[[Outcome], None]


def applied(action: str, message: str, target_id: str | None = None) -> MutationResult:
    return Success(Outcome(action, Status.APPLIED, message, target_id))


def noop(action: str, message: str, target_id: str | None = None) -> MutationResult:
    return Failure(Outcome(action, Status.NOOP, message, target_id))


def rejected(action: str, message: str, target_id: str | None = None) -> MutationResult:
    return Failure(Outcome(action, Status.REJECTED, message, target_id))


def outcome_of(result: MutationResult) -> Outcome:
    """Unwrap the outcome from either side of a result."""
    if is_successful(result):
        return result.unwrap()
    return result.failure()


class OutcomeReporter:
    """Logs, counts and fans out outcomes to subscribed listeners."""

    def __init__(self, logger: structlog.BoundLogger) -> None:
        self._logger = logger
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def report(self, result: MutationResult) -> MutationResult:
        outcome = outcome_of(result)
        fields = {"action": outcome.action, "status": outcome.status.value, "target_id": outcome.target_id}
        if outcome.status is Status.REJECTED:
            self._logger.warning("operation_rejected", reason=outcome.message, **fields)
        else:
            self._logger.info(f"operation_{outcome.status.value}", detail=outcome.message, **fields)

        metrics_collector.record_operation(outcome.action, outcome.status.value)
        for listener in list(self._listeners):
            listener(outcome)
        return result
