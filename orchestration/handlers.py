"""Order handler chain - OrderHandler (Chain of Responsibility)."""

import time
from collections.abc import Callable, Iterator
from datetime import datetime, timezone

from core.domain.entities.order import Order
from core.domain.enums import ExecutionStatus, FailurePolicy
from core.domain.exceptions import CyclicChainError, ProcessingError
from core.domain.value_objects import ExecutionID
from core.infrastructure.logging import get_logger

from .bus import EventBusProtocol
from .events import Event, EventMetadata
from .models import ChainResult, StageResult

# Type alias for a stage's side effect
StageProcess = Callable[[Order], None]

logger = get_logger("orchestration.handlers")


class OrderHandler:
    """One stage in a singly linked chain of order processors.

    Stages differ only in their ``process`` callable, so there is a single
    handler type rather than one subclass per stage. Handlers keep no
    per-order state and can be reused for any number of orders.
    """

    def __init__(
        self,
        name: str,
        process: StageProcess,
        next_handler: "OrderHandler | None" = None,
    ) -> None:
        """Initialize handler.

        Args:
            name: Stage name used in results, events and logs
            process: Side effect performed for each order
            next_handler: Optional successor
        """
        self.name = name
        self.process = process
        self.next_handler: OrderHandler | None = None
        if next_handler is not None:
            self.set_next_handler(next_handler)

    def set_next_handler(self, handler: "OrderHandler | None") -> "OrderHandler | None":
        """Replace the successor of this handler.

        Returns the successor so a chain can be wired in one expression:
        ``receive.set_next_handler(prepare).set_next_handler(deliver)``.

        Raises:
            CyclicChainError: If the new successor leads back to this handler
        """
        if handler is not None and any(node is self for node in handler.iter_chain()):
            raise CyclicChainError(
                f"Linking '{self.name}' -> '{handler.name}' would create a cycle"
            )
        self.next_handler = handler
        return handler

    def iter_chain(self) -> Iterator["OrderHandler"]:
        """Yield this handler and every successor, in order."""
        node: OrderHandler | None = self
        while node is not None:
            yield node
            node = node.next_handler

    def chain_names(self) -> list[str]:
        return [node.name for node in self.iter_chain()]

    def handle_order(
        self,
        order: Order,
        failure_policy: FailurePolicy = FailurePolicy.ABORT,
        event_bus: EventBusProtocol | None = None,
    ) -> ChainResult:
        """Run ``order`` through this stage and all of its successors.

        Every stage receives the same Order object. Traversal is a loop, so
        chain length does not grow the call stack.

        Args:
            order: Order to process
            failure_policy: ABORT stops at the first failing stage, CONTINUE
                records the failure and carries on
            event_bus: Optional bus receiving one event per stage

        Returns:
            ChainResult with one StageResult per stage that ran
        """
        execution_id = ExecutionID.generate()
        started_at = datetime.now(timezone.utc)
        stages: list[StageResult] = []

        for handler in self.iter_chain():
            result = handler._run_stage(order, execution_id, event_bus)
            stages.append(result)

            if not result.success and failure_policy == FailurePolicy.ABORT:
                logger.warning(
                    "chain_aborted execution_id=%s stage=%s",
                    execution_id,
                    handler.name,
                )
                break

        failed = sum(1 for stage in stages if not stage.success)
        if not failed:
            status = ExecutionStatus.SUCCESS
        elif failure_policy == FailurePolicy.CONTINUE and failed < len(stages):
            status = ExecutionStatus.PARTIAL
        else:
            status = ExecutionStatus.FAILED

        return ChainResult(
            execution_id=execution_id,
            status=status,
            started_at=started_at,
            finished_at=datetime.now(timezone.utc),
            stages=stages,
        )

    def _run_stage(
        self,
        order: Order,
        execution_id: ExecutionID,
        event_bus: EventBusProtocol | None,
    ) -> StageResult:
        """Run this handler's own side effect only."""
        started = time.perf_counter()
        error: ProcessingError | None = None

        try:
            self.process(order)
        except Exception as exc:
            error = ProcessingError(self.name, order, str(exc))
            error.__cause__ = exc
            logger.error(
                "stage_failed execution_id=%s stage=%s error=%s",
                execution_id,
                self.name,
                exc,
                exc_info=True,
            )

        duration_ms = int((time.perf_counter() - started) * 1000)
        if error is None:
            logger.info(
                "stage_completed execution_id=%s stage=%s duration_ms=%d",
                execution_id,
                self.name,
                duration_ms,
            )

        if event_bus is not None:
            event_bus.publish(
                Event(
                    name="order.stage.failed" if error else "order.stage.succeeded",
                    payload={
                        "customer_name": order.customer_name,
                        "total_cost": str(order.total_cost),
                        "error": str(error) if error else None,
                    },
                    metadata=EventMetadata(
                        execution_id=str(execution_id),
                        stage=self.name,
                        timestamp=datetime.now(timezone.utc),
                    ),
                )
            )

        return StageResult(
            name=self.name,
            success=error is None,
            duration_ms=duration_ms,
            error=error,
        )

    def __repr__(self) -> str:
        successor = self.next_handler.name if self.next_handler else None
        return f"OrderHandler(name={self.name!r}, next={successor!r})"
