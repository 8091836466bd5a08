"""Tests for OrderHandler - chain wiring, ordering and failure policies."""

import pytest

from core.domain.entities import Dish, OrderBuilder
from core.domain.enums import ExecutionStatus, FailurePolicy
from core.domain.exceptions import CyclicChainError, ProcessingError
from orchestration.bus import InMemoryEventBus
from orchestration.handlers import OrderHandler
from orchestration.stages import link


class FakeEventBus:
    """Fake EventBus for testing."""

    def __init__(self) -> None:
        """Initialize fake event bus."""
        self.events: list[object] = []

    def publish(self, event: object) -> None:
        """Store event."""
        self.events.append(event)

    def subscribe(self, event_name: str, handler: object) -> None:
        """Subscribe handler (no-op for fake)."""
        pass


@pytest.fixture
def order():
    return OrderBuilder().set_customer_name("John Doe").add_item(Dish("Burger", "5.99")).build()


def recording_handler(name: str, calls: list) -> OrderHandler:
    def process(order):
        calls.append((name, order))

    return OrderHandler(name=name, process=process)


def failing_handler(name: str, calls: list) -> OrderHandler:
    def process(order):
        calls.append((name, order))
        raise RuntimeError(f"{name} is out of ingredients")

    return OrderHandler(name=name, process=process)


def test_chain_runs_stages_in_order_with_same_order(order):
    calls: list = []
    head = link(
        recording_handler("h1", calls),
        recording_handler("h2", calls),
        recording_handler("h3", calls),
    )

    result = head.handle_order(order)

    assert [name for name, _ in calls] == ["h1", "h2", "h3"]
    assert all(received is order for _, received in calls)
    assert result.status == ExecutionStatus.SUCCESS
    assert result.succeeded
    assert [stage.name for stage in result.stages] == ["h1", "h2", "h3"]
    assert result.execution_id is not None


def test_handler_without_successor_runs_once(order):
    calls: list = []
    handler = recording_handler("only", calls)

    result = handler.handle_order(order)

    assert calls == [("only", order)]
    assert len(result.stages) == 1
    assert result.status == ExecutionStatus.SUCCESS


def test_handling_from_the_middle_skips_earlier_stages(order):
    calls: list = []
    first = recording_handler("h1", calls)
    second = recording_handler("h2", calls)
    link(first, second)

    second.handle_order(order)

    assert [name for name, _ in calls] == ["h2"]


def test_set_next_handler_overwrites_and_returns_successor():
    calls: list = []
    head = recording_handler("head", calls)
    old = recording_handler("old", calls)
    new = recording_handler("new", calls)

    assert head.set_next_handler(old) is old
    head.set_next_handler(new)

    assert head.chain_names() == ["head", "new"]


def test_fluent_wiring():
    calls: list = []
    a, b, c = (recording_handler(name, calls) for name in "abc")
    a.set_next_handler(b).set_next_handler(c)
    assert a.chain_names() == ["a", "b", "c"]


def test_self_link_is_rejected():
    handler = recording_handler("loop", [])
    with pytest.raises(CyclicChainError):
        handler.set_next_handler(handler)
    assert handler.next_handler is None


def test_indirect_cycle_is_rejected():
    calls: list = []
    head = link(*(recording_handler(name, calls) for name in ("a", "b", "c")))
    tail = head.next_handler.next_handler

    with pytest.raises(CyclicChainError):
        tail.set_next_handler(head)


def test_unlinking_with_none():
    calls: list = []
    head = link(recording_handler("a", calls), recording_handler("b", calls))
    head.set_next_handler(None)
    assert head.chain_names() == ["a"]


def test_long_chain_does_not_recurse(order):
    calls: list = []
    handlers = [recording_handler(f"h{i}", calls) for i in range(5000)]
    head = link(*handlers)

    result = head.handle_order(order)

    assert len(calls) == 5000
    assert result.succeeded


def test_abort_policy_stops_at_failing_stage(order):
    calls: list = []
    head = link(
        recording_handler("receive", calls),
        failing_handler("prepare", calls),
        recording_handler("deliver", calls),
    )

    result = head.handle_order(order, failure_policy=FailurePolicy.ABORT)

    assert [name for name, _ in calls] == ["receive", "prepare"]
    assert result.status == ExecutionStatus.FAILED
    assert [stage.success for stage in result.stages] == [True, False]

    error = result.stages[1].error
    assert isinstance(error, ProcessingError)
    assert error.stage == "prepare"
    assert error.order is order
    assert isinstance(error.__cause__, RuntimeError)


def test_continue_policy_runs_remaining_stages(order):
    calls: list = []
    head = link(
        recording_handler("receive", calls),
        failing_handler("prepare", calls),
        recording_handler("deliver", calls),
    )

    result = head.handle_order(order, failure_policy=FailurePolicy.CONTINUE)

    assert [name for name, _ in calls] == ["receive", "prepare", "deliver"]
    assert result.status == ExecutionStatus.PARTIAL
    assert len(result.errors) == 1


def test_continue_policy_with_every_stage_failing_is_failed(order):
    calls: list = []
    head = link(failing_handler("a", calls), failing_handler("b", calls))

    result = head.handle_order(order, failure_policy=FailurePolicy.CONTINUE)

    assert result.status == ExecutionStatus.FAILED
    assert len(result.errors) == 2


def test_raise_for_status(order):
    head = failing_handler("prepare", [])
    result = head.handle_order(order)

    with pytest.raises(ProcessingError, match="prepare"):
        result.raise_for_status()


def test_raise_for_status_on_success_is_silent(order):
    result = recording_handler("ok", []).handle_order(order)
    result.raise_for_status()


def test_events_published_per_stage(order):
    bus = FakeEventBus()
    calls: list = []
    head = link(recording_handler("receive", calls), failing_handler("prepare", calls))

    result = head.handle_order(order, event_bus=bus)

    assert [event.name for event in bus.events] == [
        "order.stage.succeeded",
        "order.stage.failed",
    ]
    assert [event.metadata.stage for event in bus.events] == ["receive", "prepare"]
    assert all(event.metadata.execution_id == str(result.execution_id) for event in bus.events)
    assert bus.events[0].payload["customer_name"] == "John Doe"
    assert bus.events[0].payload["error"] is None
    assert "out of ingredients" in bus.events[1].payload["error"]


def test_chain_is_reusable_across_orders(order):
    calls: list = []
    head = link(recording_handler("a", calls), recording_handler("b", calls))
    other = OrderBuilder().set_customer_name("Jane").build()

    first = head.handle_order(order)
    second = head.handle_order(other)

    assert [received for _, received in calls] == [order, order, other, other]
    assert first.execution_id != second.execution_id


def test_failing_subscriber_does_not_break_the_chain(order):
    bus = InMemoryEventBus()
    delivered: list = []

    def broken(event) -> None:
        raise RuntimeError("dashboard offline")

    bus.subscribe("order.stage.succeeded", broken)
    bus.subscribe("order.stage.succeeded", delivered.append)

    calls: list = []
    head = link(*(recording_handler(name, calls) for name in ("receive", "prepare", "deliver")))

    result = head.handle_order(order, event_bus=bus)

    assert [name for name, _ in calls] == ["receive", "prepare", "deliver"]
    assert result.status == ExecutionStatus.SUCCESS
    assert [event.metadata.stage for event in delivered] == ["receive", "prepare", "deliver"]
