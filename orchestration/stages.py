"""Standard restaurant stages - receive, prepare, deliver."""

from collections.abc import Callable

from core.domain.entities.order import Order

from .handlers import OrderHandler

# Where stage status lines go; print writes them to stdout
Sink = Callable[[str], None]

RECEIVE = "receive"
PREPARE = "prepare"
DELIVER = "deliver"

STAGE_MESSAGES: dict[str, str] = {
    RECEIVE: "Order received: ",
    PREPARE: "Order is being prepared: ",
    DELIVER: "Order is being delivered: ",
}

DEFAULT_STAGES = (RECEIVE, PREPARE, DELIVER)


def status_stage(name: str, message: str, sink: Sink = print) -> OrderHandler:
    """Build a handler that writes ``message`` followed by the rendered order."""

    def process(order: Order) -> None:
        sink(f"{message}{order}")

    return OrderHandler(name=name, process=process)


def make_stage(name: str, sink: Sink = print) -> OrderHandler:
    """Build one of the standard stages by name.

    Raises:
        KeyError: If ``name`` is not a standard stage
    """
    return status_stage(name, STAGE_MESSAGES[name], sink)


def link(*handlers: OrderHandler) -> OrderHandler:
    """Wire handlers in the given order and return the head.

    Raises:
        ValueError: If no handlers are given
    """
    if not handlers:
        raise ValueError("A chain needs at least one handler")

    for current, successor in zip(handlers, handlers[1:]):
        current.set_next_handler(successor)
    return handlers[0]


def build_default_chain(sink: Sink = print) -> OrderHandler:
    """Receive -> Prepare -> Deliver, all writing to ``sink``."""
    return link(*(make_stage(name, sink) for name in DEFAULT_STAGES))
