"""
Restaurant Order Demo

This demonstrates the complete flow:
1. Create dishes (Composite leaves)
2. Combine Pizza and Cola into a combo (Composite)
3. Build John Doe's order with the OrderBuilder (Builder)
4. Run it through Receive -> Prepare -> Deliver (Chain of Responsibility)

Stage lines go to stdout; diagnostics go to stderr through logging.
"""
import sys
from typing import Dict, Optional

from core.domain.entities import CompositeItem, Dish, Order, OrderBuilder
from core.domain.value_objects import Money
from core.infrastructure.logging import configure_logging, get_logger
from core.settings import AppSettings, get_app_settings
from orchestration import ChainResult, build_default_chain
from orchestration.stages import Sink

logger = get_logger("demo.restaurant_demo")

MENU_PRICES = {
    "Pizza": "8.99",
    "Burger": "5.99",
    "Cola": "1.99",
}


def build_menu(currency: str = "USD") -> Dict[str, Dish]:
    """Create the sample dishes, keyed by name."""
    return {
        name: Dish(name, Money(price, currency))
        for name, price in MENU_PRICES.items()
    }


def build_sample_order(settings: AppSettings) -> Order:
    """John Doe orders a Burger and a Pizza + Cola combo."""
    menu = build_menu(settings.currency)

    combo = CompositeItem(currency=settings.currency)
    combo.add_item(menu["Pizza"])
    combo.add_item(menu["Cola"])

    return (
        OrderBuilder(currency=settings.currency, require_items=settings.require_items)
        .set_customer_name("John Doe")
        .add_item(menu["Burger"])
        .add_item(combo)
        .build()
    )


def run_demo(sink: Sink = print, settings: Optional[AppSettings] = None) -> ChainResult:
    """Build the sample order and run it through the default chain once."""
    settings = settings or get_app_settings()

    order = build_sample_order(settings)
    logger.info("Built order for %s, total %s", order.customer_name, order.total_cost)

    chain = build_default_chain(sink)
    result = chain.handle_order(order, failure_policy=settings.failure_policy)

    logger.info(
        "Chain %s finished: %s (%d stages)",
        result.execution_id,
        result.status.value,
        len(result.stages),
    )
    return result


def main() -> int:
    """Console entry point."""
    settings = get_app_settings()
    configure_logging(settings.log_level)

    result = run_demo(settings=settings)
    result.raise_for_status()
    return 0


if __name__ == "__main__":
    sys.exit(main())
