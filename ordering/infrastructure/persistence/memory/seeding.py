"""Bootstrap seeding для in-memory purchase order store.

Seeding іде тим самим шляхом, що й runtime writes (create → submit → save),
тому seed orders проходять ті самі invariants і публікують events на bus.
"""

import logging
import random

from ordering.config import Settings
from ordering.infrastructure.messaging import EventBus

from .purchase_order_repository import InMemoryPurchaseOrderRepository

logger = logging.getLogger(__name__)

SEED_QUANTITY_MIN = 10
SEED_QUANTITY_MAX = 100  # exclusive


def seed_product_code(order_id: int) -> str:
    """Product code for a seeded order, e.g. 7 → "Product-07"."""
    return f"Product-{order_id:02d}"


async def seed_purchase_orders(
    repository: InMemoryPurchaseOrderRepository,
    count: int = 20,
    rng: random.Random | None = None,
) -> None:
    """Commit pre-submitted orders with ids 1..count.

    Args:
        repository: Repository to seed.
        count: Кількість orders.
        rng: Random source для quantities (inject для відтворюваних tests).
    """
    rng = rng or random.Random()

    for order_id in range(1, count + 1):
        order = await repository.create(order_id)
        order.submit(
            seed_product_code(order_id),
            rng.randrange(SEED_QUANTITY_MIN, SEED_QUANTITY_MAX),
        )
        await repository.save(order)

    logger.info("purchase_orders.seeded", extra={"count": count})


async def create_purchase_order_repository(
    event_bus: EventBus,
    settings: Settings,
    rng: random.Random | None = None,
) -> InMemoryPurchaseOrderRepository:
    """Build and seed the process-wide repository.

    Викликається один раз при startup (main.py lifespan).

    Args:
        event_bus: Bus, owned alongside the repository.
        settings: Application settings (seed count, seed, strict transitions).
        rng: Explicit random source; за замовчуванням Random(settings.seed_random_seed).

    Returns:
        Seeded repository handle.
    """
    repository = InMemoryPurchaseOrderRepository(
        event_bus,
        enforce_transitions=settings.enforce_transitions,
    )
    if rng is None:
        rng = random.Random(settings.seed_random_seed)

    await seed_purchase_orders(repository, count=settings.seed_order_count, rng=rng)
    return repository
