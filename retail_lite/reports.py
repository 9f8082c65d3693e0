from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from retail_lite.inventory import InventoryStore
from retail_lite.models import Order

logger = logging.getLogger(__name__)


def format_order(order: Order) -> str:
    return (
        f"Order#{order.order_id} by {order.customer.name} on {order.created_at.date().isoformat()} "
        f"| items={len(order.items)} | Total: {order.total}"
    )


class ReportService:
    # Sales reports and low-stock alerts over the in-memory inventory and orders.

    def __init__(self, inventory: InventoryStore, report_dir: Path = Path(".")):
        self.inventory = inventory
        self.report_dir = Path(report_dir)

    def default_report_path(self, today: Optional[date] = None) -> Path:
        today = today or date.today()
        return self.report_dir / f"order-report-{today.isoformat()}.txt"

    def export_order_report(self, orders: Iterable[Order], path: Optional[Path] = None) -> bool:
        """
        Write one line per order to ``path`` (default: today's report file).

        Returns False if the file can't be written; the error is logged, not raised.
        """
        path = Path(path) if path is not None else self.default_report_path()
        try:
            with open(path, "w", encoding="utf-8") as f:
                for order in orders:
                    f.write(format_order(order) + "\n")
        except OSError as e:
            logger.error("failed to write order report %s: %s", path, e)
            return False
        logger.info("order report exported to %s", path)
        return True

    def sales_summary(self, orders: Iterable[Order]) -> Dict[str, object]:
        # Counter tracks units sold per product id; most_common(5) gives the top 5.
        orders = list(orders)
        revenue = sum((o.total for o in orders), Decimal("0.00"))
        counter: Counter = Counter()
        for o in orders:
            for it in o.items:
                counter[it.product.id] += it.quantity
        return {"revenue": revenue, "orders": len(orders), "top5": counter.most_common(5)}

    def low_stock(self, threshold: int = 5) -> List[Tuple[int, int]]:
        # stock is read under the lock too, so an order in flight is seen whole or not at all
        with self.inventory.lock:
            return [(p.id, p.stock) for p in self.inventory.list_all_products() if p.stock <= threshold]
