from __future__ import annotations

import argparse
import logging
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from retail_lite.config import load_settings
from retail_lite.customers import CustomerRegistry
from retail_lite.discounts import default_pipeline
from retail_lite.inventory import InventoryStore
from retail_lite.logging_setup import setup_logger
from retail_lite.models import Customer, OrderItem, Product
from retail_lite.orders import OrderWorkflow
from retail_lite.reports import ReportService


def seed(inventory: InventoryStore) -> None:
    inventory.seed(
        [
            Product(1, "Leather Jacket", "Jackets", Decimal("89.99"), 10, frozenset({"S", "M", "L"})),
            Product(2, "Running Shoes", "Shoes", Decimal("59.49"), 15, frozenset({"M", "L"})),
            Product(3, "Wool Scarf", "Accessories", Decimal("25.00"), 30, frozenset({"one size"})),
        ]
    )


def parse_item(raw: str) -> Tuple[int, int]:
    # "2:3" -> product 2, qty 3
    product_id, _, qty = raw.partition(":")
    try:
        parsed = int(product_id), int(qty or 1)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected PRODUCT_ID:QTY, got {raw!r}")
    if parsed[1] <= 0:
        raise argparse.ArgumentTypeError(f"quantity must be > 0, got {raw!r}")
    return parsed


def build_items(inventory: InventoryStore, requested: Sequence[Tuple[int, int]]) -> Optional[List[OrderItem]]:
    # Заказ либо целиком, либо никак: неизвестный товар отменяет всё.
    items = []
    for product_id, qty in requested:
        product = inventory.find_product_by_id(product_id)
        if product is None:
            print(f"product {product_id} not found, order cancelled")
            return None
        items.append(OrderItem(product, qty))
    return items


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = load_settings()

    p = argparse.ArgumentParser(description="Place one order against the demo catalog and print logs.")
    p.add_argument("--name", type=str, default="Alice")
    p.add_argument("--email", type=str, default="alice@example.com")
    p.add_argument("--vip", action="store_true")
    p.add_argument("--item", dest="items", type=parse_item, action="append", default=None, help="PRODUCT_ID:QTY, можно повторять")
    p.add_argument("--report", action="store_true", help="Записать отчёт по заказам в RETAIL_REPORT_DIR")
    p.add_argument("--log-file", action="store_true", help="Писать логи ещё и в RETAIL_LOG_DIR")
    args = p.parse_args(argv)

    if args.log_file:
        setup_logger(settings)
    else:
        logging.basicConfig(level=settings.log_level, format="%(message)s")

    inventory = InventoryStore()
    seed(inventory)

    customers = CustomerRegistry()
    customer = Customer(args.name, args.email, is_vip=args.vip)
    customers.register_customer(customer)

    pipeline = default_pipeline(settings)
    print("\n=== PRICES ===")
    for product in inventory.list_all_products():
        print(f"{product.id}: {product.name} base={product.price} yours={pipeline.price_for(customer, product)}")

    workflow = OrderWorkflow(inventory)
    items = build_items(inventory, args.items or [(2, 1)])
    order = workflow.create_order(customer, items) if items is not None else None

    print("\n=== RESULT ===")
    print("success:", order is not None)
    if order is not None:
        for it in order.items:
            print(f"- {it.product.name} x {it.quantity} @ {it.product.price} -> {it.subtotal}")
        print("total:", order.total)
    print("stock:", {p.id: p.stock for p in inventory.list_all_products()})

    reports = ReportService(inventory, settings.report_dir)
    print("low stock:", reports.low_stock(settings.low_stock_threshold))
    if args.report:
        reports.export_order_report(workflow.all_orders())


if __name__ == "__main__":
    main()
