from __future__ import annotations

import itertools
from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from retail_lite.inventory import InventoryStore
from retail_lite.models import Customer, Order, OrderItem


class OrderRejected(Exception):
    pass


class OrderWorkflow:
    """
    Единственное место, где заказ меняет остатки на складе.

    Проверка, списание и запись заказа идут под ``inventory.lock``:
    два параллельных заказа не могут оба увидеть один и тот же остаток.
    """

    def __init__(self, inventory: InventoryStore):
        self.inventory = inventory
        self.customer_orders: Dict[int, List[Order]] = {}

        self._order_ids = itertools.count(1)
        self._placed: List[Order] = []
        self._last_created_at: Optional[datetime] = None

    def _validate(self, items: List[OrderItem]) -> None:
        if not items:
            raise OrderRejected("order has no items")

        requested: Dict[int, int] = defaultdict(int)
        for item in items:
            requested[item.product.id] += item.quantity

        for product_id, qty in requested.items():
            product = self.inventory.find_product_by_id(product_id)
            if product is None:
                raise OrderRejected(f"product {product_id} not found")
            if product.stock < qty:
                raise OrderRejected(f"insufficient stock for {product_id}: have={product.stock}, need={qty}")

    def _timestamp(self) -> datetime:
        now = datetime.now()
        if self._last_created_at is not None and now < self._last_created_at:
            now = self._last_created_at
        self._last_created_at = now
        return now

    def create_order(self, customer: Customer, items: Iterable[OrderItem]) -> Optional[Order]:
        items = list(items)

        with self.inventory.lock:
            try:
                self._validate(items)
            except OrderRejected as e:
                self.inventory.log(f"[customer={customer.id}] ORDER REJECTED: {e}")
                return None

            order_id = next(self._order_ids)
            for item in items:
                self.inventory.reduce_stock(item.product.id, item.quantity)

            order = Order(
                order_id=order_id,
                customer=customer,
                items=tuple(items),
                created_at=self._timestamp(),
            )
            self.customer_orders.setdefault(customer.id, []).append(order)
            self._placed.append(order)

        self.inventory.log(f"[order={order.order_id}] ORDER OK customer={customer.id} items={len(items)} total={order.total}")
        return order

    def get_orders_for_customer(self, customer_id: int) -> List[Order]:
        with self.inventory.lock:
            return list(self.customer_orders.get(customer_id, []))

    def all_orders(self) -> List[Order]:
        with self.inventory.lock:
            return list(self._placed)

    def total_revenue(self) -> Decimal:
        return sum((order.total for order in self.all_orders()), Decimal("0.00"))

    def average_order_value(self) -> Decimal:
        orders = self.all_orders()
        if not orders:
            return Decimal("0")
        return sum((order.total for order in orders), Decimal("0.00")) / len(orders)

    def highest_value_order(self) -> Optional[Order]:
        highest: Optional[Order] = None
        for order in self.all_orders():
            # strictly greater: on ties the earlier order stays
            if highest is None or order.total > highest.total:
                highest = order
        return highest
