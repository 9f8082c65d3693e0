from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import FrozenSet, List, Optional, Tuple

FIRST_CUSTOMER_ID = 100

_customer_ids = itertools.count(FIRST_CUSTOMER_ID)
_customer_ids_lock = threading.Lock()


def next_customer_id() -> int:
    with _customer_ids_lock:
        return next(_customer_ids)


@dataclass(slots=True)
class Product:
    id: int
    name: str
    category: Optional[str]
    price: Decimal
    stock: int
    sizes: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Product {self.id}: price must be >= 0")
        if self.stock < 0:
            raise ValueError(f"Product {self.id}: stock must be >= 0")
        self.sizes = frozenset(self.sizes)


@dataclass(frozen=True, slots=True)
class OrderItem:
    """
    Строка заказа: ссылка на общий Product (не копия) и запрошенное количество.
    """

    product: Product
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError("quantity must be > 0")

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass(frozen=True, slots=True)
class Order:
    order_id: int
    customer: Customer
    items: Tuple[OrderItem, ...]
    created_at: datetime

    @property
    def total(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal("0.00"))


@dataclass(slots=True)
class Customer:
    name: str
    email: str
    is_vip: bool = False
    favorite_categories: Optional[List[str]] = None
    id: int = field(default_factory=next_customer_id)


@dataclass(slots=True)
class Review:
    customer: Customer
    product: Product
    rating: int
    comment: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not 1 <= self.rating <= 5:
            raise ValueError(f"rating must be between 1 and 5, got {self.rating}")

    def __str__(self) -> str:
        return (
            f"Review(customer={self.customer.name}, product={self.product.name}, "
            f"rating={self.rating}, comment={self.comment!r}, created_at={self.created_at:%Y-%m-%d %H:%M})"
        )
