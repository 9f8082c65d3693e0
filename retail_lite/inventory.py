from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from retail_lite.models import Product

logger = logging.getLogger(__name__)


class InventoryStore:
    """
    Склад в памяти: единственный владелец остатков по товарам.

    Храним:
    - каталог товаров по id (остаток живёт в самом Product)
    - список логов (для демонстрации и тестов)

    ``lock`` держит OrderWorkflow на всё время проверки и списания одного
    заказа, поэтому reduce_stock сам ничего не проверяет.
    """

    def __init__(self) -> None:
        self.products: Dict[int, Product] = {}
        self.lock = threading.RLock()

        self.logs: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    def add_product(self, product: Product) -> None:
        with self.lock:
            replaced = product.id in self.products
            self.products[product.id] = product
        self.log(f"product {'replaced' if replaced else 'added'}: id={product.id} name={product.name} stock={product.stock}")

    def find_product_by_id(self, product_id: int) -> Optional[Product]:
        return self.products.get(product_id)

    def is_available(self, product_id: int) -> bool:
        return product_id in self.products

    def reduce_stock(self, product_id: int, quantity: int) -> None:
        with self.lock:
            product = self.products[product_id]
            product.stock -= quantity
        self.log(f"stock reduced: id={product_id} qty={quantity} (stock={product.stock})")

    def list_all_products(self) -> List[Product]:
        with self.lock:
            return list(self.products.values())

    # Seed helper (удобно для тестов/демо)
    def seed(self, products: List[Product]) -> None:
        for product in products:
            self.add_product(product)
