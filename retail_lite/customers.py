from __future__ import annotations

import logging
from typing import Dict, Optional

from retail_lite.models import Customer

logger = logging.getLogger(__name__)


class CustomerRegistry:
    def __init__(self) -> None:
        self.customers: Dict[int, Customer] = {}

    def register_customer(self, customer: Optional[Customer]) -> None:
        if customer is None:
            return
        self.customers[customer.id] = customer
        logger.info("customer registered: id=%s name=%s vip=%s", customer.id, customer.name, customer.is_vip)

    def get_customer_by_id(self, customer_id: int) -> Optional[Customer]:
        customer = self.customers.get(customer_id)
        if customer is None:
            logger.info("customer %s not found", customer_id)
        return customer

    lookup = get_customer_by_id

    def all_customers(self) -> Dict[int, Customer]:
        # copy, so callers can't change the registry behind its back
        return dict(self.customers)
