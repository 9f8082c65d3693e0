"""Settings read from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path


@dataclass(slots=True)
class Settings:
    log_level: str
    log_dir: Path
    log_backup_count: int
    report_dir: Path
    discount_category: str
    category_rate: Decimal
    vip_rate: Decimal
    low_stock_threshold: int


def load_settings() -> Settings:
    return Settings(
        log_level=os.getenv("RETAIL_LOG_LEVEL", "INFO").upper(),
        log_dir=Path(os.getenv("RETAIL_LOG_DIR", "data/logs")),
        log_backup_count=int(os.getenv("RETAIL_LOG_BACKUP_COUNT", "7")),
        report_dir=Path(os.getenv("RETAIL_REPORT_DIR", ".")),
        discount_category=os.getenv("RETAIL_DISCOUNT_CATEGORY", "Shoes"),
        category_rate=Decimal(os.getenv("RETAIL_CATEGORY_RATE", "0.80")),
        vip_rate=Decimal(os.getenv("RETAIL_VIP_RATE", "0.90")),
        low_stock_threshold=int(os.getenv("RETAIL_LOW_STOCK_THRESHOLD", "5")),
    )
