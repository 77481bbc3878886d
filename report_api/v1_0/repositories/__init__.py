from .base_repository import BaseRepository, count_based_ids, sequential_ids
from .purchase_repository import PurchaseRepository

__all__ = [
    "BaseRepository",
    "count_based_ids",
    "sequential_ids",
    "PurchaseRepository",
]
