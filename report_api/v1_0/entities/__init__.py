from .purchase_DTO import PurchaseDTO

__all__ = [
    "PurchaseDTO",
]
