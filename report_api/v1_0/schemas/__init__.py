from .purchase_schema import PurchaseInput

__all__ = [
    "PurchaseInput",
]
