from .purchase_service import PurchaseService
__all__=[
    "PurchaseService",
]
