from dataclasses import dataclass

@dataclass(slots=True)
class PurchaseDTO:
    """Stored stock record for a supplier/product pair."""
    id: int
    name: str = ""
    describe: str = ""
    reference: str = ""
    periodentrance: str = ""
    periodsale: str = ""
    stockcurrent: str = ""
    status: str = ""
    quantity: str = ""
