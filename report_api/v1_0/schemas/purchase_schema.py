from typing import Any, Optional
from pydantic import BaseModel, StrictInt, field_validator, model_validator

from report_api.v1_0.entities import PurchaseDTO

TEXT_FIELDS = (
    "name",
    "describe",
    "reference",
    "periodentrance",
    "periodsale",
    "stockcurrent",
    "status",
    "quantity",
)

class PurchaseInput(BaseModel):
    """
    Request body for create and update.

    Missing or null text fields decode to "", unknown keys are dropped and
    keys match field names case-insensitively. A client-sent id is parsed
    but never used.
    """
    id: Optional[StrictInt] = None
    name: str = ""
    describe: str = ""
    reference: str = ""
    periodentrance: str = ""
    periodsale: str = ""
    stockcurrent: str = ""
    status: str = ""
    quantity: str = ""

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "example": {
                "name": "ACME Imports",
                "describe": "Steel bolts M8",
                "reference": "BOLT-M8-50",
                "periodentrance": "120",
                "periodsale": "45",
                "stockcurrent": "75",
                "status": "Available",
                "quantity": "10",
            }
        },
    }

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        known = {k.lower(): k for k in ("id",) + TEXT_FIELDS}
        folded: dict[str, Any] = {}
        # exact keys win over case-insensitive matches
        for key, value in data.items():
            if key in known.values():
                folded[key] = value
        for key, value in data.items():
            target = known.get(str(key).lower())
            if target and target not in folded:
                folded[target] = value
        return folded

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return "" if v is None else v

    def to_purchase(self, purchase_id: int) -> PurchaseDTO:
        return PurchaseDTO(
            id=purchase_id,
            name=self.name,
            describe=self.describe,
            reference=self.reference,
            periodentrance=self.periodentrance,
            periodsale=self.periodsale,
            stockcurrent=self.stockcurrent,
            status=self.status,
            quantity=self.quantity,
        )
