from typing import List, Optional

from report_api.v1_0.entities import PurchaseDTO
from report_api.v1_0.schemas import PurchaseInput
from .base_repository import BaseRepository, count_based_ids, sequential_ids

ID_GENERATORS = {
    "count": count_based_ids,
    "sequence": sequential_ids,
}

class PurchaseRepository(BaseRepository[PurchaseDTO]):
    def __init__(self, id_policy: str = "count") -> None:
        try:
            factory = ID_GENERATORS[id_policy]
        except KeyError:
            raise ValueError(f"Unknown id policy: {id_policy!r}") from None
        self.id_policy = id_policy
        super().__init__(factory())

    def create_purchase(self, payload: PurchaseInput) -> PurchaseDTO:
        """
        Store a purchase under a freshly assigned id. Any record already
        living at that id is overwritten.
        """
        return self.add(payload.to_purchase(0))

    def get_purchase_by_id(self, purchase_id: int) -> Optional[PurchaseDTO]:
        return self.get_by_id(purchase_id)

    def list_purchases(self) -> List[PurchaseDTO]:
        return self.list_all()

    def update_purchase(
        self,
        purchase_id: int,
        payload: PurchaseInput
    ) -> Optional[PurchaseDTO]:
        """
        Full replacement keeping the stored id. Unknown ids store nothing.
        """
        return self.replace(purchase_id, payload.to_purchase(purchase_id))

    def delete_purchase(self, purchase_id: int) -> bool:
        return self.delete_by_id(purchase_id) == 1
