from typing import List

from fastapi import HTTPException, status

from report_api.v1_0.schemas import PurchaseInput
from report_api.v1_0.repositories import PurchaseRepository
from report_api.v1_0.entities import PurchaseDTO
from report_api.core.logger import logger

NOT_FOUND = "Purchase not found"

class PurchaseService:
    def __init__(self, purchase_repository: PurchaseRepository) -> None:
        self.purchase_repository = purchase_repository

    def _require(self, purchase_id: int) -> PurchaseDTO:
        """
        Ensure that a purchase exists or raise an HTTP 404 error.

        Args:
            purchase_id: Identifier of the purchase to fetch.

        Returns:
            The stored PurchaseDTO.

        Raises:
            HTTPException: If the purchase does not exist.
        """
        p = self.purchase_repository.get_purchase_by_id(purchase_id)
        if not p:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=NOT_FOUND,
            )
        return p

    def create(self, payload: PurchaseInput) -> PurchaseDTO:
        """
        Store a new purchase.

        The id is assigned by the repository according to its id policy; any
        id present in the payload is ignored.

        Args:
            payload: Decoded request body.

        Returns:
            PurchaseDTO as stored, including its assigned id.
        """
        p = self.purchase_repository.create_purchase(payload)
        logger.info(
            "[PurchaseService] Purchase created ID=%s policy=%s",
            p.id,
            self.purchase_repository.id_policy,
        )
        return p

    def get(self, purchase_id: int) -> PurchaseDTO:
        logger.debug("[PurchaseService] Get purchase ID=%s", purchase_id)
        return self._require(purchase_id)

    def list_all(self) -> List[PurchaseDTO]:
        logger.debug("[PurchaseService] List all purchases")
        return self.purchase_repository.list_purchases()

    def update(self, purchase_id: int, payload: PurchaseInput) -> PurchaseDTO:
        """
        Replace every field of an existing purchase except its id.

        Args:
            purchase_id: Identifier of the purchase to replace.
            payload: Decoded request body.

        Returns:
            PurchaseDTO after the replacement.

        Raises:
            HTTPException: 404 if the purchase does not exist. Nothing is
            stored in that case.
        """
        logger.info("[PurchaseService] Update purchase ID=%s", purchase_id)
        p = self.purchase_repository.update_purchase(purchase_id, payload)
        if not p:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=NOT_FOUND,
            )
        return p

    def delete(self, purchase_id: int) -> None:
        logger.warning("[PurchaseService] Delete purchase ID=%s", purchase_id)
        if not self.purchase_repository.delete_purchase(purchase_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=NOT_FOUND,
            )
