import re
from typing import List, Optional, Union

from fastapi import APIRouter, HTTPException, Depends, Request, Response, status
from pydantic import ValidationError

from report_api.core.logger import logger

from report_api.v1_0.schemas import PurchaseInput
from report_api.v1_0.entities import PurchaseDTO
from report_api.v1_0.services import PurchaseService
from report_api.v1_0.services.purchase_service import NOT_FOUND

router = APIRouter(prefix="/report", tags=["Report"])

_INT_RE = re.compile(r"[+-]?[0-9]+")


def get_purchase_service(request: Request) -> PurchaseService:
    """Service from the container owned by the app serving this request."""
    return request.app.state.container.api_container.purchase_service()


def get_legacy_create_status(request: Request) -> bool:
    return bool(request.app.state.container.config.legacy_create_status())


def parse_id(raw: str) -> int:
    """Base-10 integer with optional sign; anything else reads as 0."""
    if not _INT_RE.fullmatch(raw):
        return 0
    return int(raw)


def query_id(request: Request) -> Optional[int]:
    """
    First ``id`` value from the query string, or None when it is missing or
    empty.
    """
    values = request.query_params.getlist("id")
    if not values or values[0] == "":
        return None
    return parse_id(values[0])


async def decode_purchase(request: Request) -> PurchaseInput:
    raw = await request.body()
    try:
        return PurchaseInput.model_validate_json(raw)
    except ValidationError as e:
        logger.debug("[ReportRouter] body rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


def empty_ok() -> Response:
    return Response(status_code=status.HTTP_200_OK, media_type="application/json")


@router.get(
    "",
    response_model=Union[PurchaseDTO, List[PurchaseDTO]],
    summary="Get one purchase by ?id= or list all",
)
async def get_purchases(
    request: Request,
    service: PurchaseService = Depends(get_purchase_service),
):
    purchase_id = query_id(request)
    logger.debug("[ReportRouter] get id=%s", purchase_id)
    try:
        if purchase_id is None:
            return service.list_all()
        return service.get(purchase_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("[ReportRouter] get error: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch purchases")


@router.post(
    "",
    response_model=PurchaseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a purchase",
)
async def create_purchase(
    request: Request,
    response: Response,
    service: PurchaseService = Depends(get_purchase_service),
    legacy_status: bool = Depends(get_legacy_create_status),
) -> PurchaseDTO:
    payload = await decode_purchase(request)
    logger.info(
        "[ReportRouter] create payload=%s",
        payload.model_dump(exclude={"id"}),
    )

    try:
        p = service.create(payload)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            "[ReportRouter] create error: %s",
            e,
            exc_info=True,
        )
        raise HTTPException(
            status_code=500,
            detail="Failed to create purchase",
        )

    # existing clients observe 200 on create unless LEGACY_CREATE_STATUS is off
    if legacy_status:
        response.status_code = status.HTTP_200_OK
    return p


@router.put(
    "",
    summary="Replace a purchase by ?id=",
)
async def update_purchase(
    request: Request,
    service: PurchaseService = Depends(get_purchase_service),
) -> Response:
    purchase_id = query_id(request)
    if purchase_id is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    payload = await decode_purchase(request)
    logger.info(
        "[ReportRouter] update id=%s data=%s",
        purchase_id,
        payload.model_dump(exclude={"id"}),
    )

    try:
        service.update(purchase_id, payload)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            "[ReportRouter] update error: %s",
            e,
            exc_info=True,
        )
        raise HTTPException(
            status_code=500,
            detail="Failed to update purchase",
        )
    return empty_ok()


@router.delete(
    "",
    summary="Delete a purchase by ?id=",
)
async def delete_purchase(
    request: Request,
    service: PurchaseService = Depends(get_purchase_service),
) -> Response:
    purchase_id = query_id(request)
    if purchase_id is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    logger.warning(
        "[ReportRouter] delete id=%s",
        purchase_id,
    )

    try:
        service.delete(purchase_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            "[ReportRouter] delete error: %s",
            e,
            exc_info=True,
        )
        raise HTTPException(
            status_code=500,
            detail="Failed to delete purchase",
        )
    return empty_ok()
