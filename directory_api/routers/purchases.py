from __future__ import annotations

from typing import Union

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from directory_api.domain.errors import StorageError, ValidationError
from directory_api.schemas.purchases import PurchaseItem
from directory_api.services.purchase_service import PurchaseService

router = APIRouter(prefix="/buy", tags=["purchases"])


def _get_purchase_service(request: Request) -> PurchaseService:
    svc = getattr(getattr(request.app, "state", None), "purchase_service", None)
    if not svc:
        raise RuntimeError("PurchaseService nao configurado")
    return svc


@router.post("")
def save_purchases(request: Request, payload: Union[list[PurchaseItem], PurchaseItem] = Body(...)):
    svc = _get_purchase_service(request)
    if isinstance(payload, list):
        items = [item.model_dump() for item in payload]
    else:
        items = payload.model_dump()
    try:
        saved = svc.record(items)
    except ValidationError as exc:
        return JSONResponse({"success": False, "errors": exc.errors}, status_code=400)
    except StorageError:
        return JSONResponse({"success": False, "errors": ["Server error"]}, status_code=500)
    return {"message": "Purchase saved", "buysSaved": len(saved)}


@router.get("")
def list_purchases(request: Request):
    svc = _get_purchase_service(request)
    return {"success": True, "buys": svc.list_purchases()}
