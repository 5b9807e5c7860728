from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from directory_api.domain.errors import (
    ConflictError,
    InvalidCredentials,
    StorageError,
    ValidationError,
)
from directory_api.schemas.users import Credentials, RegistrationFields
from directory_api.services.directory_service import DirectoryService

router = APIRouter(prefix="/api/users", tags=["users"])


def _get_directory_service(request: Request) -> DirectoryService:
    svc = getattr(getattr(request.app, "state", None), "directory_service", None)
    if not svc:
        raise RuntimeError("DirectoryService nao configurado")
    return svc


def _failure(status_code: int, errors: list[str]) -> JSONResponse:
    return JSONResponse({"success": False, "errors": errors}, status_code=status_code)


@router.post("")
def register_user(request: Request, fields: RegistrationFields):
    svc = _get_directory_service(request)
    try:
        user = svc.register(fields)
    except ValidationError as exc:
        return _failure(400, exc.errors)
    except ConflictError as exc:
        return _failure(409, [exc.message])
    except StorageError:
        return _failure(500, ["Server error"])
    return JSONResponse({"success": True, "user": user.to_wire()}, status_code=201)


@router.post("/login")
def login_user(request: Request, credentials: Credentials):
    svc = _get_directory_service(request)
    try:
        user = svc.login(credentials)
    except InvalidCredentials as exc:
        return JSONResponse(
            {"success": False, "error": exc.message, "reason": exc.reason},
            status_code=401,
        )
    return {"success": True, "user": user.to_wire()}


@router.get("")
def list_users(request: Request):
    svc = _get_directory_service(request)
    return {"success": True, "users": [user.to_wire() for user in svc.list_users()]}


@router.delete("")
def clear_users(request: Request):
    svc = _get_directory_service(request)
    try:
        svc.clear()
    except StorageError:
        return _failure(500, ["Server error"])
    return {"success": True}
