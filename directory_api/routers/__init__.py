"""
FastAPI routers grouped by domain (users, purchases).

Each module exposes an APIRouter included by ``directory_api.app``.
"""
