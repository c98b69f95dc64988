"""
FastAPI routers grouped by page area (friends, addresses, misc pages).

Each module exposes an APIRouter included by friendbook.app. Routers only
translate HTTP input into workflow calls and workflow results into responses.
"""
