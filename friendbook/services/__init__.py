"""
High-level use cases for Friendbook.

Each service orchestrates the repository to implement the backend contract
consumed by the page workflows (read/create/update friends and addresses,
delete pets and quotes, seed demo data). Every public method is async; the
blocking SQLAlchemy work runs in the threadpool.
"""

from .addresses_service import AddressesService
from .admin_service import AdminService
from .base import ServiceError
from .friends_service import FriendsService
from .pets_service import PetsService
from .quotes_service import QuotesService

__all__ = [
    "AddressesService",
    "AdminService",
    "FriendsService",
    "PetsService",
    "QuotesService",
    "ServiceError",
]
