"""
Page workflows: one class per page, covering load, validate and save/delete.

Workflows receive their services explicitly and return either a Render
(page view state) or a Redirect. They know nothing about FastAPI; the
routers translate the result into a response.
"""

from .base import PageResult, Redirect, Render
from .address_edit import AddressEditView, AddressEditWorkflow
from .friend_detail import FriendDetailView, FriendDetailWorkflow
from .friend_edit import FriendEditView, FriendEditWorkflow
from .overview import OverviewView, OverviewWorkflow
from .view_friend import FriendNotFoundError, SingleFriendLookup, ViewFriendView

__all__ = [
    "AddressEditView",
    "AddressEditWorkflow",
    "FriendDetailView",
    "FriendDetailWorkflow",
    "FriendEditView",
    "FriendEditWorkflow",
    "FriendNotFoundError",
    "OverviewView",
    "OverviewWorkflow",
    "PageResult",
    "Redirect",
    "Render",
    "SingleFriendLookup",
    "ViewFriendView",
]
