"""
Route definitions for the catalog API.

Endpoints under /api/catalog:
- GET  /hooks                   : list hooks, optionally filtered by category
- GET  /hooks/{hook_id}         : get one hook
- GET  /categories              : landing page overview, one card per category
- GET  /categories/{category}   : hooks of one category
- GET  /navigation              : sidebar sections, with the current page marked
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from .navigation import build_navigation, build_overview
from .schemas import CategorySummary, HookDescriptor, NavigationSection
from .store import get_by_category, get_by_id, list_hooks

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.get("/hooks", response_model=List[HookDescriptor])
def list_hooks_api(
    category: Optional[str] = Query(default=None, description="Filter by category"),
) -> List[HookDescriptor]:
    """
    Returns the catalog in its natural order.

    An unknown ``category`` is not an error: the result is simply empty.
    """
    if category is None:
        return list_hooks()
    return get_by_category(category)


@router.get("/hooks/{hook_id}", response_model=HookDescriptor)
def get_hook(hook_id: str) -> HookDescriptor:
    hook = get_by_id(hook_id)
    if hook is None:
        logger.debug("No hook with id %r", hook_id)
        raise HTTPException(status_code=404, detail="Hook not found")
    return hook


@router.get("/categories", response_model=List[CategorySummary])
def list_categories() -> List[CategorySummary]:
    return build_overview()


@router.get("/categories/{category}", response_model=List[HookDescriptor])
def list_category_hooks(category: str) -> List[HookDescriptor]:
    return get_by_category(category)


@router.get("/navigation", response_model=List[NavigationSection])
def navigation(
    path: Optional[str] = Query(default=None, description="Current page path"),
) -> List[NavigationSection]:
    return build_navigation(path)
