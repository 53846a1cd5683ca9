"""
Catalog package for the hook guide.

This package holds the static list of hook descriptors, the two
lookup functions the site is built on (by category and by id), the
sidebar and landing page builders that consume them, and the route
definitions exposing all of it as a read-only JSON API.
"""

from .router import router as catalog_router  # noqa: F401
from .schemas import HookCategory, HookDescriptor  # noqa: F401
from .store import get_by_category, get_by_id  # noqa: F401
