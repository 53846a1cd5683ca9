"""
Pydantic schema definitions for the catalog module.

The ``HookDescriptor`` model captures the metadata needed to list a
hook in the navigation and to link to its demo page. Descriptors are
frozen so the table built in ``store`` cannot be altered by callers.
The remaining models describe the navigation sidebar and the landing
page overview that are derived from the catalog.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class HookCategory(str, Enum):
    """Closed set of groups a hook can belong to."""

    STATE = "state"
    EFFECT = "effect"
    PERFORMANCE = "performance"
    DOM = "dom"
    OTHER = "other"
    REACT19 = "react19"
    TANSTACK = "tanstack"
    PATTERNS = "patterns"


class HookDescriptor(BaseModel):
    """A single catalog entry.

    ``id`` is the stable identifier used for lookups and is not always
    the same as ``name`` (pattern pages carry a readable title).
    ``introduced`` is a free-form version label such as ``"18+"`` or
    ``"TanStack Query 5+"``. ``path`` is the route of the demo page.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: HookCategory
    description: str
    introduced: str
    path: str = Field(min_length=1)


class NavigationLink(BaseModel):
    id: str
    name: str
    path: str
    active: bool = False


class NavigationSection(BaseModel):
    """One group of links in the sidebar."""

    category: HookCategory
    label: str
    icon: str
    links: List[NavigationLink] = Field(default_factory=list)


class CategorySummary(BaseModel):
    """A landing page card: how many hooks a category holds and where to start."""

    category: HookCategory
    label: str
    icon: str
    description: str = ""
    count: int = 0
    # Path of the first hook in the category, "/" when it is empty.
    first_path: str = "/"
