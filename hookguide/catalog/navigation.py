"""
Sidebar and landing page data derived from the catalog.

Labels and icons belong to the presentation side and are kept here,
not on the descriptors. Both builders only go through the public
query functions of ``store``.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .schemas import CategorySummary, HookCategory, NavigationLink, NavigationSection
from .store import get_by_category

# Display order of the sidebar and of the landing page cards.
CATEGORY_DISPLAY: Tuple[Tuple[HookCategory, str, str], ...] = (
    (HookCategory.STATE, "State Management", "📦"),
    (HookCategory.EFFECT, "Side Effects", "⚡"),
    (HookCategory.PERFORMANCE, "Performance", "🚀"),
    (HookCategory.DOM, "DOM Access", "🎯"),
    (HookCategory.OTHER, "Other", "🔧"),
    (HookCategory.REACT19, "React 19", "✨"),
    (HookCategory.TANSTACK, "TanStack Query", "🔄"),
    (HookCategory.PATTERNS, "Advanced Patterns", "🎨"),
)


def build_navigation(current_path: Optional[str] = None) -> List[NavigationSection]:
    """Group catalog links by category for the sidebar.

    A link is marked active when its path is exactly ``current_path``.
    """
    sections: List[NavigationSection] = []
    for category, label, icon in CATEGORY_DISPLAY:
        links = [
            NavigationLink(
                id=hook.id,
                name=hook.name,
                path=hook.path,
                active=current_path is not None and hook.path == current_path,
            )
            for hook in get_by_category(category)
        ]
        sections.append(NavigationSection(category=category, label=label, icon=icon, links=links))
    return sections


def build_overview() -> List[CategorySummary]:
    """Summarise each category for the landing page."""
    summaries: List[CategorySummary] = []
    for category, label, icon in CATEGORY_DISPLAY:
        hooks = get_by_category(category)
        summaries.append(
            CategorySummary(
                category=category,
                label=label,
                icon=icon,
                description=", ".join(hook.name for hook in hooks),
                count=len(hooks),
                first_path=hooks[0].path if hooks else "/",
            )
        )
    return summaries
