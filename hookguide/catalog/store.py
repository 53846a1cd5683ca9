"""
Static data store for the hook catalog.

The ``_HOOKS`` table is built once at import time and validated right
away, so a duplicated id or an empty path stops the application from
starting rather than surfacing as a broken link. The table is a tuple
of frozen ``HookDescriptor`` instances; callers only ever receive new
lists from the query functions below.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .schemas import HookCategory, HookDescriptor

logger = logging.getLogger(__name__)


class CatalogIntegrityError(ValueError):
    """Raised when the catalog table breaks one of its invariants."""


def _hook(hook_id: str, category: HookCategory, description: str, introduced: str,
          path: Optional[str] = None, name: Optional[str] = None) -> HookDescriptor:
    return HookDescriptor(
        id=hook_id,
        name=name or hook_id,
        category=category,
        description=description,
        introduced=introduced,
        path=path or f"/hooks/{hook_id}",
    )


_HOOKS: Tuple[HookDescriptor, ...] = (
    # State management
    _hook("useState", HookCategory.STATE, "Manage component state", "16.8+"),
    _hook("useReducer", HookCategory.STATE, "Manage complex state logic", "16.8+"),
    _hook("useContext", HookCategory.STATE, "Subscribe to a context value", "16.8+"),
    # Side effects
    _hook("useEffect", HookCategory.EFFECT, "Run side effects", "16.8+"),
    _hook("useLayoutEffect", HookCategory.EFFECT,
          "Run synchronously after DOM mutations", "16.8+"),
    _hook("useInsertionEffect", HookCategory.EFFECT,
          "Inject styles for CSS-in-JS libraries", "18+"),
    # Performance
    _hook("useMemo", HookCategory.PERFORMANCE, "Memoize a computed value", "16.8+"),
    _hook("useCallback", HookCategory.PERFORMANCE, "Memoize a function", "16.8+"),
    _hook("useDeferredValue", HookCategory.PERFORMANCE, "Defer updating a value", "18+"),
    _hook("useTransition", HookCategory.PERFORMANCE, "Mark updates as non-urgent", "18+"),
    # DOM access
    _hook("useRef", HookCategory.DOM, "Hold a mutable reference", "16.8+"),
    _hook("useImperativeHandle", HookCategory.DOM,
          "Customize the instance exposed through a ref", "16.8+"),
    # Other
    _hook("useId", HookCategory.OTHER, "Generate unique IDs", "18+"),
    _hook("useDebugValue", HookCategory.OTHER, "Add a custom label in DevTools", "16.8+"),
    _hook("useSyncExternalStore", HookCategory.OTHER,
          "Subscribe to an external store", "18+"),
    # New in React 19
    _hook("useActionState", HookCategory.REACT19, "Manage form action state", "19+"),
    _hook("useFormStatus", HookCategory.REACT19, "Read form submission status", "19+"),
    _hook("useOptimistic", HookCategory.REACT19, "Show optimistic UI updates", "19+"),
    _hook("use", HookCategory.REACT19, "Read a Promise or Context", "19+"),
    # TanStack Query
    _hook("useQuery", HookCategory.TANSTACK, "Fetch and cache data",
          "TanStack Query 5+", path="/advanced/tanstack/use-query"),
    _hook("useMutation", HookCategory.TANSTACK, "Change data on the server",
          "TanStack Query 5+", path="/advanced/tanstack/use-mutation"),
    _hook("useInfiniteQuery", HookCategory.TANSTACK, "Load infinitely scrolling data",
          "TanStack Query 5+", path="/advanced/tanstack/use-infinite-query"),
    _hook("useQueries", HookCategory.TANSTACK, "Run queries in parallel",
          "TanStack Query 5+", path="/advanced/tanstack/use-queries"),
    # Advanced patterns
    _hook("customHooks", HookCategory.PATTERNS, "Write reusable hooks",
          "React 16.8+", path="/advanced/patterns/custom-hooks",
          name="Custom Hook Patterns"),
    _hook("composition", HookCategory.PATTERNS, "Advanced patterns for combining hooks",
          "React 16.8+", path="/advanced/patterns/composition",
          name="Hook Composition Patterns"),
)


def validate_catalog(hooks: Iterable[HookDescriptor]) -> None:
    """Check the table invariants that the descriptor model cannot.

    Category membership is already enforced when each ``HookDescriptor``
    is constructed. Here we make sure every id appears only once and
    every path is non-empty.

    Raises
    ------
    CatalogIntegrityError
        On the first violation found.
    """
    seen = set()
    for hook in hooks:
        if hook.id in seen:
            raise CatalogIntegrityError(f"Duplicate hook id: {hook.id!r}")
        seen.add(hook.id)
        if not hook.path.strip():
            raise CatalogIntegrityError(f"Hook {hook.id!r} has an empty path")


validate_catalog(_HOOKS)

logger.debug("Hook catalog loaded with %d entries", len(_HOOKS))


def _as_category(value: Union[HookCategory, str]) -> Optional[HookCategory]:
    """Return the matching category, or ``None`` for anything outside the set."""
    if isinstance(value, HookCategory):
        return value
    try:
        return HookCategory(value)
    except ValueError:
        return None


def list_hooks() -> List[HookDescriptor]:
    """Return every descriptor in catalog order as a new list."""
    return list(_HOOKS)


def get_by_category(category: Union[HookCategory, str]) -> List[HookDescriptor]:
    """Return the descriptors of one category, in catalog order.

    Any string is accepted. Values that are not a category (including
    a different letter case) give an empty list instead of an error.
    """
    wanted = _as_category(category)
    if wanted is None:
        return []
    return [hook for hook in _HOOKS if hook.category == wanted]


def get_by_id(hook_id: str) -> Optional[HookDescriptor]:
    """Find a descriptor by exact id; ``None`` when nothing matches."""
    return next((hook for hook in _HOOKS if hook.id == hook_id), None)


def count_by_category() -> Dict[HookCategory, int]:
    counts: Dict[HookCategory, int] = {category: 0 for category in HookCategory}
    for hook in _HOOKS:
        counts[hook.category] += 1
    return counts
