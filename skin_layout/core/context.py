from __future__ import annotations

"""Per-render page context handed to every component.

The interpreter treats the context as opaque and passes the same object to
every component it builds. Built-in components read two things from it:
the component factory used to build their children, and the viewing
user's groups, permissions and page namespace for the visibility
modifications.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Iterable, Optional

if TYPE_CHECKING:
    from .factory import ComponentFactory

logger = logging.getLogger(__name__)

__all__ = ["PageContext"]


@dataclass
class PageContext:
    """Shared state for one page render.

    Attributes
    ----------
    component_factory
        Factory used by containers to build their child components.
    user_groups
        Groups the viewing user belongs to.
    user_permissions
        Permissions granted to the viewing user.
    namespace
        Namespace of the rendered page, if any.
    data
        Arbitrary key/value pairs supplied by the host application.
    """

    component_factory: Optional[ComponentFactory] = None
    user_groups: FrozenSet[str] = field(default_factory=frozenset)
    user_permissions: FrozenSet[str] = field(default_factory=frozenset)
    namespace: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.user_groups = frozenset(self.user_groups)
        self.user_permissions = frozenset(self.user_permissions)

    def in_any_group(self, groups: Iterable[str]) -> bool:
        return any(group in self.user_groups for group in groups)

    def has_all_permissions(self, permissions: Iterable[str]) -> bool:
        return all(permission in self.user_permissions for permission in permissions)

    def in_namespace(self, namespaces: Iterable[str]) -> bool:
        return self.namespace is not None and self.namespace in namespaces
