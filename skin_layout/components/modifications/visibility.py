from __future__ import annotations

"""Modifications that show or hide a component for some users.

Both read three optional, comma-separated attributes of the
``modification`` element and compare them with the page context:

* ``group``: the user belongs to at least one of the groups
* ``permission``: the user holds every listed permission
* ``namespace``: the page is in one of the namespaces

A user matches when every given attribute matches. A modification without
any of the attributes matches everybody.
"""

import logging

from .base import Modification, modification_types

logger = logging.getLogger(__name__)

__all__ = ["ShowOnlyFor", "HideFor"]


class _VisibilityModification(Modification):

    def matches_user(self) -> bool:
        context = self.page_context
        groups = self.get_attribute_list("group")
        permissions = self.get_attribute_list("permission")
        namespaces = self.get_attribute_list("namespace")

        if groups and not context.in_any_group(groups):
            return False
        if permissions and not context.has_all_permissions(permissions):
            return False
        if namespaces and not context.in_namespace(namespaces):
            return False
        return True

    def is_visible(self) -> bool:
        raise NotImplementedError

    def get_html(self) -> str:
        if not self.is_visible():
            logger.debug("Suppressed %r by %s", self.component, type(self).__name__)
            return ""
        return super().get_html()


@modification_types.register()
class ShowOnlyFor(_VisibilityModification):
    """Renders the component only for matching users."""

    def is_visible(self) -> bool:
        return self.matches_user()


@modification_types.register()
class HideFor(_VisibilityModification):
    """Renders the component for everybody except matching users."""

    def is_visible(self) -> bool:
        return not self.matches_user()
