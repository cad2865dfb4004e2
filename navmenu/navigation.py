"""
Declarative navigation schema.

Describe a site's navigation once as plain data and turn it into a ``Menu``
for rendering.  Each entry is either a simple link or a dropdown holding
nested links.  ``active_paths`` lists extra path prefixes that should mark an
entry active, on top of a link's own ``href`` (see ``navmenu.activation`` for
the matching rules).
"""

from dataclasses import dataclass, field

from django.utils.html import conditional_escape

from navmenu.activation import Activatable
from navmenu.html import Attributes, Tag
from navmenu.items import HasHtmlAttributes, Item
from navmenu.link import Link
from navmenu.menu import Menu


class DropdownHeader(Activatable, HasHtmlAttributes, Item):
    """
    The label of a dropdown.  It has no URL of its own, so only the
    dropdown's ``active_paths`` can activate it (and with it the dropdown).
    """

    def __init__(self, label, active_paths=()):
        self._label = label
        self._html_attributes = Attributes()
        self.set_active_paths(*active_paths)

    def label(self):
        return self._label

    def render(self) -> str:
        return Tag.make("span", self._html_attributes).with_contents(conditional_escape(self._label))

    def __repr__(self):
        return f"DropdownHeader({self._label!r})"


@dataclass(frozen=True)
class NavLink:
    """A single navigation link."""
    label: str
    href: str
    active_paths: tuple = field(default_factory=tuple)
    attributes: dict = field(default_factory=dict)

    def as_item(self):
        return (
            Link.to(str(self.href), self.label)
            .set_active_paths(*self.active_paths)
            .set_attributes(self.attributes)
        )

    def add_to(self, menu):
        return menu.add(self.as_item())


@dataclass(frozen=True)
class NavDropdown:
    """A dropdown navigation group containing multiple links."""
    label: str
    items: tuple
    active_paths: tuple = field(default_factory=tuple)

    def header(self):
        return DropdownHeader(self.label, self.active_paths)

    def add_to(self, menu):
        return menu.submenu(self.header(), lambda submenu: build_menu(self.items, submenu))


def build_menu(entries, menu=None):
    """
    Return a ``Menu`` holding *entries* (``NavLink`` / ``NavDropdown``).

    Pass *menu* to fill an existing (pre-configured) menu instead of a new
    one.  Dropdowns are built from a blueprint of the menu they live in, so
    they inherit its filters.
    """
    return Menu.build(entries, lambda target, entry, _key: entry.add_to(target), menu)


__all__ = [
    "DropdownHeader",
    "NavLink",
    "NavDropdown",
    "build_menu",
]
