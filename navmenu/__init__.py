"""
Nested navigation menus that know where the visitor currently is.

Build a tree of links, raw HTML chunks and sub-menus, activate the branch
matching the current request and render it to markup::

    from navmenu import Menu

    menu = (
        Menu.new()
        .link("/", "Home")
        .link("/about/", "About")
        .submenu("Docs", lambda docs: docs.link("/docs/intro/", "Intro"))
        .set_active("/about/")
    )
    html = menu.render()
"""

from navmenu.exceptions import InvalidArgument
from navmenu.html import Attributes, Tag
from navmenu.items import Content, ExactActivatable, HasRenderHooks, Item
from navmenu.activation import Activatable
from navmenu.link import Link
from navmenu.menu import Menu

__all__ = [
    "Activatable",
    "Attributes",
    "Content",
    "ExactActivatable",
    "HasRenderHooks",
    "InvalidArgument",
    "Item",
    "Link",
    "Menu",
    "Tag",
]
