"""
Site navigation for the project.

Single source of truth for the primary links and dropdown menus; wired up
through ``NAVMENU['MENU_BUILDER']`` so ``navmenu.context_processors.navigation``
can put the activated menu in every template context.
"""

from navmenu.menu import Menu
from navmenu.navigation import NavDropdown, NavLink, build_menu


def _paths(*parts):
    """Helper to create immutable path tuples."""
    return tuple(parts)


NAVIGATION = (
    NavLink(label="Home", href="/"),
    NavLink(label="Users", href="/users/"),
    NavLink(label="Assets", href="/assets/", active_paths=_paths("/asset_models/")),
    NavDropdown(
        label="Organization",
        active_paths=_paths("/categories/", "/maintenance/"),
        items=(
            NavLink(label="Departments", href="/departments/"),
            NavLink(label="Companies", href="/companies/"),
            NavLink(label="Locations", href="/locations/"),
        ),
    ),
    NavDropdown(
        label="Procurement",
        items=(
            NavLink(label="Requisitions", href="/requisitions/"),
            NavLink(label="Invoices", href="/invoices/", active_paths=_paths("/invoices-extended/")),
            NavLink(label="Vendors", href="/vendors/"),
        ),
    ),
)


def build_site_menu():
    """Return the full site navigation as a fresh, inactive ``Menu``."""
    menu = Menu.new().set_attribute("class", "nav").add_item_parent_class("nav-item")
    return build_menu(NAVIGATION, menu)
