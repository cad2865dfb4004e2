"""
Tests for the declarative navigation schema and the project's site menu.

Covers:
- NavLink / NavDropdown conversion to menu items
- build_menu with and without a pre-configured menu
- Extra active paths on links and dropdown headers
- Extra HTML attributes on links
- core.navigation.build_site_menu
"""

from django.test import SimpleTestCase, override_settings
from django.urls import reverse_lazy

from core.navigation import NAVIGATION, build_site_menu
from navmenu.link import Link
from navmenu.menu import Menu
from navmenu.navigation import DropdownHeader, NavDropdown, NavLink, build_menu


class NavLinkTests(SimpleTestCase):

    def test_as_item(self):
        link = NavLink(label="Users", href="/users/", active_paths=("/employees/",)).as_item()
        self.assertIsInstance(link, Link)
        self.assertEqual(link.url(), "/users/")
        self.assertEqual(link.text(), "Users")
        self.assertEqual(link.active_paths(), ("/employees/",))

    def test_lazy_hrefs_are_resolved(self):
        with self.settings(ROOT_URLCONF="navmenu.tests.urls"):
            link = NavLink(label="Docs", href=reverse_lazy("docs")).as_item()
            self.assertEqual(link.url(), "/docs/")

    def test_attributes_are_rendered_on_the_anchor(self):
        link = NavLink(
            label="Users",
            href="/users/",
            attributes={"hx-boost": "true", "class": "nav-link"},
        ).as_item()
        self.assertEqual(
            link.render(),
            '<a href="/users/" hx-boost="true" class="nav-link">Users</a>',
        )

    def test_attributes_default_to_none(self):
        link = NavLink(label="Users", href="/users/").as_item()
        self.assertTrue(link.attributes().is_empty())

    def test_entries_are_immutable(self):
        entry = NavLink(label="Users", href="/users/")
        with self.assertRaises(AttributeError):
            entry.label = "People"


class BuildMenuTests(SimpleTestCase):

    ENTRIES = (
        NavLink(label="Home", href="/"),
        NavDropdown(
            label="Org & Co",
            items=(
                NavLink(label="Departments", href="/departments/"),
                NavLink(label="Companies", href="/companies/"),
            ),
        ),
    )

    def test_renders_links_and_dropdowns(self):
        menu = build_menu(self.ENTRIES)
        self.assertEqual(
            menu.render(),
            '<ul><li><a href="/">Home</a></li>'
            "<li><span>Org &amp; Co</span><ul>"
            '<li><a href="/departments/">Departments</a></li>'
            '<li><a href="/companies/">Companies</a></li>'
            "</ul></li></ul>",
        )

    def test_fills_given_menu_and_dropdowns_inherit_its_filters(self):
        menu = Menu.new().add_item_class("nav-link")
        result = build_menu(self.ENTRIES, menu)
        self.assertIs(result, menu)
        dropdown = list(menu)[1]
        self.assertEqual(
            [link.attributes().get("class") for link in dropdown],
            ["nav-link", "nav-link"],
        )

    def test_dropdown_is_active_through_children(self):
        menu = build_menu(self.ENTRIES).set_active("/companies/12/")
        home, dropdown = list(menu)
        self.assertFalse(home.is_active())
        self.assertTrue(dropdown.is_active())
        self.assertFalse(dropdown.is_exact_active())


class SiteMenuTests(SimpleTestCase):

    def test_builds_fresh_menu_each_time(self):
        first = build_site_menu().set_active("/users/")
        second = build_site_menu()
        self.assertTrue(first.is_active())
        self.assertFalse(second.is_active())

    def test_covers_every_entry(self):
        self.assertEqual(build_site_menu().count(), len(NAVIGATION))

    def test_active_paths_light_up_assets(self):
        menu = build_site_menu().set_active("/asset_models/4/")
        assets = [item for item in menu if isinstance(item, Link) and item.text() == "Assets"][0]
        self.assertTrue(assets.is_active())
        self.assertIn('<li class="active nav-item">', menu.render())


class DropdownActivePathsTests(SimpleTestCase):

    ENTRIES = (
        NavDropdown(
            label="Catalog",
            active_paths=("/categories/",),
            items=(NavLink(label="Products", href="/products/"),),
        ),
    )

    def test_header_is_a_dropdown_header(self):
        header = self.ENTRIES[0].header()
        self.assertIsInstance(header, DropdownHeader)
        self.assertEqual(header.label(), "Catalog")
        self.assertEqual(header.active_paths(), ("/categories/",))

    def test_active_paths_activate_the_dropdown(self):
        menu = build_menu(self.ENTRIES).set_active("/categories/7/")
        dropdown = list(menu)[0]
        self.assertTrue(dropdown.is_active())
        self.assertFalse(dropdown.is_exact_active())
        self.assertFalse(list(dropdown)[0].is_active())
        self.assertEqual(
            menu.render(),
            '<ul><li class="active"><span>Catalog</span><ul>'
            '<li><a href="/products/">Products</a></li>'
            "</ul></li></ul>",
        )

    def test_unrelated_path_leaves_dropdown_inactive(self):
        menu = build_menu(self.ENTRIES).set_active("/categorical/")
        self.assertFalse(menu.is_active())

    @override_settings(NAVMENU={"ACTIVE_CLASS_ON_LINK": True})
    def test_header_gets_active_class_on_link(self):
        menu = build_menu(self.ENTRIES).set_active("/categories/")
        self.assertIn('<span class="active">Catalog</span>', menu.render())

    def test_site_menu_organization_lights_up_from_maintenance(self):
        menu = build_site_menu().set_active("/maintenance/3/")
        organization = [
            item for item in menu
            if isinstance(item, Menu) and item.is_active()
        ]
        self.assertEqual(len(organization), 1)
        self.assertIn("<span>Organization</span>", menu.render())
