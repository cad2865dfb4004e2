"""
Tests for active-state propagation through menu trees.

Covers:
- Derived is_active / is_exact_active on menus
- URL propagation into nested menus, headers and direct children
- Best-effort URL activation (errors are logged, never raised)
- Predicate propagation, type guards and exact-active marking
- Invalid arguments
"""

from unittest.mock import patch

from django.test import SimpleTestCase

from navmenu.activation import Activatable
from navmenu.exceptions import InvalidArgument
from navmenu.items import Content
from navmenu.link import Link
from navmenu.menu import Menu


def _links(menu):
    return [item for item in menu if isinstance(item, Link)]


# ======================================================================
# Derived state
# ======================================================================


class DerivedStateTests(SimpleTestCase):

    def test_empty_menu_is_inactive(self):
        menu = Menu.new()
        self.assertFalse(menu.is_active())
        self.assertFalse(menu.is_exact_active())

    def test_menu_is_active_when_any_child_is(self):
        menu = Menu.new().link("/a", "A").add(Link("/b", "B").set_active())
        self.assertTrue(menu.is_active())

    def test_menu_is_active_when_header_is(self):
        menu = Menu.new().prepend(Link("/docs", "Docs").set_active())
        self.assertTrue(menu.is_active())

    def test_menu_without_header_is_never_exact_active(self):
        menu = Menu.new().add(Link("/a", "A").set_exact_active())
        self.assertTrue(menu.is_active())
        self.assertFalse(menu.is_exact_active())

    def test_string_header_never_makes_menu_exact_active(self):
        menu = Menu.new().prepend("Docs").add(Link("/a", "A").set_exact_active())
        self.assertFalse(menu.is_exact_active())

    def test_exact_active_follows_header(self):
        header = Link("/docs", "Docs")
        menu = Menu.new().prepend(header)
        self.assertFalse(menu.is_exact_active())
        header.set_exact_active()
        self.assertTrue(menu.is_exact_active())

    def test_menus_are_not_activatable(self):
        self.assertNotIsInstance(Menu.new(), Activatable)


# ======================================================================
# URL propagation
# ======================================================================


class SetActiveFromUrlTests(SimpleTestCase):

    def test_about_page_leaves_home_alone(self):
        menu = Menu.new().add(Link("/about", "About")).add(Link("/", "Home"))
        menu.set_active_from_url("/about", "/")
        about, home = _links(menu)
        self.assertTrue(about.is_active())
        self.assertTrue(about.is_exact_active())
        self.assertFalse(home.is_active())
        self.assertFalse(home.is_exact_active())

    def test_propagates_into_nested_menus_and_headers(self):
        header = Link("/docs", "Docs")
        menu = (
            Menu.new()
            .link("/", "Home")
            .submenu(header, lambda docs: docs.link("/docs/intro", "Intro").link("/docs/api", "API"))
        )
        menu.set_active_from_url("/docs/intro")

        docs = list(menu)[1]
        intro, api = _links(docs)
        self.assertTrue(intro.is_exact_active())
        self.assertFalse(api.is_active())
        self.assertTrue(header.is_active())
        self.assertFalse(header.is_exact_active())
        self.assertTrue(docs.is_active())
        self.assertFalse(docs.is_exact_active())
        self.assertTrue(menu.is_active())

    def test_deeply_nested(self):
        deepest = Menu.new().link("/a/b/c", "C")
        menu = Menu.new().submenu(Menu.new().submenu(deepest))
        menu.set_active("/a/b/c")
        self.assertTrue(list(deepest)[0].is_exact_active())
        self.assertTrue(menu.is_active())

    def test_set_active_with_root(self):
        menu = Menu.new().link("/en", "Home").link("/en/about", "About")
        menu.set_active("/en/about", "/en")
        home, about = _links(menu)
        self.assertFalse(home.is_active())
        self.assertTrue(about.is_exact_active())

    def test_content_is_left_alone(self):
        menu = Menu.new().html("<hr>").link("/a", "A")
        menu.set_active("/a")
        self.assertFalse(list(menu)[0].is_active())

    def test_does_not_register_a_filter(self):
        menu = Menu.new().link("/a", "A")
        menu.set_active("/a")
        menu.link("/a", "Again")
        self.assertEqual(menu.filters(), [])
        self.assertFalse(list(menu)[1].is_active())

    def test_other_url_does_not_deactivate(self):
        menu = Menu.new().link("/a", "A").link("/b", "B")
        menu.set_active("/a").set_active("/b")
        self.assertTrue(all(link.is_active() for link in menu))

    def test_set_active_returns_menu(self):
        menu = Menu.new()
        self.assertIs(menu.set_active("/"), menu)

    def test_rendered_scenario(self):
        menu = Menu.new().link("/", "Home").link("/about", "About").set_active("/about")
        self.assertEqual(
            menu.render(),
            '<ul><li><a href="/">Home</a></li>'
            '<li class="active exact-active"><a href="/about">About</a></li></ul>',
        )


class BestEffortActivationTests(SimpleTestCase):

    def test_errors_are_logged_not_raised(self):
        menu = Menu.new().link("http://[broken", "Broken").link("/a", "A")
        with self.assertLogs("navmenu.menu", level="ERROR") as logs:
            result = menu.set_active("/a")
        self.assertIs(result, menu)
        self.assertIn("'/a'", logs.output[0])

    def test_partial_state_is_kept(self):
        menu = Menu.new().link("/a", "A").link("http://[broken", "Broken").link("/a", "Too late")
        with self.assertLogs("navmenu.menu", level="ERROR"):
            menu.set_active("/a")
        first, _, last = _links(menu)
        self.assertTrue(first.is_active())
        self.assertFalse(last.is_active())

    def test_set_active_from_url_itself_raises(self):
        menu = Menu.new().link("http://[broken", "Broken")
        with self.assertRaises(ValueError):
            menu.set_active_from_url("/")

    def test_unexpected_errors_are_swallowed_too(self):
        menu = Menu.new().link("/a", "A")
        with patch.object(Link, "determine_active_for_url", side_effect=RuntimeError("boom")):
            with self.assertLogs("navmenu.menu", level="ERROR") as logs:
                menu.set_active("/a")
        self.assertIn("RuntimeError: boom", "\n".join(logs.output))


# ======================================================================
# Predicate propagation
# ======================================================================


class SetActiveFromCallableTests(SimpleTestCase):

    def test_matching_items_become_active_and_exact(self):
        menu = Menu.new().link("/a", "A").link("/b", "B")
        menu.set_active(lambda link: link.url() == "/b")
        a, b = _links(menu)
        self.assertFalse(a.is_active())
        self.assertTrue(b.is_active())
        self.assertTrue(b.is_exact_active())

    def test_recurses_into_nested_menus(self):
        menu = (
            Menu.new()
            .link("/a", "A")
            .submenu("Docs", lambda docs: docs.link("/docs/x", "X"))
        )
        menu.set_active(lambda link: link.text() == "X")
        docs = list(menu)[1]
        self.assertTrue(list(docs)[0].is_exact_active())
        self.assertTrue(docs.is_active())

    def test_predicate_only_sees_activatable_items(self):
        seen = []

        def predicate(item):
            seen.append(item)
            return True

        menu = Menu.new().html("<hr>").link("/a", "A").submenu(Menu.new())
        menu.set_active(predicate)
        self.assertEqual(len(seen), 1)
        self.assertIsInstance(seen[0], Link)
        self.assertFalse(list(menu)[0].is_active())

    def test_annotation_guards_predicate(self):
        class SpecialLink(Link):
            pass

        seen = []

        def predicate(link: SpecialLink):
            seen.append(link)
            return True

        menu = Menu.new().link("/a", "A").add(SpecialLink("/b", "B"))
        menu.set_active_from_callable(predicate)
        self.assertEqual([link.url() for link in seen], ["/b"])
        self.assertFalse(list(menu)[0].is_active())

    def test_explicit_item_type(self):
        class SpecialLink(Link):
            pass

        menu = Menu.new().link("/a", "A").add(SpecialLink("/b", "B"))
        menu.set_active_from_callable(lambda item: True, SpecialLink)
        a, b = _links(menu)
        self.assertFalse(a.is_active())
        self.assertTrue(b.is_exact_active())

    def test_falsy_result_leaves_item_untouched(self):
        link = Link("/a", "A").set_active()
        Menu.new().add(link).set_active(lambda item: False)
        self.assertTrue(link.is_active())
        self.assertFalse(link.is_exact_active())


class InvalidArgumentTests(SimpleTestCase):

    def test_set_active_rejects_other_values(self):
        for value in (None, 42, ["/a"]):
            with self.subTest(value=value):
                with self.assertRaises(InvalidArgument):
                    Menu.new().set_active(value)

    def test_invalid_argument_is_a_type_error(self):
        self.assertTrue(issubclass(InvalidArgument, TypeError))

    def test_content_is_not_activatable(self):
        self.assertNotIsInstance(Content("x"), Activatable)
