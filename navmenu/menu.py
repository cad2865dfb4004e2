"""
The menu composite.

A ``Menu`` is an ordered list of items (links, raw HTML, other menus) that
is itself an item, so menus nest freely.  Besides holding children it:

1.  Runs every added item through its registered filters, so styling
    rules declared once apply to everything added later::

        menu = Menu.new().add_item_class("nav-item").link("/", "Home")

2.  Propagates the active state from a URL or a predicate down the whole
    tree (``set_active``).

3.  Renders itself, wrapping children in a wrapper tag (``<ul>``), each
    child in a parent tag (``<li>``), and putting the configured active
    classes on the parent tag and/or the link.

Defaults for tags and classes come from ``navmenu.conf``.
"""

import logging

from django.utils.safestring import mark_safe

from navmenu.activation import Activatable
from navmenu.conf import get_menu_settings
from navmenu.dispatch import TypedCallback, resolve_condition
from navmenu.exceptions import InvalidArgument
from navmenu.html import Attributes, Tag
from navmenu.items import (
    Content,
    ExactActivatable,
    HasHtmlAttributes,
    HasParentAttributes,
    HasRenderHooks,
    HasTextAttributes,
    Item,
)
from navmenu.link import Link

logger = logging.getLogger(__name__)


class Menu(HasHtmlAttributes, HasParentAttributes, HasTextAttributes, ExactActivatable, Item):
    def __init__(self, *items):
        defaults = get_menu_settings()

        self._items = []
        self._filters = []
        self._prepend = None
        self._append = ""
        self._wrap = None

        self._active_class = defaults["ACTIVE_CLASS"]
        self._exact_active_class = defaults["EXACT_ACTIVE_CLASS"]
        self._wrapper_tag_name = defaults["WRAPPER_TAG"]
        self._parent_tag_name = defaults["PARENT_TAG"]
        self._active_class_on_parent = defaults["ACTIVE_CLASS_ON_PARENT"]
        self._active_class_on_link = defaults["ACTIVE_CLASS_ON_LINK"]

        self._html_attributes = Attributes()
        self._parent_attributes = Attributes()

        for item in items:
            self._check_item(item)
            self._items.append(item)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, items=()):
        """Create a new menu, optionally prefilled with *items*."""
        return cls(*items)

    @classmethod
    def build(cls, items, callback, initial=None):
        """
        Build a menu from an iterable.  See ``fill()`` for the callback
        signature.
        """
        menu = initial if initial is not None else cls.new()
        return menu.fill(items, callback)

    def fill(self, items, callback):
        """
        Fill the menu from an iterable (or a mapping).  *callback* receives
        the menu, the item and its key (index for sequences) and may return a
        different menu to continue with.
        """
        pairs = items.items() if hasattr(items, "items") else enumerate(items)
        menu = self
        for key, item in pairs:
            result = callback(menu, item, key)
            if result is not None:
                menu = result
        return menu

    def blueprint(self):
        """An empty menu that shares this menu's filters and active class."""
        clone = type(self)()
        clone._filters = list(self._filters)
        clone._active_class = self._active_class
        return clone

    # ------------------------------------------------------------------
    # Adding items
    # ------------------------------------------------------------------

    def add(self, item):
        """Add *item* after running it through every registered filter."""
        self._check_item(item)

        for item_filter in self._filters:
            item_filter.apply(item)

        self._items.append(item)
        return self

    def add_if(self, condition, item):
        if resolve_condition(condition):
            self.add(item)
        return self

    def link(self, url, text):
        return self.add(Link.to(url, text))

    def link_if(self, condition, url, text):
        if resolve_condition(condition):
            self.link(url, text)
        return self

    def empty(self):
        """Add an empty item, e.g. a separator styled through parent attributes."""
        return self.add(Content.empty())

    def html(self, html, parent_attributes=None):
        return self.add(Content.raw(html).set_parent_attributes(parent_attributes or {}))

    def html_if(self, condition, html, parent_attributes=None):
        if resolve_condition(condition):
            self.html(html, parent_attributes)
        return self

    def submenu(self, header, menu=None):
        """
        Add a nested menu.

        Called with one argument, that argument is the menu (or builder) and
        there is no header.  A callable builder receives a fresh
        ``blueprint()`` to populate.  A non-empty *header* (string or item)
        is rendered before the nested menu's wrapper.
        """
        if menu is None:
            header, menu = "", header

        submenu = self._create_submenu(menu)
        if header:
            submenu.prepend(header)

        return self.add(submenu)

    def submenu_if(self, condition, header, menu=None):
        if resolve_condition(condition):
            self.submenu(header, menu)
        return self

    def _create_submenu(self, menu):
        if isinstance(menu, Menu):
            return menu
        if callable(menu):
            submenu = self.blueprint()
            menu(submenu)
            return submenu
        raise InvalidArgument(
            f"`submenu` requires a Menu or a callable, got {type(menu).__name__}"
        )

    def prepend(self, prepend):
        """Set the header rendered before the wrapper (markup or an item)."""
        self._check_cycle(prepend)
        return super().prepend(prepend)

    def _check_item(self, item):
        if not isinstance(item, Item):
            raise InvalidArgument(f"Menus can only hold items, got {type(item).__name__}")
        self._check_cycle(item)

    def _check_cycle(self, item):
        if isinstance(item, Menu) and (item is self or item.contains(self)):
            raise InvalidArgument("A menu cannot contain itself")

    def contains(self, menu) -> bool:
        """Whether *menu* is nested anywhere below this menu."""
        for item in self._nodes():
            if item is menu:
                return True
            if isinstance(item, Menu) and item.contains(menu):
                return True
        return False

    def _nodes(self):
        if isinstance(self._prepend, Item):
            yield self._prepend
        yield from self._items

    # ------------------------------------------------------------------
    # Filters and bulk operations
    # ------------------------------------------------------------------

    def each(self, callback, item_type=None):
        """
        Call *callback* for every direct child matching *item_type* (or the
        annotation on the callback's first parameter).  Nested menus' children
        are not visited.
        """
        typed = TypedCallback.wrap(callback, item_type)
        for item in list(self._items):
            typed.apply(item)
        return self

    def register_filter(self, callback, item_type=None):
        """Apply *callback* to every item added from now on."""
        self._filters.append(TypedCallback.wrap(callback, item_type))
        return self

    def apply_to_all(self, callback, item_type=None):
        """Apply *callback* to the current children and to every future one."""
        typed = TypedCallback.wrap(callback, item_type)
        self.each(typed)
        self.register_filter(typed)
        return self

    def filters(self) -> list:
        return list(self._filters)

    def add_item_class(self, class_name):
        return self.apply_to_all(lambda item: item.add_class(class_name), HasHtmlAttributes)

    def set_item_attribute(self, attribute, value=""):
        return self.apply_to_all(
            lambda item: item.set_attribute(attribute, value), HasHtmlAttributes
        )

    def add_item_parent_class(self, class_name):
        return self.apply_to_all(
            lambda item: item.add_parent_class(class_name), HasParentAttributes
        )

    def set_item_parent_attribute(self, attribute, value=""):
        return self.apply_to_all(
            lambda item: item.set_parent_attribute(attribute, value), HasParentAttributes
        )

    def when(self, condition, callback):
        """Run ``callback(menu)`` if *condition* holds; keeps the chain going."""
        if not resolve_condition(condition):
            return self
        result = callback(self)
        return result if result is not None else self

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def wrap(self, element, attributes=None):
        """Wrap the whole rendered menu, wrapper tag included, in *element*."""
        self._wrap = (element, dict(attributes or {}))
        return self

    def set_wrapper_tag(self, wrapper_tag_name=None):
        self._wrapper_tag_name = wrapper_tag_name
        return self

    def without_wrapper_tag(self):
        return self.set_wrapper_tag(None)

    def set_parent_tag(self, parent_tag_name=None):
        self._parent_tag_name = parent_tag_name
        return self

    def without_parent_tag(self):
        return self.set_parent_tag(None)

    def active_class(self):
        return self._active_class

    def set_active_class(self, class_name):
        self._active_class = class_name
        return self

    def exact_active_class(self):
        return self._exact_active_class

    def set_exact_active_class(self, class_name):
        self._exact_active_class = class_name
        return self

    def set_active_class_on_link(self, active_class_on_link=True):
        self._active_class_on_link = active_class_on_link
        return self

    def set_active_class_on_parent(self, active_class_on_parent=True):
        self._active_class_on_parent = active_class_on_parent
        return self

    # ------------------------------------------------------------------
    # Active state
    # ------------------------------------------------------------------

    def is_active(self) -> bool:
        """Active when any child, or the header, is active."""
        return any(item.is_active() for item in self._nodes())

    def is_exact_active(self) -> bool:
        """A menu is never exact-active on its own, only through its header."""
        if not isinstance(self._prepend, ExactActivatable):
            return False
        return self._prepend.is_exact_active()

    def set_active(self, url_or_predicate, root="/"):
        """
        Activate items from the current URL (a string) or a predicate.

        URL activation is best-effort: errors raised while matching are
        logged and the menu is left as far as matching got.
        """
        if isinstance(url_or_predicate, str):
            try:
                self.set_active_from_url(url_or_predicate, root)
            except Exception:
                logger.exception("Failed to activate menu items for URL %r", url_or_predicate)
            return self

        if callable(url_or_predicate):
            return self.set_active_from_callable(url_or_predicate)

        raise InvalidArgument("`set_active` requires a URL or a callable")

    def set_active_from_url(self, url, root="/"):
        """
        Activate every item matching *url* (see ``navmenu.activation`` for the
        matching rules).

        ``/``, ``/about``, ``/contact`` with a request to ``/about`` activates
        the about link only.  With ``root="/en"``, a link to ``/en`` is not
        activated by a request to ``/en/about``.
        """
        self.each(lambda menu: menu.set_active_from_url(url, root), Menu)

        if isinstance(self._prepend, Activatable):
            self._prepend.determine_active_for_url(url, root)

        self.each(lambda item: item.determine_active_for_url(url, root), Activatable)
        return self

    def set_active_from_callable(self, predicate, item_type=None):
        """
        Activate (and exact-activate) every item for which *predicate*
        returns a truthy value.  Recurses into nested menus.
        """
        typed = TypedCallback.wrap(predicate, item_type)

        self.each(lambda menu: menu.set_active_from_callable(typed), Menu)

        def activate(item):
            if typed.matches(item) and typed.callback(item):
                item.set_active()
                item.set_exact_active()

        self.each(activate, Activatable)
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        tag = (
            Tag.make(self._wrapper_tag_name, self._html_attributes)
            if self._wrapper_tag_name
            else None
        )

        contents = [self._render_item(item) for item in self._items]
        wrapped_contents = tag.with_contents(contents) if tag else "".join(contents)

        if isinstance(self._prepend, Item) and self._prepend.is_active():
            self._render_active_class_on_link(self._prepend)

        menu = mark_safe(
            self._render_fragment(self._prepend)
            + wrapped_contents
            + self._render_fragment(self._append)
        )

        if self._wrap:
            element, attributes = self._wrap
            return Tag.make(element, Attributes(attributes)).with_contents(menu)

        return menu

    def _render_item(self, item) -> str:
        attributes = Attributes()

        if isinstance(item, HasRenderHooks):
            item.before_render()
            if item.will_render() is False:
                return ""

        if item.is_active():
            if self._active_class_on_parent:
                attributes.add_class(self._active_class)
                if isinstance(item, ExactActivatable) and item.is_exact_active():
                    attributes.add_class(self._exact_active_class)

            self._render_active_class_on_link(item)

        if isinstance(item, HasParentAttributes):
            attributes.merge_with(item.parent_attributes())

        if not self._parent_tag_name:
            return item.render()

        return Tag.make(self._parent_tag_name, attributes).with_contents(item.render())

    def _render_active_class_on_link(self, item):
        if (
            self._active_class_on_link
            and isinstance(item, HasHtmlAttributes)
            and not isinstance(item, Menu)
        ):
            item.add_class(self._active_class)
            if isinstance(item, ExactActivatable) and item.is_exact_active():
                item.add_class(self._exact_active_class)
        return item

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def count(self) -> int:
        return len(self._items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __bool__(self):
        return True

    def __repr__(self):
        return f"<Menu: {len(self._items)} items>"
