"""
The item model shared by every node of a menu tree.

``Item`` is the one thing a menu knows about its children: it can be
rendered and asked whether it is active.  Optional capabilities are plain
mixins that menus check with ``isinstance``:

- ``ExactActivatable``  -- exposes ``is_exact_active()``
- ``HasRenderHooks``    -- ``before_render()`` / ``will_render()``
- ``HasHtmlAttributes`` -- attributes on the item's own element
- ``HasParentAttributes`` -- attributes on the element wrapping the item
- ``HasTextAttributes`` -- markup rendered right before/after the item
"""

from abc import ABC, abstractmethod

from django.utils.safestring import mark_safe

from navmenu.dispatch import resolve_condition
from navmenu.html import Attributes


class Item(ABC):
    @abstractmethod
    def render(self) -> str:
        """Return the item's markup."""

    @abstractmethod
    def is_active(self) -> bool:
        """Whether the item matches the current location."""

    def __str__(self):
        return self.render()

    def __html__(self):
        return self.render()


class ExactActivatable(ABC):
    @abstractmethod
    def is_exact_active(self) -> bool:
        """Whether the item matches the current location precisely."""


class HasRenderHooks:
    """Subclass to run code right before an item renders, or to veto it."""

    def before_render(self):
        pass

    def will_render(self) -> bool:
        return True


class HasHtmlAttributes:
    _html_attributes: Attributes

    def set_attribute(self, attribute, value=""):
        self._html_attributes.set_attribute(attribute, value)
        return self

    def set_attributes(self, attributes):
        self._html_attributes.set_attributes(attributes)
        return self

    def add_class(self, class_name):
        self._html_attributes.add_class(class_name)
        return self

    def attributes(self) -> Attributes:
        return self._html_attributes


class HasParentAttributes:
    _parent_attributes: Attributes

    def set_parent_attribute(self, attribute, value=""):
        self._parent_attributes.set_attribute(attribute, value)
        return self

    def set_parent_attributes(self, attributes):
        self._parent_attributes.set_attributes(attributes)
        return self

    def add_parent_class(self, class_name):
        self._parent_attributes.add_class(class_name)
        return self

    def parent_attributes(self) -> Attributes:
        return self._parent_attributes


class HasTextAttributes:
    _prepend = None
    _append = ""

    def prepend(self, prepend):
        self._prepend = prepend
        return self

    def prepend_if(self, condition, prepend):
        if resolve_condition(condition):
            return self.prepend(prepend)
        return self

    def append(self, append):
        self._append = append
        return self

    def append_if(self, condition, append):
        if resolve_condition(condition):
            return self.append(append)
        return self

    @staticmethod
    def _render_fragment(fragment) -> str:
        if fragment is None:
            return ""
        if isinstance(fragment, Item):
            return fragment.render()
        return str(fragment)


class Content(Item, HasParentAttributes):
    """A chunk of raw markup.  Never active."""

    def __init__(self, html=""):
        self._html = html
        self._parent_attributes = Attributes()

    @classmethod
    def raw(cls, html):
        return cls(html)

    @classmethod
    def empty(cls):
        return cls("")

    def html(self) -> str:
        return self._html

    def render(self) -> str:
        return mark_safe(self._html)

    def is_active(self) -> bool:
        return False

    def __repr__(self):
        return f"Content({self._html!r})"
