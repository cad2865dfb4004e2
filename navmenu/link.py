from django.utils.html import format_html
from django.utils.safestring import mark_safe

from navmenu.activation import Activatable
from navmenu.html import Attributes
from navmenu.items import (
    HasHtmlAttributes,
    HasParentAttributes,
    HasTextAttributes,
    Item,
)


class Link(Activatable, HasHtmlAttributes, HasParentAttributes, HasTextAttributes, Item):
    """
    An anchor pointing at *url*.

    The text is escaped unless it was marked safe already, so icons and other
    markup can be passed through ``mark_safe`` / ``format_html``.
    """

    def __init__(self, url, text):
        self._url = url
        self._text = text
        self._html_attributes = Attributes()
        self._parent_attributes = Attributes()

    @classmethod
    def to(cls, url, text):
        return cls(url, text)

    def text(self):
        return self._text

    def render(self) -> str:
        attributes = Attributes({"href": self._url})
        attributes.merge_with(self._html_attributes)
        anchor = format_html("<a {}>{}</a>", attributes.render(), self._text)
        return mark_safe(
            self._render_fragment(self._prepend) + anchor + self._render_fragment(self._append)
        )

    def __repr__(self):
        return f"Link({self._url!r}, {self._text!r})"
