"""
Small HTML building blocks used while rendering menus.

``Attributes`` keeps an ordered set of attributes plus a class list and
serializes them in insertion order through Django's ``format_html_join`` so
values are always escaped.
``Tag`` opens, closes and wraps contents in an element.  Tag names are not
validated; whatever is configured ends up in the markup.
"""

from django.utils.html import format_html_join
from django.utils.safestring import mark_safe


class Attributes:
    """
    Ordered, key-unique HTML attributes.

    ``class`` is tracked separately as a list so classes can be added one at
    a time without clobbering each other.  An empty string value renders as a
    bare attribute (``<a download>``), ``None`` drops the attribute.
    """

    def __init__(self, attributes=None):
        self._attributes = {}
        self._classes = []
        if attributes:
            self.set_attributes(attributes)

    def set_attribute(self, name: str, value="") -> "Attributes":
        if name == "class":
            return self.add_class(value)
        self._attributes[name] = value
        return self

    def set_attributes(self, attributes) -> "Attributes":
        for name, value in dict(attributes).items():
            self.set_attribute(name, value)
        return self

    def add_class(self, *classes) -> "Attributes":
        """Add one or more classes.  Space-separated strings are split."""
        for value in classes:
            if not value:
                continue
            names = value.split() if isinstance(value, str) else value
            for name in names:
                if name not in self._classes:
                    self._classes.append(name)
        return self

    def merge_with(self, other: "Attributes") -> "Attributes":
        """Merge *other* into this set.  On key conflicts *other* wins."""
        self._attributes.update(other._attributes)
        self.add_class(other._classes)
        return self

    def is_empty(self) -> bool:
        return not self._attributes and not self._classes

    def classes(self) -> list:
        return list(self._classes)

    def get(self, name: str, default=None):
        if name == "class":
            return " ".join(self._classes) if self._classes else default
        return self._attributes.get(name, default)

    def as_dict(self) -> dict:
        attributes = dict(self._attributes)
        if self._classes:
            attributes["class"] = " ".join(self._classes)
        return attributes

    def render(self) -> str:
        """Serialize to ``key="value"`` pairs ready for an opening tag."""
        key_values = []
        bare = []
        for name, value in self.as_dict().items():
            if value is None or value is False:
                continue
            if value is True or value == "":
                bare.append((name,))
            else:
                key_values.append((name, value))

        rendered = format_html_join("", ' {}="{}"', key_values) + format_html_join("", " {}", bare)
        return mark_safe(rendered.lstrip())

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"Attributes({self.as_dict()!r})"


class Tag:
    """An element name plus its attributes."""

    def __init__(self, tag_name: str, attributes: Attributes | None = None):
        self.tag_name = tag_name
        self.attributes = attributes if attributes is not None else Attributes()

    @classmethod
    def make(cls, tag_name: str, attributes: Attributes | None = None) -> "Tag":
        return cls(tag_name, attributes)

    def open(self) -> str:
        if self.attributes.is_empty():
            return mark_safe(f"<{self.tag_name}>")
        return mark_safe(f"<{self.tag_name} {self.attributes.render()}>")

    def close(self) -> str:
        return mark_safe(f"</{self.tag_name}>")

    def with_contents(self, contents) -> str:
        """Wrap already rendered *contents* (a string or a sequence of strings)."""
        if not isinstance(contents, str):
            contents = "".join(str(part) for part in contents)
        return mark_safe(self.open() + contents + self.close())
