"""
Type-guarded callbacks.

Menus accept callbacks that should only run for some kinds of items (only
links, only sub-menus, only things with parent attributes ...).  The target
type is either passed explicitly or read from the annotation of the
callback's first parameter::

    menu.each(lambda link: link.add_class("nav-link"), Link)

    def mark_external(link: Link):
        ...

    menu.apply_to_all(mark_external)   # only called for Link items

Callbacks without an explicit type or a usable annotation match every item.
"""

import inspect
import types
import typing
from dataclasses import dataclass


def first_parameter_type(callback):
    """
    Return the class (or tuple of classes) annotated on the first parameter
    of *callback*, or ``None`` when there is nothing usable to match on.
    """
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return None

    parameters = list(signature.parameters.values())
    if not parameters:
        return None

    first = parameters[0]
    annotation = first.annotation
    if annotation is inspect.Parameter.empty:
        return None

    if isinstance(annotation, str):
        # Postponed annotations (``from __future__ import annotations``)
        target = callback if inspect.isroutine(callback) else type(callback).__call__
        try:
            annotation = typing.get_type_hints(target).get(first.name)
        except (NameError, TypeError):
            return None

    return _as_type(annotation)


def _as_type(annotation):
    if isinstance(annotation, type):
        return annotation
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        members = tuple(
            member for member in typing.get_args(annotation)
            if isinstance(member, type) and member is not type(None)
        )
        return members or None
    return None


def item_matches_type(item, item_type) -> bool:
    """``None`` matches everything, anything else is an ``isinstance`` check."""
    if item_type is None:
        return True
    return isinstance(item, item_type)


def resolve_condition(condition) -> bool:
    """Conditions are plain values or zero-argument callables."""
    return bool(condition() if callable(condition) else condition)


@dataclass(frozen=True)
class TypedCallback:
    """A callback paired with the item type it applies to."""

    callback: typing.Callable
    item_type: typing.Any = None

    @classmethod
    def wrap(cls, callback, item_type=None) -> "TypedCallback":
        if isinstance(callback, cls):
            if item_type is None:
                return callback
            callback = callback.callback
        if item_type is None:
            item_type = first_parameter_type(callback)
        return cls(callback, item_type)

    def matches(self, item) -> bool:
        return item_matches_type(item, self.item_type)

    def apply(self, item):
        """Call the callback for *item* if it matches; a mismatch is a no-op."""
        if not self.matches(item):
            return None
        return self.callback(item)
