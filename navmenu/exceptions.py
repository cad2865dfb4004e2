"""Errors raised while building or activating menus."""


class InvalidArgument(TypeError):
    """
    Raised when a menu operation receives an argument it cannot work with,
    e.g. ``set_active()`` called with something that is neither a URL nor a
    callable, or an ``add()`` that would make a menu contain itself.
    """
