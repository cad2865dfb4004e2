"""
Active / exact-active state for items that point somewhere.

URL matching rules (``Activatable.determine_active_for_url``):

  - Items without a URL, or whose URL is only a fragment or query string
    (``#top``, ``?page=2``), are never activated.
  - If both URLs carry a host and the hosts differ, there is no match.
  - Paths are compared with a leading and trailing slash, so ``/about``
    and ``/about/`` are the same location.
  - Both paths must live under *root*; the root prefix is stripped first.
  - Equal paths make the item active *and* exact-active.
  - Otherwise the item is active when its path is a whole-segment prefix of
    the requested path: ``/assets/`` matches ``/assets/42/`` but not
    ``/assets-old/``.  An item pointing at *root* itself is only ever
    activated by an exact match, which keeps home links from lighting up on
    every request.
  - Extra ``active_paths`` behave like the prefix rule and never make the
    item exact-active.

Activation only ever sets flags.  Use ``set_inactive()`` to clear them.
"""

from urllib.parse import urlsplit

from navmenu.dispatch import resolve_condition
from navmenu.items import ExactActivatable


def normalize_path(path: str) -> str:
    """``"about"``, ``"/about"`` and ``"/about/"`` all become ``"/about/"``."""
    stripped = (path or "").strip("/")
    return f"/{stripped}/" if stripped else "/"


def strip_root(path: str, root: str) -> str | None:
    """Return *path* relative to *root*, or ``None`` if it lies outside."""
    if not path.startswith(root):
        return None
    return path[len(root):]


class Activatable(ExactActivatable):
    _url: str | None = None
    _active: bool = False
    _exact_active: bool = False
    _active_paths: tuple = ()

    def url(self) -> str | None:
        return self._url

    def has_url(self) -> bool:
        return bool(self._url)

    def set_url(self, url: str):
        self._url = url
        return self

    def set_active_paths(self, *paths):
        """Additional path prefixes that make this item active."""
        self._active_paths = tuple(paths)
        return self

    def active_paths(self) -> tuple:
        return self._active_paths

    def is_active(self) -> bool:
        return self._active

    def is_exact_active(self) -> bool:
        return self._exact_active

    def set_active(self, active=True):
        """Set the active flag.  A callable receives the item and decides."""
        if callable(active):
            self._active = bool(active(self))
        else:
            self._active = bool(active)
        if not self._active:
            self._exact_active = False
        return self

    def set_exact_active(self, exact_active=True):
        """Exact-active implies active."""
        self._exact_active = resolve_condition(exact_active)
        if self._exact_active:
            self._active = True
        return self

    def set_inactive(self):
        self._active = False
        self._exact_active = False
        return self

    def determine_active_for_url(self, url: str, root: str = "/"):
        """Activate this item if it matches the requested *url* under *root*."""
        requested = urlsplit(url)
        root_path = normalize_path(urlsplit(root).path)
        match_path = strip_root(normalize_path(requested.path), root_path)
        if match_path is None:
            return

        if self.has_url():
            own = urlsplit(self._url)
            if not self._hosts_differ(own, requested) and (own.path or own.netloc):
                item_path = strip_root(normalize_path(own.path), root_path)
                if item_path is not None:
                    if item_path == match_path:
                        self.set_exact_active()
                        return
                    if item_path and match_path.startswith(item_path):
                        self.set_active()
                        return

        for extra in self._active_paths:
            extra_path = strip_root(normalize_path(extra), root_path)
            if extra_path and match_path.startswith(extra_path):
                self.set_active()
                return

    @staticmethod
    def _hosts_differ(own, requested) -> bool:
        if not own.netloc or not requested.netloc:
            return False
        return own.hostname != requested.hostname
