"""Homepage persistence.

The reducer only depends on the two-function :class:`HomepagePersistence`
contract; :class:`StoreHomepage` is the default implementation backed by the
``homepage`` store key.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from viewdeck.workspace.store.base import HOMEPAGE

if TYPE_CHECKING:
    from viewdeck.workspace.store.base import KeyValueStore

DEFAULT_HOMEPAGE = "https://www.google.com/"


@runtime_checkable
class HomepagePersistence(Protocol):
    def get_homepage(self) -> str: ...

    def save_homepage(self, homepage: str) -> None: ...


class StoreHomepage:
    """Homepage kept in the settings store, with a configurable fallback."""

    def __init__(self, store: KeyValueStore, default: str = DEFAULT_HOMEPAGE) -> None:
        self._store = store
        self._default = default

    def get_homepage(self) -> str:
        homepage = self._store.get(HOMEPAGE)
        if not isinstance(homepage, str) or not homepage:
            return self._default
        return homepage

    def save_homepage(self, homepage: str) -> None:
        self._store.set(HOMEPAGE, homepage)
