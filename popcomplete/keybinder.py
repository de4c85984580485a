"""Accept-key binding for the suggestion popup."""

from __future__ import annotations

import logging
from collections.abc import Callable

from prompt_toolkit.filters import FilterOrBool
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys

from .config import InsertionKey

logger = logging.getLogger("popcomplete.keybinder")

#: Key the host binds to "accept" by default. Evicted on construction.
DEFAULT_ACCEPT_KEY = (Keys.ControlM,)

AcceptHandler = Callable[[KeyPressEvent], None]


class AcceptKeyBinder:
    """Owns the single key binding that accepts the highlighted suggestion.

    The binder replaces the host's accept behaviour rather than adding to
    it: any existing binding for the default accept key in ``key_bindings``
    is removed when the binder is created.
    """

    def __init__(
        self,
        key_bindings: KeyBindings,
        on_accept: Callable[[], object],
        filter: FilterOrBool = True,
    ) -> None:
        self.key_bindings = key_bindings
        self._on_accept = on_accept
        self._filter = filter
        self._registration: AcceptHandler | None = None
        self.active_key: InsertionKey | None = None

        for binding in list(key_bindings.bindings):
            # A handler bound to several keys goes with its first removal.
            if binding.keys == DEFAULT_ACCEPT_KEY and binding in key_bindings.bindings:
                key_bindings.remove(binding.handler)
                logger.debug("Removed default enter binding %r", binding.handler)

    def set_accept_key(self, key: InsertionKey | str) -> None:
        """Bind ``key`` to accept, replacing any previous accept key."""
        key = InsertionKey(key)
        self.disable()

        def accept(event: KeyPressEvent) -> None:
            # Returning None marks the key press as handled.
            self._on_accept()

        self.key_bindings.add(key.value, filter=self._filter)(accept)
        self._registration = accept
        self.active_key = key
        logger.info("Accept key set to %s", key.value)

    def disable(self) -> None:
        """Remove the active accept binding, if there is one."""
        if self._registration is None:
            return

        self.key_bindings.remove(self._registration)
        self._registration = None
        self.active_key = None
