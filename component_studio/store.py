"""Observable store holding the configuration of the active editing session.

The store owns exactly one ``ComponentConfig``. Every write is validated with
``coerce_field`` before it lands; listeners are notified after each effective
change and pull whatever they need from the snapshot they are handed (or from
``ConfigStore.get``). Rapid-fire writes can be coalesced with ``batch()``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from .models import DEFAULT_CONFIG, FIELD_NAMES, ComponentConfig, coerce_field


@dataclass(frozen=True)
class ConfigChange:
    """Notification payload: which fields changed and the resulting snapshot."""

    fields: tuple[str, ...]
    config: ComponentConfig


Listener = Callable[[ConfigChange], None]


class ConfigStore:
    """Single-writer store for a ``ComponentConfig``.

    Snapshots returned by :meth:`get` are immutable, so callers may keep them
    around without copying.
    """

    def __init__(self, initial: ComponentConfig | None = None) -> None:
        self._default = initial or DEFAULT_CONFIG
        self._config = self._default
        self._listeners: list[Listener] = []
        self._batch_depth = 0
        self._pending: list[str] = []

    # -- Reads -------------------------------------------------------------

    def get(self) -> ComponentConfig:
        """Return the current configuration snapshot."""
        return self._config

    @property
    def default(self) -> ComponentConfig:
        """The configuration :meth:`reset` restores."""
        return self._default

    # -- Writes ------------------------------------------------------------

    def set(self, key: str, value: Any) -> None:
        """Validate and store a single field.

        Numeric values are clamped to the nearest legal value; unknown tokens
        for enumerated fields raise ``InvalidFieldValue`` and leave the store
        untouched.
        """
        self.update({key: value})

    def update(self, changes: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Validate and store several fields at once.

        All values are validated before any is applied, so a single invalid
        entry leaves the store unchanged. Emits at most one notification.
        """
        merged = {**(changes or {}), **kwargs}
        coerced: dict[str, Any] = {}
        for key, value in merged.items():
            name, clean = coerce_field(key, value)
            coerced[name] = clean
        self._apply(coerced)

    def reset(self) -> None:
        """Restore the default configuration."""
        self._apply({name: getattr(self._default, name) for name in FIELD_NAMES})

    # -- Subscriptions -----------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    @contextmanager
    def batch(self) -> Iterator[ConfigStore]:
        """Coalesce notifications until the outermost batch exits.

        Writes inside the batch are applied immediately in call order (last
        write wins per field); listeners see one notification at the end.
        """
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._pending:
                fields = tuple(self._pending)
                self._pending = []
                self._notify(fields)

    # -- Internal helpers --------------------------------------------------

    def _apply(self, coerced: dict[str, Any]) -> None:
        changed = [
            name for name in FIELD_NAMES
            if name in coerced and getattr(self._config, name) != coerced[name]
        ]
        if not changed:
            return
        self._config = self._config.model_copy(update={name: coerced[name] for name in changed})
        if self._batch_depth:
            self._pending.extend(name for name in changed if name not in self._pending)
            return
        self._notify(tuple(changed))

    def _notify(self, fields: tuple[str, ...]) -> None:
        change = ConfigChange(fields=fields, config=self._config)
        for listener in list(self._listeners):
            listener(change)
