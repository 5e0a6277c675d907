"""Environment property lookups (optional / optional-or-fail / mandatory)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from sysprop.constants.messages import EMPTY_KEY
from sysprop.utils.errors import MandatoryPropertyNotSetError, OptionalPropertyNotSetError


class PropertyAccessor:
    """Read-only view over a key/value property store.

    With no *store* every lookup goes to ``os.environ`` at call time, so
    changes to the process environment are picked up. Values are never cached.
    """

    def __init__(self, store: Optional[Mapping[str, str]] = None) -> None:
        self._store = store

    @property
    def store(self) -> Mapping[str, str]:
        return os.environ if self._store is None else self._store

    def _lookup(self, key: str) -> str | None:
        if not key:
            raise ValueError(EMPTY_KEY)
        # PermissionError from the store propagates as-is
        return self.store.get(key)

    def get_optional(self, key: str) -> str | None:
        """Return the value of *key*, or ``None`` if it is not set.

        Raises:
            ValueError: If *key* is empty.
        """
        return self._lookup(key)

    def get_optional_or_fail(self, key: str) -> str:
        """Return the value of *key* or raise :class:`OptionalPropertyNotSetError`."""
        value = self._lookup(key)
        if value is None:
            raise OptionalPropertyNotSetError(key)
        return value

    def get_mandatory(self, key: str) -> str:
        """Return the value of *key* or raise :class:`MandatoryPropertyNotSetError`."""
        value = self._lookup(key)
        if value is None:
            raise MandatoryPropertyNotSetError(key)
        return value


_DEFAULT_ACCESSOR = PropertyAccessor()


# ── Public API ────────────────────────────────────────────────────────────────
def get_optional_property(key: str) -> str | None:
    """Return the environment value of *key*, or None if it is not set."""
    return _DEFAULT_ACCESSOR.get_optional(key)


def get_optional_property_or_fail(key: str) -> str:
    """Return the environment value of *key*; raise OptionalPropertyNotSetError if unset."""
    return _DEFAULT_ACCESSOR.get_optional_or_fail(key)


def get_mandatory_property(key: str) -> str:
    """Return the environment value of *key*; raise MandatoryPropertyNotSetError if unset."""
    return _DEFAULT_ACCESSOR.get_mandatory(key)


def load_env_file(path: Path | str | None = None, *, override: bool = False) -> bool:
    """Seed ``os.environ`` from a .env file (searches CWD and parents if no *path*).

    Returns True if at least one variable was set.
    """
    if path is None:
        path = find_dotenv(usecwd=True)
        if not path:
            return False
    return load_dotenv(dotenv_path=path, override=override)
