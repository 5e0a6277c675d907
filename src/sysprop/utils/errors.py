"""Error types raised by property lookups."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sysprop.constants.messages import MANDATORY_NOT_SET, NOT_SET, OPTIONAL_NOT_SET


class PropertyErrorKind(str, Enum):
    OPTIONAL_NOT_SET = "optional_not_set"
    MANDATORY_NOT_SET = "mandatory_not_set"


class PropertyNotSetError(Exception):
    """Raised when a requested property is absent from the store.

    ``kind`` tells the two flavours apart so callers can catch this single
    type and branch on it instead of catching both subclasses. Raised
    directly, it defaults to the mandatory kind unless *kind* is given.
    """

    kind = PropertyErrorKind.MANDATORY_NOT_SET
    template = NOT_SET

    def __init__(self, key: str, kind: Optional[PropertyErrorKind] = None) -> None:
        self.key = key
        if kind is not None:
            self.kind = PropertyErrorKind(kind)
        super().__init__(self.template.format(key=key))

    def __reduce__(self):
        # Rebuild from key/kind; args holds the formatted message
        return type(self), (self.key, self.kind)


class OptionalPropertyNotSetError(PropertyNotSetError, LookupError):
    """Absent optional property; the caller is expected to handle it."""

    kind = PropertyErrorKind.OPTIONAL_NOT_SET
    template = OPTIONAL_NOT_SET


class MandatoryPropertyNotSetError(PropertyNotSetError, RuntimeError):
    """Absent mandatory property; a deployment error that should propagate."""

    kind = PropertyErrorKind.MANDATORY_NOT_SET
    template = MANDATORY_NOT_SET
