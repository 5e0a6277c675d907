"""Read environment properties as optional or mandatory values."""

from sysprop.utils.env_utils import (
    PropertyAccessor,
    get_mandatory_property,
    get_optional_property,
    get_optional_property_or_fail,
    load_env_file,
)
from sysprop.utils.errors import (
    MandatoryPropertyNotSetError,
    OptionalPropertyNotSetError,
    PropertyErrorKind,
    PropertyNotSetError,
)

__all__ = [
    "MandatoryPropertyNotSetError",
    "OptionalPropertyNotSetError",
    "PropertyAccessor",
    "PropertyErrorKind",
    "PropertyNotSetError",
    "get_mandatory_property",
    "get_optional_property",
    "get_optional_property_or_fail",
    "load_env_file",
]
