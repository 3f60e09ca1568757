"""Shared types for theme configuration schemas.

Slices are validated but not converted: components receive the original
mapping, so values such as guards keep their raw form (a boolean, a
``{"query": ...}`` reference or a Python callable) and are resolved by
the component at the point of use.
"""

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict

from themecore.domain.value_objects import (
    CallableValue,
    DeferredValue,
    StaticValue,
    is_deferred_reference,
)


def _check_guard(value: Any) -> Any:
    if isinstance(value, (bool, StaticValue, DeferredValue, CallableValue)):
        return value
    if callable(value) or is_deferred_reference(value):
        return value
    raise ValueError(
        "must be a boolean, a callable or a {'query': name, 'args': [...]} reference"
    )


def _check_callback(value: Any) -> Any:
    if isinstance(value, str) or callable(value):
        return value
    raise ValueError("must be a host function name or a callable")


def _check_dynamic(value: Any) -> Any:
    if isinstance(value, (str, StaticValue, DeferredValue, CallableValue)):
        return value
    if callable(value) or is_deferred_reference(value):
        return value
    raise ValueError("must be a string, a callable or a {'query': ...} reference")


# Guard predicate: literal boolean, deferred host query or Python callable
GuardValue = Annotated[Any, AfterValidator(_check_guard)]

# Hook callback: name of a host function or a Python callable
CallbackValue = Annotated[Any, AfterValidator(_check_callback)]

# Markup that may be computed when it is rendered
DynamicString = Annotated[Any, AfterValidator(_check_dynamic)]


class SliceModel(BaseModel):
    """Base for component configuration models.

    Unknown keys are rejected so that typos in capability keys surface at
    load time instead of silently disabling a capability.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)


class OpenEntryModel(BaseModel):
    """Base for entries whose extra keys are passed through to the host."""

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)
