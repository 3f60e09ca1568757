"""Root theme configuration model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ThemeConfiguration(BaseModel):
    """A validated theme configuration.

    Slices are kept exactly as supplied so components see the original
    values, including callables from programmatic configuration.

    Attributes:
        components: Component id to configuration slice, in document order.
        ignored: Ids in the document that name no registered component.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    components: dict[str, Any] = Field(default_factory=dict)
    ignored: tuple[str, ...] = ()

    @property
    def component_ids(self) -> list[str]:
        return list(self.components)
