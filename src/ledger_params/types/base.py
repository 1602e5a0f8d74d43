"""Reusable, strict base models for parameter sets."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Fields may declare an alias (the deployed JSON name) and are still
    accepted by their Python name on construction.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )

    def copy(self: Self, **kwargs: Any) -> Self:  # type: ignore[override]
        """Create a copy of the model with the updated fields that are validated."""
        current = {name: getattr(self, name) for name in type(self).model_fields}
        return self.__class__(**(current | kwargs))
