"""Reusable base models for tmtop."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Used for values owned by tmtop. Fields must be given with their exact
    types, so a string never silently becomes a vote or a voting power.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
    )

    def copy(self: Self, **kwargs: Any) -> Self:
        """Create a copy of the model with the updated fields that are validated."""
        return self.__class__(**(self.model_dump(exclude_unset=True) | kwargs))


class ResponseModel(BaseModel):
    """
    An immutable, lenient model for decoding remote JSON documents.

    Remote services add fields over time. Unknown keys are ignored rather
    than rejected so that a new node release does not break decoding.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
    )
