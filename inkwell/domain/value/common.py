"""Base class for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic import ValidationError as PydanticValidationError

from inkwell.domain.error import ValidationError


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        arbitrary_types_allowed=True,
    )


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    RootValueObject uses Pydantic's RootModel, which means:
    - The model wraps a single value (accessed via .root)
    - model_dump() automatically returns the primitive value, not a dict
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)


V = TypeVar("V", bound=RootValueObject)


def parse_value(cls: type[V], raw: object) -> V:
    """Build a value object, converting validation failures to domain errors.

    Raises:
        ValidationError: With the first validator message
    """
    try:
        return cls(raw)
    except PydanticValidationError as e:
        message = e.errors()[0]["msg"]
        raise ValidationError(message.removeprefix("Value error, "))
