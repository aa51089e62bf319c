"""Shared base for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, hashable value compared field by field.

    Hashability lets references serve as dict keys when threads are
    assembled.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
