"""Shared base for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity; changes go through model_copy(update=...).

    Unknown fields are rejected so host loaders cannot smuggle extra state
    into snapshots.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
