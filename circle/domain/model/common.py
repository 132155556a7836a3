"""Shared base for Circle entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity loaded from, or about to be written to, the data layer.

    ``from_attributes`` lets repositories validate ORM rows or records
    directly with ``model_validate``.
    """

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        arbitrary_types_allowed=True,
    )
