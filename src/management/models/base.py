"""Base model shared by every Management API record."""
from typing import Any, Dict, Iterable, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict

ModelT = TypeVar("ModelT", bound="ManagementModel")


class ManagementModel(BaseModel):
    """Record with tri-state fields.

    A field is either unset (never assigned, never sent), set to None (sent as
    null) or set to a value. pydantic tracks the first state in
    ``model_fields_set``, so encoding drops everything the caller did not touch.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def decode(cls: Type[ModelT], data: Any) -> ModelT:
        """Build a record from a decoded JSON value."""
        return cls.model_validate(data)

    def encode(self) -> Dict[str, Any]:
        """Return the JSON-ready payload with wire names and unset fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def merge(
        self: ModelT, source: ModelT, fields: Optional[Iterable[str]] = None
    ) -> ModelT:
        """Copy fields that are set on source onto this record, in place.

        Args:
            source: Record to copy from, usually a decoded server echo
            fields: Restrict the copy to these attribute names

        Returns:
            This record
        """
        names = source.model_fields_set if fields is None else fields
        for name in names:
            if name in source.model_fields_set:
                setattr(self, name, getattr(source, name))
        return self
