"""
Shared model configuration and ObjectId helpers
"""
from typing import Any, ClassVar, Dict, FrozenSet

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake case attributes, camelCase on the wire and in MongoDB"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)


class PartialUpdateModel(CamelModel):
    """
    Update payload with explicit-presence semantics

    Only fields the client actually sent are applied, so an explicit
    ``false`` or ``0`` replaces the stored value while an omitted field
    leaves it alone. Fields listed in ``NON_NULLABLE`` may be omitted but
    not sent as ``null``.
    """
    NON_NULLABLE: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for name in sorted(self.model_fields_set & self.NON_NULLABLE):
            if getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def to_update_document(self) -> Dict[str, Any]:
        """Return only the supplied fields, keyed by their stored names"""
        return self.model_dump(exclude_unset=True, by_alias=True)


class MessageResponse(BaseModel):
    """Plain message body used for deletes and errors"""
    message: str


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Copy a MongoDB document with every ObjectId rendered as a string"""
    return {
        key: str(value) if isinstance(value, ObjectId) else value
        for key, value in document.items()
    }
