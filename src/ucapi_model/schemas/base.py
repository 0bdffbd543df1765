from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, model_serializer


class WireEnum(str, Enum):
    """Closed enumeration whose member values are the exact wire strings.

    ``str(member)`` returns the wire string and ``Cls("wire_value")`` parses
    it, so the class body is the complete two-way mapping table.
    """

    def __str__(self) -> str:
        return self.value

    @classmethod
    def variant_names(cls) -> List[str]:
        return [member.value for member in cls]


class WireModel(BaseModel):
    """Base model for everything that goes on the wire.

    Optional fields which are not set are left out of the serialized form
    instead of being written as ``null``.
    """

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler) -> Dict[str, Any]:
        data = handler(self)
        fields = type(self).model_fields
        return {k: v for k, v in data.items() if v is not None or k not in fields}

    def to_dict(self) -> Dict[str, Any]:
        """JSON compatible dict of this model."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        return self.model_dump_json()
