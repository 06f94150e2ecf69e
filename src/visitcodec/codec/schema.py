"""Wire layout introspection for record models.

This module reads the wire metadata attached by FixedHex/HexText/HexNumber
to each field of a Pydantic record model and exposes the field order and
the shape of every field in the compact string.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple, Type

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from ..models.fields import WireKind


@dataclass(frozen=True)
class FieldSpec:
    """Wire information for a single field.

    Attributes:
        name: Field name
        kind: Wire shape of the encoded field
        width: Encoded width in hex characters (FIXED fields only)
    """

    name: str
    kind: WireKind
    width: Optional[int] = None


class RecordSchema:
    """Wire layout of an entire record model.

    Example:
        >>> schema = RecordSchema.from_model(VisitRecord)
        >>> [field.name for field in schema.fields][:2]
        ['identity_number', 'fullname']
    """

    def __init__(self, model_class: Type[BaseModel]) -> None:
        """Initialize schema from a Pydantic model.

        Args:
            model_class: Pydantic model class to introspect
        """
        self.model_class = model_class
        self.fields: List[FieldSpec] = []
        self._introspect()

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> RecordSchema:
        return _cached_schema(model_class)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(field.name for field in self.fields)

    def _introspect(self) -> None:
        """Introspect the model and populate field specs in declaration order."""
        for field_name, field_info in self.model_class.model_fields.items():
            self.fields.append(self._extract_field_spec(field_name, field_info))

        if not self.fields:
            raise SchemaError(f"{self.model_class.__name__} has no fields")

    @staticmethod
    def _extract_field_spec(name: str, field_info: FieldInfo) -> FieldSpec:
        extra = field_info.json_schema_extra
        if not isinstance(extra, dict) or "wire" not in extra:
            raise SchemaError(f"Field {name} has no wire metadata")

        try:
            kind = WireKind(extra["wire"])
        except ValueError as err:
            raise SchemaError(f"Field {name}: unknown wire kind {extra['wire']!r}") from err

        width = extra.get("width")
        if kind is WireKind.FIXED:
            if not isinstance(width, int) or width <= 0:
                raise SchemaError(f"Field {name}: fixed field requires a positive width")
            return FieldSpec(name=name, kind=kind, width=width)

        return FieldSpec(name=name, kind=kind)


@lru_cache(maxsize=None)
def _cached_schema(model_class: Type[BaseModel]) -> RecordSchema:
    return RecordSchema(model_class)
