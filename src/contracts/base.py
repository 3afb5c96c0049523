"""
Base contract models for resource persistence
"""

from typing import Any, Callable, Dict, List, Mapping, Tuple
from pydantic import BaseModel
from enum import Enum

class FieldType(str, Enum):
    """Supported field types in contracts"""
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"


def _is_present(value: Any) -> bool:
    return value is not None


def _is_non_blank(value: Any) -> bool:
    return value is not None and str(value).strip() != ""


# Which values of a field type count as a real change in a partial update
UPDATE_RULES: Dict[FieldType, Callable[[Any], bool]] = {
    FieldType.STRING: _is_non_blank,
    FieldType.NUMBER: _is_present,
    FieldType.INTEGER: _is_present,
}


class ContractField(BaseModel):
    """Field definition within a resource contract"""
    name: str  # API name
    column: str
    type: FieldType
    nullable: bool = False
    writable: bool = True
    primary_key: bool = False


class ResourceContract(BaseModel):
    """Table layout and write rules for a single resource"""
    version: str
    resource: str
    table: str
    fields: List[ContractField]

    @property
    def primary_key(self) -> ContractField:
        pk = next((f for f in self.fields if f.primary_key), None)
        if pk is None:
            raise ValueError(f"Contract for {self.resource} has no primary key")
        return pk

    @property
    def columns(self) -> List[str]:
        return [f.column for f in self.fields]

    @property
    def writable_fields(self) -> List[ContractField]:
        """Fields that may change after creation (never the primary key)"""
        return [f for f in self.fields if f.writable and not f.primary_key]

    def required_field_names(self) -> List[str]:
        return [f.name for f in self.fields if not f.nullable]

    def missing_fields(self, data: Mapping[str, Any]) -> List[str]:
        """API names of required fields that are absent or null in data"""
        return [name for name in self.required_field_names() if data.get(name) is None]

    def patch_assignments(self, patch: Mapping[str, Any]) -> List[Tuple[str, Any]]:
        """
        Filter a column-keyed sparse patch down to the assignments to apply

        Args:
            patch: {column: value} for any subset of columns; None means absent

        Returns:
            [(column, value)] in contract order, keeping only writable fields
            whose value passes the update rule for their type
        """
        assignments = []
        for field in self.writable_fields:
            if field.column not in patch:
                continue
            value = patch[field.column]
            if UPDATE_RULES[field.type](value):
                assignments.append((field.column, value))
        return assignments
