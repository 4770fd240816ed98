from __future__ import annotations
from typing import Annotated, Dict, List, Literal, Union
from pydantic import BaseModel, ConfigDict, Field

UINT64_MAX = 2**64 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class _ValueBase(BaseModel):
    # Frozen models hash by field values, which is what lets any decoded
    # value (containers included) serve as a map key.
    model_config = ConfigDict(frozen=True, ser_json_bytes="base64")


class Nil(_ValueBase):
    kind: Literal["nil"] = "nil"

class Bool(_ValueBase):
    kind: Literal["bool"] = "bool"
    value: bool

class UInt(_ValueBase):
    kind: Literal["uint"] = "uint"
    value: int = Field(..., ge=0, le=UINT64_MAX)

class Int(_ValueBase):
    kind: Literal["int"] = "int"
    value: int = Field(..., ge=INT64_MIN, le=INT64_MAX)

class Float(_ValueBase):
    """IEEE-754 single precision on the wire, held as a Python float."""
    kind: Literal["float"] = "float"
    value: float

class Double(_ValueBase):
    kind: Literal["double"] = "double"
    value: float

class String(_ValueBase):
    kind: Literal["string"] = "string"
    value: str

class Binary(_ValueBase):
    kind: Literal["binary"] = "binary"
    value: bytes

class Extended(_ValueBase):
    kind: Literal["extended"] = "extended"
    type: int = Field(..., ge=-128, le=127)
    data: bytes


class Array(_ValueBase):
    kind: Literal["array"] = "array"
    items: List["Value"] = Field(default_factory=list)

    def __hash__(self) -> int:
        return hash((self.kind, tuple(self.items)))


class Map(_ValueBase):
    """Unordered key/value mapping; two maps are equal regardless of insertion order."""
    kind: Literal["map"] = "map"
    entries: Dict["Value", "Value"] = Field(default_factory=dict)

    def __hash__(self) -> int:
        return hash((self.kind, frozenset(self.entries.items())))

    @classmethod
    def from_pairs(cls, flat: List["Value"]) -> "Map":
        """Build from [k0, v0, k1, v1, ...]; a repeated key keeps its last value."""
        entries: Dict[Value, Value] = {}
        for i in range(0, len(flat) - 1, 2):
            entries[flat[i]] = flat[i + 1]
        return cls(entries=entries)


Value = Annotated[
    Union[Nil, Bool, UInt, Int, Float, Double, String, Binary, Extended, Array, Map],
    Field(discriminator="kind"),
]

Array.model_rebuild()
Map.model_rebuild()
