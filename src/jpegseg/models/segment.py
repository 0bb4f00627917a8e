from __future__ import annotations
from pydantic import BaseModel, ConfigDict, field_serializer, field_validator, model_validator
from .common import Marker

class Segment(BaseModel):
    model_config = ConfigDict(frozen=True, ser_json_bytes="hex", val_json_bytes="hex")

    marker: Marker
    payload: bytes | None = None

    @field_validator("marker", mode="before")
    @classmethod
    def _marker_from_name(cls, v):
        # JSON form carries the enum name
        if isinstance(v, str):
            try:
                return Marker[v]
            except KeyError:
                raise ValueError(f"unknown marker name {v!r}") from None
        return v

    @model_validator(mode="after")
    def _payload_matches_marker(self) -> "Segment":
        if self.marker.standalone and self.payload is not None:
            raise ValueError(f"{self.marker.display_name} segments carry no payload")
        if not self.marker.standalone and self.payload is None:
            raise ValueError(f"{self.marker.display_name} segments require a payload")
        return self

    @field_serializer("marker", when_used="json")
    def _marker_name(self, marker: Marker) -> str:
        return marker.name

    @property
    def size(self) -> int:
        """Bytes occupied on the wire: marker, length field and payload."""
        if self.payload is None:
            return 2
        return 4 + len(self.payload)

    def summary(self) -> str:
        data = "None" if self.payload is None else f"{len(self.payload)} bytes"
        return f"{{ marker : {self.marker.display_name}, data : {data} }}"
