from typing import List, Optional

from pydantic import BaseModel, field_validator


class SegmentEntry(BaseModel):
    name: str
    length_km: float
    status: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError("segment name must not be blank")
        return v


class NetworkInventory(BaseModel):
    network_id: str
    region: Optional[str] = None
    segments: List[SegmentEntry] = []
