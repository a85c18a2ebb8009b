"""
Models for the result of an image extraction.
"""
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class ImageRecord(BaseModel):
    """
    Images found in a single manifest, in the order they were discovered.
    Serialized with the keys `kind`, `name` and `image`.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    kind: str
    name: str = ""
    images: List[str] = Field(default_factory=list, alias="image")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)
