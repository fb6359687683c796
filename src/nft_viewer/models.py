"""Models for records returned by the random NFT endpoint.

Field names are snake_case in Python; the upstream camelCase keys are kept
as aliases so a record dumps back to the shape it was received in. Unknown
upstream keys are preserved for the same reason.
"""
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

SVG_DATA_URI_PREFIX = "data:image/svg+xml;base64,"
JSON_DATA_URI_PREFIX = "data:application/json;base64,"


class MalformedResponseError(ValueError):
    """The upstream payload does not have the expected record shape."""


class NftAttribute(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    trait_type: str = Field(..., description="Trait name, e.g. ColorSet")
    value: Union[int, float, str] = Field(..., description="Trait value")


class NftData(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    seed: int = Field(..., description="Generation seed")
    base_egg_number: int = Field(..., alias="baseEggNumber", description="Base egg number")
    image_base64: Optional[str] = Field(None, alias="imageBase64", description="SVG image as a data URI")
    json_base64: Optional[str] = Field(None, alias="jsonBase64", description="JSON metadata as a data URI")
    attributes: List[NftAttribute] = Field(default_factory=list, description="Ordered trait list")


class NftRecord(BaseModel):
    """One record as returned by the API for a single request."""

    model_config = ConfigDict(frozen=True, extra="allow")

    status: str = Field(..., description="Upstream status string")
    data: NftData

    @classmethod
    def from_payload(cls, payload: Any) -> "NftRecord":
        """Validate a decoded JSON payload, raising MalformedResponseError on mismatch."""
        try:
            return cls.model_validate(payload)
        except ValidationError as ex:
            raise MalformedResponseError(f"malformed upstream response: {ex}") from ex

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SaveResult(BaseModel):
    """Outcome of one save_nft_files call."""

    success: bool
    svg_path: Optional[Path] = None
    json_path: Optional[Path] = None
    raw_path: Optional[Path] = None
    error: Optional[str] = None
