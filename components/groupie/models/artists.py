from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class Artist(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    image: str = ""  # Picture URL, passed straight to the page
    name: str
    members: list[str] = []
    creationDate: int = 0
    firstAlbum: str = ""  # Upstream date text, e.g. "14-12-1973"
    locations: str = ""
    concertDates: str = ""

    @field_validator(
        "image", "members", "creationDate", "firstAlbum", "locations", "concertDates",
        mode="before",
    )
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        # Upstream null is the field's empty value, not a broken artist
        if v is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v
