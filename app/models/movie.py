# app/models/movie.py
import uuid
from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator, model_validator

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def normalize_seat_count(value: Any) -> int:
    """Seat counts arrive as ints or numeric strings depending on the client."""
    if isinstance(value, bool):
        raise ValueError("seats must be a whole number")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError("seats must be a whole number")


class Booking(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: NonBlankStr
    email: NonBlankStr
    phone_number: NonBlankStr = Field(alias="phoneNumber")
    seats: int

    @field_validator("seats", mode="before")
    @classmethod
    def validate_seats(cls, v):
        seats = normalize_seat_count(v)
        if seats <= 0:
            raise ValueError("seats must be greater than zero")
        return seats

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class Show(BaseModel):
    # time, screen, price... are stored as sent
    model_config = ConfigDict(extra="allow")

    id: NonBlankStr = Field(default_factory=lambda: str(uuid.uuid4()))
    seats: int
    bookings: List[Booking] = []

    @field_validator("seats", mode="before")
    @classmethod
    def validate_seats(cls, v):
        seats = normalize_seat_count(v)
        if seats < 0:
            raise ValueError("seats cannot be negative")
        return seats


class MovieCreate(BaseModel):
    """Body of POST /movie/add-movie. Title and other metadata pass through untouched."""

    model_config = ConfigDict(extra="allow")

    shows: Dict[str, List[Show]] = {}

    @field_validator("shows")
    @classmethod
    def validate_date_keys(cls, v):
        # date keys become part of dotted update paths
        for date_key in v:
            if not date_key or "." in date_key or date_key.startswith("$"):
                raise ValueError(f"invalid show date key '{date_key}'")
        return v

    @model_validator(mode="after")
    def validate_unique_show_ids(self):
        seen = set()
        for shows in self.shows.values():
            for show in shows:
                if show.id in seen:
                    raise ValueError(f"duplicate show id '{show.id}'")
                seen.add(show.id)
        return self

    def to_document(self) -> Dict[str, Any]:
        document = self.model_dump(by_alias=True)
        # the server owns the identifier
        document.pop("id", None)
        document["_id"] = str(uuid.uuid4())
        return document
