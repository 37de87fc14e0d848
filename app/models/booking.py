# app/models/booking.py
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.movie import Booking, NonBlankStr, normalize_seat_count
from app.utils.exceptions import ValidationError
from app.utils.mongo_utils import MovieKey, parse_movie_id


class BookingRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    movie_id: NonBlankStr = Field(alias="movieId")
    show_id: NonBlankStr = Field(alias="showId")
    seats: int
    name: NonBlankStr
    email: NonBlankStr
    phone_number: NonBlankStr = Field(alias="phoneNumber")

    @field_validator("movie_id")
    @classmethod
    def validate_movie_id(cls, v):
        try:
            parse_movie_id(v)
        except ValidationError as exc:
            raise ValueError(exc.message)
        return v

    @field_validator("seats", mode="before")
    @classmethod
    def validate_seats(cls, v):
        seats = normalize_seat_count(v)
        if seats <= 0:
            raise ValueError("Invalid seat count")
        return seats

    @property
    def movie_key(self) -> MovieKey:
        return parse_movie_id(self.movie_id)

    def to_booking(self) -> Booking:
        return Booking(
            name=self.name,
            email=self.email,
            phone_number=self.phone_number,
            seats=self.seats,
        )


class BookingResult(BaseModel):
    message: str
