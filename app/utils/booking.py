# app/utils/booking.py
from typing import Any, Dict, NamedTuple, Optional

from pymongo.errors import PyMongoError

from app.models.booking import BookingRequest, BookingResult
from app.models.movie import normalize_seat_count
from app.utils.exceptions import (
    BookingUpdateFailedError,
    NotFoundError,
    SeatsUnavailableError,
    StoreError,
)
from app.utils.logger_config import logger


class ShowLocation(NamedTuple):
    date_key: str
    index: int
    show: Dict[str, Any]

    @property
    def path(self) -> str:
        return f"shows.{self.date_key}.{self.index}"


def locate_show(movie: Dict[str, Any], show_id: str) -> Optional[ShowLocation]:
    """
    Find a show by id across every date of a movie document.

    Dates are walked in stored order and the first match wins.
    """
    shows = movie.get("shows") or {}
    for date_key, date_shows in shows.items():
        for index, show in enumerate(date_shows or []):
            if isinstance(show, dict) and show.get("id") == show_id:
                return ShowLocation(date_key, index, show)
    return None


def build_booking_update(location: ShowLocation, stored_seats: Any, requested: int, booking: Dict[str, Any]):
    """
    Build the filter/update pair for one conditional decrement-and-append.

    An integer seat count is decremented with ``$inc`` only while it still
    covers the request. A legacy string count is replaced by the new integer
    only if it still holds the exact value that was read.
    """
    seats_path = f"{location.path}.seats"
    condition: Dict[str, Any] = {f"{location.path}.id": location.show["id"]}
    update: Dict[str, Any] = {"$push": {f"{location.path}.bookings": booking}}

    if isinstance(stored_seats, int) and not isinstance(stored_seats, bool):
        condition[seats_path] = {"$gte": requested}
        update["$inc"] = {seats_path: -requested}
    else:
        condition[seats_path] = stored_seats
        update["$set"] = {seats_path: normalize_seat_count(stored_seats) - requested}
    return condition, update


class BookingUpdater:
    """Books seats on a show with a single conditional write against the movies collection."""

    # re-reads allowed after losing a compare-and-set on a string seat count
    MAX_COMPARE_AND_SET_ATTEMPTS = 5

    def __init__(self, collection):
        self.collection = collection

    async def book(self, request: BookingRequest) -> BookingResult:
        movie_key = request.movie_key
        logger.info(f"Booking {request.seats} seat(s) on show {request.show_id} of movie {request.movie_id}")

        for attempt in range(1, self.MAX_COMPARE_AND_SET_ATTEMPTS + 1):
            modified, guarded = await self._try_book(request, movie_key)
            if modified:
                return BookingResult(message="Booking created successfully")
            if guarded:
                break
            logger.warning(f"Seat count of show {request.show_id} changed during attempt {attempt}, re-reading")

        raise BookingUpdateFailedError()

    async def _try_book(self, request: BookingRequest, movie_key):
        """Run one read-check-write cycle. Returns (modified, used the guarded $inc)."""
        try:
            movie = await self.collection.find_one({"_id": movie_key})
        except PyMongoError as exc:
            raise StoreError() from exc
        if not movie:
            raise NotFoundError("Requested movie is not found")

        location = locate_show(movie, request.show_id)
        if location is None:
            raise NotFoundError("Show not found")
        logger.debug(f"Located show {request.show_id} at {location.path}")

        if location.date_key.startswith("$") or "." in location.date_key:
            raise BookingUpdateFailedError(f"Show date '{location.date_key}' cannot be addressed")

        stored_seats = location.show.get("seats")
        try:
            available = normalize_seat_count(stored_seats)
        except ValueError:
            raise BookingUpdateFailedError(f"Show {request.show_id} has an unreadable seat count")

        if available < request.seats:
            raise SeatsUnavailableError()

        condition, update = build_booking_update(
            location, stored_seats, request.seats, request.to_booking().to_document()
        )
        condition["_id"] = movie_key

        try:
            result = await self.collection.update_one(condition, update)
        except PyMongoError as exc:
            raise StoreError() from exc
        logger.info(f"Update result for show {request.show_id}: modified={result.modified_count}")

        return result.modified_count > 0, "$inc" in update
