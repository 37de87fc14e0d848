# app/routes/movie.py
from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder

from app.database import get_movies_collection
from app.models.booking import BookingRequest, BookingResult
from app.models.movie import MovieCreate
from app.utils.booking import BookingUpdater
from app.utils.exceptions import NotFoundError
from app.utils.logger_config import logger
from app.utils.mongo_utils import convert_objectid_to_str, parse_movie_id

router = APIRouter()


def get_booking_updater(collection=Depends(get_movies_collection)) -> BookingUpdater:
    return BookingUpdater(collection)


@router.get("/get-movies")
async def get_movies(collection=Depends(get_movies_collection)):
    movies = await collection.find({}).to_list(length=None)
    return [jsonable_encoder(convert_objectid_to_str(movie)) for movie in movies]


@router.post("/book-movie", response_model=BookingResult)
async def book_movie(request: BookingRequest, updater: BookingUpdater = Depends(get_booking_updater)):
    return await updater.book(request)


@router.post("/add-movie", status_code=status.HTTP_201_CREATED)
async def add_movie(movie: MovieCreate, collection=Depends(get_movies_collection)):
    movie_data = movie.to_document()
    await collection.insert_one(movie_data)
    logger.info(f"Added movie {movie_data['_id']}")
    return {"message": "Movie added successfully", "movie": jsonable_encoder(convert_objectid_to_str(movie_data))}


# Declared last so the fixed paths above are matched first
@router.get("/{movie_id}")
async def get_movie(movie_id: str, collection=Depends(get_movies_collection)):
    movie = await collection.find_one({"_id": parse_movie_id(movie_id)})
    if not movie:
        raise NotFoundError("Movie not found")
    return jsonable_encoder(convert_objectid_to_str(movie))
