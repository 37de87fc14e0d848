# app/database.py
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from decouple import config

MONGO_DETAILS = config("MONGO_URI", default="mongodb://localhost:27017")
MONGO_DB_NAME = config("MONGO_DB_NAME", default="movie_db")
MONGO_COLLECTION = config("MONGO_COLLECTION", default="movies")
MONGO_MAX_POOL_SIZE = config("MONGO_MAX_POOL_SIZE", default=100, cast=int)

# One pooled client per process; closed by the app lifespan
client = AsyncIOMotorClient(MONGO_DETAILS, maxPoolSize=MONGO_MAX_POOL_SIZE)
database = client[MONGO_DB_NAME]

movies_collection = database.get_collection(MONGO_COLLECTION)


def get_movies_collection() -> AsyncIOMotorCollection:
    """FastAPI dependency. Hands out the pooled collection without doing any I/O."""
    return movies_collection


def close_client():
    client.close()
