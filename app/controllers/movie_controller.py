"""
Movie controller: business logic for listing, retrieving, creating,
updating and deleting movies held in the in-memory store.
"""
# pylint: disable=R0801
from typing import Any, Optional
from uuid import uuid4

from fastapi.responses import JSONResponse

from app.config.database import get_movie_store
from app.utils.logger import get_logger, log_info, log_warning
from app.utils.validation import validate_movie, validate_partial_movie

logger = get_logger(__name__)

NOT_FOUND = {"message": "Movie not found"}


class MovieController:
    """Business logic for movie CRUD operations."""

    @staticmethod
    async def get_movies(genre: Optional[str] = None) -> JSONResponse:
        """
        Retrieve all movies, optionally filtered by genre.

        Args:
            genre: Genre name matched case-insensitively, or None for all

        Returns:
            JSONResponse with the list of movies (possibly empty)
        """
        store = get_movie_store()
        movies = store.list_by_genre(genre) if genre else store.list_all()
        return JSONResponse(status_code=200, content=movies)

    @staticmethod
    async def get_movie_by_id(movie_id: str) -> JSONResponse:
        """
        Retrieve a movie by ID.

        Args:
            movie_id: Movie ID

        Returns:
            JSONResponse with movie data, or 404 if it does not exist
        """
        movie = get_movie_store().get_by_id(movie_id)
        if movie is None:
            return JSONResponse(status_code=404, content=NOT_FOUND)
        return JSONResponse(status_code=200, content=movie)

    @staticmethod
    async def create_movie(payload: Any) -> JSONResponse:
        """
        Validate and store a new movie.

        Args:
            payload: Raw request body

        Returns:
            JSONResponse with the created movie (201), or the validation
            issues (400)

        Raises:
            ValueError: If the store rejects the generated id
        """
        result = validate_movie(payload)
        if not result.success:
            log_warning(logger, "Rejected movie creation", {"issues": len(result.error)})
            return JSONResponse(status_code=400, content={"error": result.error})

        new_movie = {"id": str(uuid4()), **result.data}
        created = get_movie_store().insert(new_movie)

        log_info(logger, f"Movie created: {created['id']}")

        return JSONResponse(status_code=201, content=created)

    @staticmethod
    async def update_movie(movie_id: str, payload: Any) -> JSONResponse:
        """
        Apply a partial update to a movie.

        Args:
            movie_id: Movie ID
            payload: Raw request body with the fields to change

        Returns:
            JSONResponse with the updated movie, 400 on invalid fields,
            404 if the movie does not exist
        """
        result = validate_partial_movie(payload)
        if not result.success:
            log_warning(logger, "Rejected movie update",
                        {"movie_id": movie_id, "issues": len(result.error)})
            return JSONResponse(status_code=400, content={"error": result.error})

        updated = get_movie_store().update_by_id(movie_id, result.data)
        if updated is None:
            return JSONResponse(status_code=404, content=NOT_FOUND)

        log_info(logger, f"Movie updated: {movie_id}", {"fields": sorted(result.data)})

        return JSONResponse(status_code=200, content=updated)

    @staticmethod
    async def delete_movie(movie_id: str) -> JSONResponse:
        """
        Delete a movie by ID.

        Args:
            movie_id: Movie ID

        Returns:
            JSONResponse with deletion confirmation, or 404 if it does not exist
        """
        if not get_movie_store().delete_by_id(movie_id):
            return JSONResponse(status_code=404, content=NOT_FOUND)

        log_info(logger, f"Movie deleted: {movie_id}")

        return JSONResponse(status_code=200, content={"message": "Movie deleted"})
