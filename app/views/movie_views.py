"""
FastAPI views for movie endpoints.

Endpoints:
 - GET /movies                  -> list movies, optional ?genre= filter
 - GET /movies/{id}             -> get movie by ID
 - POST /movies                 -> create movie
 - PATCH /movies/{id}           -> partially update movie by ID
 - DELETE /movies/{id}          -> delete movie by ID

Bodies are taken as raw JSON so that validation failures are reported by
the controller in the API's own error format.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Query
from fastapi.responses import JSONResponse

from app.controllers.movie_controller import MovieController
from app.utils.logger import get_logger, log_info, log_error

logger = get_logger(__name__)

router = APIRouter()


def _failure(action: str, error: Exception) -> JSONResponse:
    log_error(logger, f"{action} endpoint error", {"error": str(error)})
    return JSONResponse(
        status_code=500,
        content={"message": f"Failed to {action.replace('_', ' ')}", "error": str(error)}
    )


@router.get("/movies", response_class=JSONResponse)
async def get_movies(
    genre: Optional[str] = Query(None, description="Filter by genre, case-insensitive")
) -> JSONResponse:
    """
    Get all movies.

    Args:
        genre: Optional genre filter

    Returns:
        JSONResponse with movies list
    """
    try:
        return await MovieController.get_movies(genre)
    except RuntimeError as e:
        return _failure("get_movies", e)


@router.get("/movies/{movie_id}", response_class=JSONResponse)
async def get_movie(movie_id: str) -> JSONResponse:
    """
    Get a movie by ID.

    Args:
        movie_id: Movie ID

    Returns:
        JSONResponse with movie data
    """
    try:
        return await MovieController.get_movie_by_id(movie_id)
    except RuntimeError as e:
        return _failure("get_movie", e)


@router.post("/movies", response_class=JSONResponse)
async def create_movie(payload: Any = Body(None)) -> JSONResponse:
    """
    Create a new movie.

    Args:
        payload: Movie fields; unknown fields are ignored

    Returns:
        JSONResponse with created movie
    """
    try:
        log_info(logger, "Creating movie")
        return await MovieController.create_movie({} if payload is None else payload)
    except (RuntimeError, ValueError) as e:
        return _failure("create_movie", e)


@router.patch("/movies/{movie_id}", response_class=JSONResponse)
async def update_movie(movie_id: str, payload: Any = Body(None)) -> JSONResponse:
    """
    Update some fields of a movie.

    Args:
        movie_id: Movie ID
        payload: Fields to update

    Returns:
        JSONResponse with updated movie
    """
    try:
        log_info(logger, f"Updating movie: {movie_id}")
        return await MovieController.update_movie(movie_id, {} if payload is None else payload)
    except (RuntimeError, ValueError) as e:
        return _failure("update_movie", e)


@router.delete("/movies/{movie_id}", response_class=JSONResponse)
async def delete_movie(movie_id: str) -> JSONResponse:
    """
    Delete a movie by ID.

    Args:
        movie_id: Movie ID

    Returns:
        JSONResponse with deletion confirmation
    """
    try:
        log_info(logger, f"Deleting movie: {movie_id}")
        return await MovieController.delete_movie(movie_id)
    except RuntimeError as e:
        return _failure("delete_movie", e)
