"""
In-memory movie store.
Seeded from the JSON fixture at startup; nothing survives a restart.
"""

import json
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from app.models.movie_model import MOVIE_FIELDS, MovieDB
from app.utils.logger import get_logger

logger = get_logger(__name__)

Movie = Dict[str, Any]


def merge_movie(movie: Movie, patch: Dict[str, Any]) -> Movie:
    """
    Merge validated patch fields onto a movie, patch values winning.

    Only known movie fields are copied; `id` is never overwritten.
    """
    merged = dict(movie)
    for field in MOVIE_FIELDS:
        if field in patch:
            merged[field] = patch[field]
    return merged


class MovieStore:
    """
    Owner of the movie collection.

    Records keep insertion order. Lookups are linear scans. Access is not
    synchronized: the store assumes a single worker process serving requests
    from one event loop.
    """

    def __init__(self, records: Iterable[Movie] = ()):
        self._movies: List[Movie] = []
        self.load(records)

    def __len__(self) -> int:
        return len(self._movies)

    def _index_of(self, movie_id: str) -> int:
        for index, movie in enumerate(self._movies):
            if movie["id"] == movie_id:
                return index
        return -1

    def load(self, records: Iterable[Movie]) -> None:
        """Replace the whole collection with the given records."""
        movies = [deepcopy(record) for record in records]
        ids = [movie["id"] for movie in movies]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate movie ids in seed data")
        self._movies = movies

    def load_fixture(self, path: Path) -> int:
        """
        Seed the store from a JSON fixture file.

        Every record goes through full validation before anything is loaded.

        Args:
            path: Path to a JSON array of movies.

        Returns:
            Number of movies loaded.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the JSON is malformed or a record is invalid.
        """
        with open(path, encoding="utf-8") as fixture:
            raw = json.load(fixture)
        if not isinstance(raw, list):
            raise ValueError(f"Movie fixture {path} must contain a JSON array")

        try:
            records = [{"id": movie.id, **movie.model_dump(exclude={"id"})}
                       for movie in (MovieDB.model_validate(item) for item in raw)]
        except ValidationError as e:
            raise ValueError(f"Invalid movie in fixture {path}: {e}") from e

        self.load(records)
        logger.info("Loaded %d movies from %s", len(records), path)
        return len(records)

    def list_all(self) -> List[Movie]:
        """Return every movie in insertion order."""
        return deepcopy(self._movies)

    def list_by_genre(self, genre: str) -> List[Movie]:
        """Return movies having `genre` among their genres, ignoring case."""
        wanted = genre.lower()
        return [deepcopy(movie) for movie in self._movies
                if any(g.lower() == wanted for g in movie["genre"])]

    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        """Return the movie with this id, or None."""
        index = self._index_of(movie_id)
        if index == -1:
            return None
        return deepcopy(self._movies[index])

    def insert(self, movie: Movie) -> Movie:
        """
        Append a validated movie that already carries its id.

        Raises:
            ValueError: If the id is missing or already stored.
        """
        movie_id = movie.get("id")
        if not movie_id:
            raise ValueError("Movie must have an id before insertion")
        if self._index_of(movie_id) != -1:
            raise ValueError(f"Movie id already exists: {movie_id}")
        self._movies.append(deepcopy(movie))
        return deepcopy(movie)

    def update_by_id(self, movie_id: str, patch: Dict[str, Any]) -> Optional[Movie]:
        """Merge `patch` onto the stored movie in place. None if not found."""
        index = self._index_of(movie_id)
        if index == -1:
            return None
        self._movies[index] = merge_movie(self._movies[index], deepcopy(patch))
        return deepcopy(self._movies[index])

    def delete_by_id(self, movie_id: str) -> bool:
        """Remove the movie with this id. False if not found."""
        index = self._index_of(movie_id)
        if index == -1:
            return False
        del self._movies[index]
        return True


movie_store = MovieStore()


def get_movie_store() -> MovieStore:
    """Get the process-wide movie store."""
    return movie_store
