"""
Movie Pydantic models for the movies domain.

Models:
- `MovieBase`: shared fields and their per-field rules
- `MovieCreate`: request model for creating a movie (every field required)
- `MovieUpdate`: fields allowed to update, all optional but never null
- `MovieDB`: stored representation, carries the server-generated id
"""
# pylint: disable=R0801
from __future__ import annotations

from datetime import date
from typing import Annotated, List, Optional

from pydantic import (AfterValidator, BaseModel, ConfigDict, Field, HttpUrl,
                      TypeAdapter, ValidationError, field_validator)

FIRST_FILM_YEAR = 1888
YEAR_MARGIN = 5
DEFAULT_RATE = 5.0

KNOWN_GENRES = (
    "Action",
    "Adventure",
    "Biography",
    "Comedy",
    "Crime",
    "Drama",
    "Fantasy",
    "Horror",
    "Romance",
    "Sci-Fi",
    "Thriller",
)
_CANONICAL_GENRES = {genre.lower(): genre for genre in KNOWN_GENRES}

# Order used when merging a patch onto a stored movie
MOVIE_FIELDS = ("title", "year", "director", "duration", "rate", "poster", "genre")

_url_adapter = TypeAdapter(HttpUrl)


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _not_in_future(value: int) -> int:
    latest = date.today().year + YEAR_MARGIN
    if value > latest:
        raise ValueError(f"Movie year must be {latest} or earlier")
    return value


def _valid_poster(value: str) -> str:
    try:
        _url_adapter.validate_python(value)
    except ValidationError as e:
        raise ValueError("Poster must be a valid URL") from e
    return value


def canonical_genre(value: str) -> str:
    """Return the canonical spelling of a known genre, or the value unchanged."""
    return _CANONICAL_GENRES.get(value.strip().lower(), value)


Text = Annotated[str, Field(strict=True, min_length=1), AfterValidator(_not_blank)]
Year = Annotated[int, Field(strict=True, ge=FIRST_FILM_YEAR), AfterValidator(_not_in_future)]
Duration = Annotated[int, Field(strict=True, gt=0)]
Rate = Annotated[float, Field(strict=True, ge=0, le=10)]
Poster = Annotated[str, Field(strict=True), AfterValidator(_valid_poster)]
GenreName = Annotated[str, Field(strict=True, min_length=1),
                      AfterValidator(_not_blank), AfterValidator(canonical_genre)]
Genres = Annotated[List[GenreName], Field(min_length=1)]


class MovieBase(BaseModel):
    """Shared fields for movies. Unknown input fields are dropped."""

    model_config = ConfigDict(extra="ignore")

    title: Text = Field(..., description="Title of the movie")
    year: Year = Field(..., description="Release year")
    director: Text = Field(..., description="Director of the movie")
    duration: Duration = Field(..., description="Duration in minutes")
    rate: Rate = Field(DEFAULT_RATE, description="Rating from 0 to 10")
    poster: Poster = Field(..., description="URL of the movie poster")
    genre: Genres = Field(..., description="Genres of the movie")


class MovieCreate(MovieBase):
    """Request model used when creating a movie."""


class MovieUpdate(BaseModel):
    """Model for update requests. All fields optional."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[Text] = None
    year: Optional[Year] = None
    director: Optional[Text] = None
    duration: Optional[Duration] = None
    rate: Optional[Rate] = None
    poster: Optional[Poster] = None
    genre: Optional[Genres] = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value):
        """A present field must carry a value; only absence means 'unchanged'."""
        if value is None:
            raise ValueError("must not be null")
        return value


class MovieDB(MovieBase):
    """Stored movie, as seeded from the fixture or created through the API."""

    id: str = Field(..., min_length=1, description="Movie ID")
