"""Exceptions raised by the movie record operations."""


class MovieServiceError(Exception):
    """Base exception for movie service errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidMovieIdError(MovieServiceError):
    """Raised when the movie ID is missing, zero or not an integer."""

    def __init__(self, message: str = "Missing or invalid movie ID") -> None:
        super().__init__(message, status_code=400)


class MovieNotFoundError(MovieServiceError):
    """Raised when no movie record exists for the requested ID."""

    def __init__(self, movie_id: int) -> None:
        super().__init__(f"Movie with ID {movie_id} not found.", status_code=404)
        self.movie_id = movie_id


class StoreError(MovieServiceError):
    """Raised when a DynamoDB call fails."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, status_code=500)
        self.code = code


class CastTableNotConfiguredError(StoreError):
    """Raised when a cast query is attempted without a cast table."""

    def __init__(self, message: str = "Cast table is not configured") -> None:
        super().__init__(message)
