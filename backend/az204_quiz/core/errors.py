"""Error taxonomy shared by the store, the query service and the HTTP layer."""


class QuizError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(QuizError):
    """No question matched (or the store is empty)."""

    status_code = 404


class UpstreamFailure(QuizError):
    """The question store is unreachable or holds malformed data."""

    status_code = 500
