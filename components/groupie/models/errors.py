from enum import StrEnum, auto
from pydantic import BaseModel


class StandardErrorTypes(StrEnum):
    BAD_REQUEST = auto()
    NOT_FOUND = auto()
    UPSTREAM_TRANSPORT = auto()
    UPSTREAM_DECODE = auto()


class StandardError(BaseModel):
    code: int
    type: StandardErrorTypes
    details: dict[str, str] = {}


class GroupieError(Exception):
    """Base for every failure the tracker reports to a caller."""

    code: int = 500
    type: StandardErrorTypes = StandardErrorTypes.UPSTREAM_TRANSPORT

    def __init__(self, message: str, **details: str):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_standard_error(self) -> StandardError:
        return StandardError(
            code=self.code,
            type=self.type,
            details={"message": self.message, **self.details},
        )


class BadRequest(GroupieError):
    code = 400
    type = StandardErrorTypes.BAD_REQUEST


class NotFound(GroupieError):
    code = 404
    type = StandardErrorTypes.NOT_FOUND


class ArtistNotFound(NotFound):
    def __init__(self, key: str | int):
        super().__init__(f"Artist {key!r} not found", artist=str(key))
        self.key = key


class UpstreamError(GroupieError):
    code = 500

    def __init__(self, message: str, url: str, **details: str):
        super().__init__(message, url=url, **details)
        self.url = url


class TransportError(UpstreamError):
    """Upstream could not be reached, or answered with a non-2xx status."""

    type = StandardErrorTypes.UPSTREAM_TRANSPORT

    def __init__(self, message: str, url: str, status_code: int | None = None):
        if status_code is None:
            super().__init__(message, url)
        else:
            super().__init__(message, url, status=str(status_code))
        self.status_code = status_code


class DecodeError(UpstreamError):
    """Upstream body was not JSON, or did not have the expected shape."""

    type = StandardErrorTypes.UPSTREAM_DECODE
