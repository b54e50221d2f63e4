"""View state driving what the weather panel shows."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .weather import SearchResult


class ViewKind(str, Enum):
    """The mutually exclusive views of the weather panel."""

    IDLE = "idle"
    LOADING = "loading"
    CONTENT = "content"
    EMPTY = "empty"
    ERROR = "error"


DEFAULT_ERROR_MESSAGE = "Unable to fetch weather data"


class ViewState(BaseModel):
    """The single value a render function consumes."""

    model_config = ConfigDict(frozen=True)

    kind: ViewKind = ViewKind.IDLE
    city: str = ""
    message: str = ""
    result: SearchResult | None = None

    @classmethod
    def idle(cls) -> "ViewState":
        return cls(kind=ViewKind.IDLE)

    @classmethod
    def loading(cls, city: str) -> "ViewState":
        return cls(kind=ViewKind.LOADING, city=city)

    @classmethod
    def content(cls, result: SearchResult) -> "ViewState":
        return cls(kind=ViewKind.CONTENT, city=result.city, result=result)

    @classmethod
    def empty(cls) -> "ViewState":
        return cls(kind=ViewKind.EMPTY)

    @classmethod
    def error(cls, message: str) -> "ViewState":
        return cls(kind=ViewKind.ERROR, message=message or DEFAULT_ERROR_MESSAGE)
