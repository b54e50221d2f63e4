"""Shareable location: the searched city mirrored into a link's query string."""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

CITY_PARAM = "city"
DEFAULT_BASE_URL = "cityweather://search"


def get_query_param(url: str, name: str) -> str | None:
    """Return the first value of a query parameter, or None."""
    for key, value in parse_qsl(urlsplit(url).query, keep_blank_values=True):
        if key == name:
            return value
    return None


def set_query_param(url: str, name: str, value: str) -> str:
    """Return the URL with one query parameter set, keeping the others."""
    parts = urlsplit(url)
    params = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != name]
    params.append((name, value))
    return urlunsplit(parts._replace(query=urlencode(params)))


class LocationState:
    """In-memory history of shareable links, like a browser's pushState history."""

    def __init__(self, url: str = DEFAULT_BASE_URL):
        self._history: list[str] = [url]
        self._index = 0

    @classmethod
    def from_url(cls, url: str) -> "LocationState":
        return cls(url)

    @property
    def current_url(self) -> str:
        return self._history[self._index]

    @property
    def current_city(self) -> str | None:
        return get_query_param(self.current_url, CITY_PARAM) or None

    @property
    def initial_city(self) -> str | None:
        """City requested by the link the app was started with."""
        return get_query_param(self._history[0], CITY_PARAM) or None

    def push_city(self, city: str) -> str:
        """Record a city as a new history entry and return the new URL."""
        url = set_query_param(self.current_url, CITY_PARAM, city)
        del self._history[self._index + 1 :]
        self._history.append(url)
        self._index += 1
        return url

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return self._index < len(self._history) - 1

    def back(self) -> str | None:
        """Step back in history and return the city of that entry."""
        if not self.can_go_back:
            return None
        self._index -= 1
        return self.current_city

    def forward(self) -> str | None:
        """Step forward in history and return the city of that entry."""
        if not self.can_go_forward:
            return None
        self._index += 1
        return self.current_city
