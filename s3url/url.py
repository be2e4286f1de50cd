""" This module defines methods to decompose URLs and merge them with defaults """
from typing import Mapping, NamedTuple, Optional, Union
from urllib.parse import parse_qsl, quote, unquote, urlencode

from multidict import MultiDict
from yarl import URL

from .errors import MalformedUrlError

Query = Union[str, Mapping[str, str], None]


def _missing(value) -> bool:
    return value is None or value == ""


def _unquote(value: Optional[str]) -> Optional[str]:
    return None if value is None else unquote(value)


def raw_host(url: URL) -> str:
    """
    Returns the host exactly as it is written in the URL's authority. yarl's own
    host accessors lowercase it, which would not leave bucket names intact
    """
    hostinfo = url.raw_authority.rpartition("@")[2]
    if hostinfo.startswith("["):
        return hostinfo[1:].partition("]")[0]
    return hostinfo.partition(":")[0]


class UrlParts(NamedTuple):
    """ UrlParts is a decomposition of a URL into the components a URL can be built from """

    scheme: str = ""
    host: str = ""
    user: Optional[str] = None
    password: Optional[str] = None
    port: Optional[int] = None
    path: str = ""
    # either the raw query string, as parsed, or a structured multi-mapping
    query: Query = None
    fragment: str = ""

    @property
    def url(self) -> str:
        """ Return the URL the components describe """
        return str(self.to_url())

    def items(self):
        """ Return the dictionary items() method for this object """
        return self._asdict().items()  # pylint: disable=no-member

    @staticmethod
    def from_url(url: URL) -> "UrlParts":
        """ Decompose a yarl URL, percent-decoding every component but the query """
        return UrlParts(
            scheme=url.scheme,
            host=unquote(raw_host(url)),
            user=_unquote(url.raw_user),
            password=_unquote(url.raw_password),
            port=url.explicit_port,
            path=unquote(url.raw_path),
            query=url.raw_query_string or None,
            fragment=unquote(url.raw_fragment),
        )

    @staticmethod
    def parse(url: str) -> "UrlParts":
        """
        Parse a URL string of the form [scheme:][//[user[:pass]@]host[:port]]/path[?query][#fragment].
        The string is taken as already percent-encoded and the query is kept as the raw string;
        see with_structured_query. Raises MalformedUrlError when the string holds whitespace,
        has no path starting with "/" (after the scheme, if any), or is rejected by the URL parser
        """
        try:
            parsed = URL(url, encoded=True)
            parts = UrlParts.from_url(parsed)
        except (TypeError, ValueError) as e:
            raise MalformedUrlError(url) from e

        remainder = url.partition(":")[2] if parsed.scheme else url
        if any(c.isspace() for c in url) or not remainder.startswith("/"):
            raise MalformedUrlError(url)
        return parts

    def with_defaults(self, defaults: "UrlParts") -> "UrlParts":
        """ Fill every component that is None or empty from defaults; present components win """
        return UrlParts(
            *(default if _missing(value) else value for value, default in zip(self, defaults))
        )

    def structured_query(self) -> Optional[MultiDict]:
        """ The query as an ordered multi-mapping, or None when there is no query """
        if _missing(self.query):
            return None
        if isinstance(self.query, str):
            return MultiDict(parse_qsl(self.query, keep_blank_values=True))
        return MultiDict(self.query)

    def with_structured_query(self) -> "UrlParts":
        """ Returns a copy whose query is an ordered multi-mapping (or None) """
        return self._replace(query=self.structured_query())

    def to_url(self) -> URL:
        """
        Build a yarl URL from the components; raises ValueError if yarl refuses them.
        Components are quoted here and handed over encoded, so yarl neither lowercases
        the host nor collapses "." and ".." segments of the path
        """
        kwargs = dict(
            scheme=self.scheme or "",
            host=quote(self.host or "", safe=""),
            path=quote(self.path or "", safe="/"),
            fragment=quote(self.fragment or "", safe=""),
            encoded=True,
        )
        if not _missing(self.user):
            kwargs["user"] = quote(self.user, safe="")
        if not _missing(self.password):
            kwargs["password"] = quote(self.password, safe="")
        if self.port is not None:
            kwargs["port"] = self.port
        query = self.structured_query()
        if query:
            kwargs["query_string"] = urlencode(list(query.items()), quote_via=quote)
        return URL.build(**kwargs)


S3_DEFAULTS = UrlParts(scheme="s3")
