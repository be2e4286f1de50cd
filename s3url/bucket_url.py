""" This module defines BucketUrl, which represents an s3:// stream URL """
from typing import Optional

from multidict import MultiDict
from yarl import URL

from .config import EMPTY_CONFIGURATION, StreamWrapperConfiguration
from .errors import MalformedUrlError
from .logger import logger as log
from .url import S3_DEFAULTS, Query, UrlParts


class BucketUrl:
    """
    BucketUrl wraps a URL whose host names a bucket and whose path, less its
    leading slash, is the key of an object in that bucket
    """

    def __init__(self, url: URL):
        self._url = url

    @classmethod
    def build(
        cls,
        scheme: str = "s3",
        host: str = "",
        user: Optional[str] = None,
        password: Optional[str] = None,
        port: Optional[int] = None,
        path: str = "",
        query: Query = None,
        fragment: str = "",
    ) -> "BucketUrl":
        """ Create a BucketUrl directly from its components """
        return cls(UrlParts(scheme, host, user, password, port, path, query, fragment).to_url())

    @classmethod
    def factory(cls, url: str, config: StreamWrapperConfiguration = EMPTY_CONFIGURATION) -> "BucketUrl":
        """
        Parses the given URL, taking the bucket from config when the URL has
        none. Every other missing component is filled from S3_DEFAULTS

        :param url: the full URL, e.g. s3://bucket/path/to/key
        :param config: the configuration providing the default bucket
        :return: the parsed BucketUrl
        """
        factory_log = log.with_namespace("bucket_url").with_context(url=url)
        try:
            parts = UrlParts.parse(url)
        except MalformedUrlError:
            factory_log.warn("rejecting malformed url")
            raise

        factory_log.debug("parsed url", scheme=parts.scheme, bucket=parts.host, path=parts.path)
        if not parts.host and config.has_bucket:
            factory_log.debug("using default bucket", bucket=config.bucket)

        merged = parts.with_defaults(S3_DEFAULTS._replace(host=config.bucket)).with_structured_query()
        try:
            return cls(merged.to_url())
        except (TypeError, ValueError) as e:
            factory_log.warn("url components were rejected", error=e)
            raise MalformedUrlError(url) from e

    def parts(self) -> UrlParts:
        """ Return the decomposition of this URL """
        return UrlParts.from_url(self._url)

    def _replace(self, **changes):
        self._url = self.parts()._replace(**changes).to_url()

    @property
    def bucket(self) -> str:
        """ The bucket, i.e. the host of the URL exactly as set; empty when there is none """
        return self.parts().host

    @bucket.setter
    def bucket(self, bucket: str):
        self._replace(host=bucket)

    @property
    def key(self) -> str:
        """ The object key, i.e. the path without its leading slash """
        path = self.path
        return path[1:] if path.startswith("/") else path

    @key.setter
    def key(self, key: str):
        # the path always gets exactly one leading slash
        self._replace(path="/" + key.lstrip("/"))

    host = bucket

    @property
    def path(self) -> str:
        """ The decoded path, including its leading slash """
        return self.parts().path

    @path.setter
    def path(self, path: str):
        self._replace(path=path)

    @property
    def scheme(self) -> str:
        """ The scheme, normally s3 """
        return self._url.scheme

    @property
    def user(self) -> Optional[str]:
        """ The decoded user name, or None """
        return self.parts().user

    @property
    def password(self) -> Optional[str]:
        """ The decoded password, or None """
        return self.parts().password

    @property
    def port(self) -> Optional[int]:
        """ The port written in the URL, or None """
        return self._url.explicit_port

    @property
    def query(self) -> MultiDict:
        """ A copy of the query as an ordered multi-mapping """
        return self.parts().structured_query() or MultiDict()

    @property
    def query_string(self) -> str:
        """ The query string as it appears in the URL """
        return self._url.raw_query_string

    @property
    def fragment(self) -> str:
        """ The decoded fragment """
        return self.parts().fragment

    @property
    def url(self) -> str:
        """ Return the URL as a string """
        return str(self._url)

    def __str__(self):
        return self.url

    def __repr__(self):
        return "BucketUrl({!r})".format(self.url)

    def __eq__(self, other):
        if not isinstance(other, BucketUrl):
            return NotImplemented
        return self._url == other._url
