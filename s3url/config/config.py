""" This module defines the configuration a BucketUrl can take its defaults from """
from typing import NamedTuple, Optional

DEFAULT_BUCKET = ""


class StreamWrapperConfiguration(NamedTuple):
    """ StreamWrapperConfiguration holds the settings shared by every URL of a stream wrapper """

    bucket: str = DEFAULT_BUCKET

    @property
    def has_bucket(self) -> bool:
        """ Whether a default bucket is configured """
        return bool(self.bucket)

    def items(self):
        """ Return the dictionary items() method for this object """
        return self._asdict().items()  # pylint: disable=no-member

    def with_mutations(self, **kwargs) -> "StreamWrapperConfiguration":
        """ Returns a new StreamWrapperConfiguration with the modified properties """
        return StreamWrapperConfiguration(bucket=kwargs.get("bucket", self.bucket))


# Stands for "no default bucket"; callers never pass None
EMPTY_CONFIGURATION = StreamWrapperConfiguration()


def get_config(bucket: Optional[str] = None) -> StreamWrapperConfiguration:
    """ Returns a configuration whose default bucket is the given one, if any """
    return StreamWrapperConfiguration(bucket=bucket if bucket is not None else DEFAULT_BUCKET)
