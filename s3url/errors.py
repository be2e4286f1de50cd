""" This module defines the errors raised by s3url """


class MalformedUrlError(ValueError):
    """ Raised when a string cannot be decomposed into URL components """

    def __init__(self, url: str):
        super().__init__("Was unable to parse malformed url: {}".format(url))
        self.url = url
