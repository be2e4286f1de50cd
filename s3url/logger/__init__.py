""" This module defines the package-wide logger """
import os
import sys

import colorama

from .level import Level
from .logger import Logger

colorama.init()


def get_default_logger() -> Logger:
    """ Creates the s3url logger, writing to stderr at the level named by LOG_LEVEL """

    def print_to_stderr(s: str):
        sys.stderr.write(s + "\n")

    return Logger(namespace="s3url", min_level=Level.from_string(os.environ.get("LOG_LEVEL")), print_fn=print_to_stderr)


logger = get_default_logger()  # pylint: disable=invalid-name
