""" Defines pytest fixtures to be used for testing """
import pytest

from s3url.logger import logger
from tests.mocks.config import get_config


@pytest.fixture
def config():
    """ A configuration with a default bucket """
    return get_config()


@pytest.fixture(autouse=True)
def quiet_logger():
    """ Keeps the package logger from writing to stderr during tests """
    logger.set_silence(True)
    yield logger
    logger.set_silence(False)
