""" s3url represents s3://bucket/key stream URLs on top of yarl """
from .__version__ import __version__
from .bucket_url import BucketUrl
from .config import EMPTY_CONFIGURATION, StreamWrapperConfiguration, get_config
from .errors import MalformedUrlError
from .url import S3_DEFAULTS, UrlParts
