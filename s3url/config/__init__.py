from .config import DEFAULT_BUCKET, EMPTY_CONFIGURATION, StreamWrapperConfiguration, get_config
