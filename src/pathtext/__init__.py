"""pathtext: comma-list splitting, filename escaping and file URI decoding."""

from pathtext.config import PathTextConfig, TransformConfig, get_config, set_config
from pathtext.errors import ConfigError, PathTextError
from pathtext.escaping import FilenameEscaper, escape_filename
from pathtext.platforms import CURRENT_PLATFORM, PlatformFamily
from pathtext.splitter import split_at_comma
from pathtext.uri import decode_uri, encode_uri

__version__ = "0.1.0"

__all__ = [
    "CURRENT_PLATFORM",
    "ConfigError",
    "FilenameEscaper",
    "PathTextConfig",
    "PathTextError",
    "PlatformFamily",
    "TransformConfig",
    "decode_uri",
    "encode_uri",
    "escape_filename",
    "get_config",
    "set_config",
    "split_at_comma",
]
