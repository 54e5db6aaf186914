# regcodec/core/__init__.py
from .exceptions import ConfigError, InvalidEncoding, RegCodecError, UnsupportedType
from .logger import Log

__all__ = ["ConfigError", "InvalidEncoding", "RegCodecError", "UnsupportedType", "Log"]
