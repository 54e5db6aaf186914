# SPDX-License-Identifier: LGPL-3.0-or-later
# regcodec/config/__init__.py
from .config_loader import DEFAULT_CONFIG, CodecConfig, LoggingConfig, load_config

__all__ = ["DEFAULT_CONFIG", "CodecConfig", "LoggingConfig", "load_config"]
