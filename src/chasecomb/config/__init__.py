"""Run configuration and loading."""

from .loader import ConfigLoadError, load_config
from .schema import EnumerationConfig

__all__ = ["ConfigLoadError", "EnumerationConfig", "load_config"]
