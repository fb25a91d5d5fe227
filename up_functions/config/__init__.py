from .default_config import DEFAULT_CONFIG
from .settings import Settings, get_settings

__all__ = ["DEFAULT_CONFIG", "Settings", "get_settings"]
