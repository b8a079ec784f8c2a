from app.configs.logger import file_logger
from app.configs.settings import Settings, get_settings, settings

__all__ = [
    "Settings",
    "file_logger",
    "get_settings",
    "settings",
]
