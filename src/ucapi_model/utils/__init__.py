from .language import text_from_language_map
from .logger_util import get_logger

__all__ = ["get_logger", "text_from_language_map"]
