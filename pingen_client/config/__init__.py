from .logger import setup_logger, setup_logger_from_settings


__all__ = ["setup_logger", "setup_logger_from_settings"]
