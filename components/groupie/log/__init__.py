from groupie.log.core import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
