from groupie.server.config import config
from groupie.log import configure_logging

configure_logging(config.log_level, config.log_file)

from groupie.server.core import app


__all__ = ["app"]
