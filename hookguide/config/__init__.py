from .logging import get_logger, setup_logging  # noqa: F401
from .settings import Settings, settings  # noqa: F401
