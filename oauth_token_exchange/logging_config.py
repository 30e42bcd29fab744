import logging
from typing import Optional

from oauth_token_exchange.config import Settings, get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(settings: Optional[Settings] = None) -> int:
    """
    Configure root logging for applications embedding the package
    Returns the level that was applied
    """
    if settings is None:
        settings = get_settings()

    level = logging.DEBUG if settings.ENABLE_DEBUG_LOGGING else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
    return level
