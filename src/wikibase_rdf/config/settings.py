import logging
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    wikibase_api_url: str = "https://www.wikidata.org/w/api.php"
    http_timeout: float = 30.0
    user_agent: str = "WikibasePropertyTypes/1.0 (https://www.wikidata.org/wiki/Wikidata:Tools)"
    property_types_snapshot: Optional[Path] = None
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "PROPERTY_TYPES_"


# noinspection PyArgumentList
settings = Settings()

logger.debug(f"Wikibase API URL: {settings.wikibase_api_url}")
logger.debug(f"HTTP timeout: {settings.http_timeout}")
logger.debug(f"Property types snapshot: {settings.property_types_snapshot or 'bundled'}")
