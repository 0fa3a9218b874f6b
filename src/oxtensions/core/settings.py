from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings
from rich import print

from oxtensions.adapters.logging_adapter import LoggingAdapter
from oxtensions.core.interfaces.logging import LoggingPort

# using pydantic_settings to manage environment variables
# and do automatic type casting in a central place
class OxtensionsSettings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }
    OX_LOG_LEVEL: str = "INFO"
    # Defaults for TenacityRetryAdapter when no explicit RetryPolicy is given
    OX_RETRY_MAX_ATTEMPTS: int = Field(default=3, ge=1)
    OX_RETRY_DELAY_SECONDS: Optional[float] = Field(default=None, ge=0)

    def print_settings(self, logger: LoggingPort):
        """Prints the settings for debugging purposes"""
        logger.info("Oxtensions Settings:")
        print(self)


app_settings = OxtensionsSettings()

logger = LoggingAdapter("oxtensions", app_settings.OX_LOG_LEVEL)
