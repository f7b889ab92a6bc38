from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	API_BASE_URL: str = 'https://api.frankfurter.app'

	# Remote calls
	REQUEST_TIMEOUT_SECONDS: float = 10.0
	CATALOG_MAX_ATTEMPTS: int = 3
	CATALOG_BACKOFF_SECONDS: float = 1.0

	# Widget behaviour
	AUTO_CONVERT_DELAY_SECONDS: float = 0.5
	ERROR_DISPLAY_SECONDS: float = 5.0
	INSIGHT_WINDOW_DAYS: int = 7
	DEFAULT_FROM: str = 'USD'
	DEFAULT_TO: str = 'EUR'
	DEFAULT_AMOUNT: str = '100'

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
