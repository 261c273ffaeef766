from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	RATES_URL: str = 'https://balance-server.appspot.com/exchangeRates'
	SNAPSHOT_PATH: str = './data/currentExchangeRates.data'

	# Refresh
	FETCH_TIMEOUT: float = 15.0
	REFRESH_INTERVAL: int = 300

	# Conversion
	MAX_HOPS: int = 5
	DEFAULT_SOURCE: int = 3

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str = 'logs'
	LOG_TO_FILE: bool = False

	# Application
	APP_NAME: str = 'Exchange Rate Engine'
	DEBUG: bool = True

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
