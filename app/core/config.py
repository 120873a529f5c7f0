from pydantic.types import SecretStr
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import HttpUrl


def parse_comma_separated_origins(comma_list: str) -> list[HttpUrl]:
    """
    Parse a comma-separated string into a list of validated HttpUrl origins.

    Empty or falsy input returns an empty list. Blank items are skipped.

    Parameters:
        comma_list (str): Comma-separated origins (may be empty).

    Returns:
        list[HttpUrl]: Parsed and validated origins.

    Raises:
        ValueError: If any origin cannot be parsed as an HttpUrl; the message names the offending origin.
    """
    if not comma_list:
        return []
    origins = []
    for origin in comma_list.split(","):
        origin = origin.strip()
        if origin:
            try:
                origins.append(HttpUrl(origin))
            except Exception as e:
                raise ValueError(f"Invalid CORS origin '{origin}': {e}") from e
    return origins


class Settings(BaseSettings):
    DATABASE_URL: str
    SECRET_KEY: SecretStr
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7
    BACKEND_CORS_ORIGINS: str = ""
    FIRST_SUPERUSER_EMAIL: str | None = None
    FIRST_SUPERUSER_PASSWORD: SecretStr = SecretStr("")
    FIRST_SUPERUSER_USERNAME: str = "superadmin"
    ENVIRONMENT: str = "development"

    # The env file is not committed; values there override the defaults above
    model_config = SettingsConfigDict(
        env_file_encoding="utf-8", env_file=".env", extra="ignore"
    )


@lru_cache()
# get_settings.cache_clear() is needed by tests that modify env vars
def get_settings():
    """
    Load application settings from environment variables and the `.env` file.

    Cached: repeated calls return the same Settings instance until the cache is cleared.

    Returns:
        Settings: The populated settings.
    """
    return Settings()
