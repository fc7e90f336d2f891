import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env into the environment
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """
    Environment-based application settings.
    """
    host: str
    port: int
    log_level: str
    cors_allow_origins: list

    @staticmethod
    def load() -> "Settings":
        host = os.getenv("APP_HOST", "127.0.0.1")
        port_raw = os.getenv("APP_PORT", "8000")
        log_level = os.getenv("LOG_LEVEL", "INFO")
        origins_raw = os.getenv("CORS_ALLOW_ORIGINS", "*")

        try:
            port = int(port_raw)
        except ValueError:
            raise RuntimeError(f"APP_PORT must be an integer, got {port_raw!r}") from None

        origins = [origin.strip() for origin in origins_raw.split(",") if origin.strip()]

        return Settings(
            host=host,
            port=port,
            log_level=log_level.upper(),
            cors_allow_origins=origins or ["*"],
        )


settings = Settings.load()
