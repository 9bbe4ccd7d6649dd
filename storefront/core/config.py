import os
from dotenv import load_dotenv

load_dotenv()

TRUTHY = {"1", "true", "yes", "on"}


def env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


class Settings:
    """Runtime settings read from the environment (and an optional .env file)."""

    def __init__(self, **overrides):
        self.APP_NAME: str = os.getenv("APP_NAME", "Storefront REST API")
        self.APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")
        self.API_PREFIX: str = os.getenv("API_PREFIX", "/api/v1")
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "3000"))
        self.CORS_ORIGINS: list = [
            origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
        ]
        self.RATE_LIMIT_WINDOW_SECONDS: int = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "900"))  # 15 minutes
        self.RATE_LIMIT_MAX_REQUESTS: int = int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "100"))
        self.SEED_DATA: bool = env_bool("SEED_DATA", True)
        self.STRICT_ORDER_STATUS: bool = env_bool("STRICT_ORDER_STATUS", False)

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)

    @property
    def rate_limit_enabled(self) -> bool:
        return self.RATE_LIMIT_MAX_REQUESTS > 0


settings = Settings()
