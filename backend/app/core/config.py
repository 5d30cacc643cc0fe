import sys
from pathlib import Path

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"

_SAMPLE_DATA = Path(__file__).resolve().parents[1] / "data" / "sample_data.json"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    SEED_DATA_PATH: Path = _SAMPLE_DATA
    SIMULATED_LATENCY_SECONDS: float = 0.5

    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    COMPANY_NAME: str = "Acme Corporation"
    DEFAULT_CURRENCY: str = "USD"

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
