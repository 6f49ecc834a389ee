import os
from pydantic import model_validator
from pydantic_settings import BaseSettings
from functools import lru_cache
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "CPU Testing API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "A RESTful API for testing CPU performance and capabilities"
    API_CPU_STR: str = "/api/cpu"
    DOCS_URL: str = "/api-docs"

    # Listener (every worker binds the same port with SO_REUSEPORT)
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    BACKLOG: int = 2048

    # Only shown in the OpenAPI document, falls back to localhost:PORT
    SERVER_URL: str = os.getenv("SERVER_URL", "")

    # 0 = one worker per logical CPU
    WORKERS: int = int(os.getenv("WORKERS", "0"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        case_sensitive = True

    @model_validator(mode="after")
    def _default_server_url(self):
        if not self.SERVER_URL:
            self.SERVER_URL = f"http://localhost:{self.PORT}"
        return self

@lru_cache()
def get_settings():
    return Settings()
