from dataclasses import dataclass
import os

@dataclass
class Config:
    # HTTP server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Task collection file (created empty on first boot)
    TASKS_FILE: str = os.getenv("TASKS_FILE", "./tasks.json")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")    # empty = console only

    # Browser clients
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # Task events kept in memory for GET /events
    EVENT_LOG_SIZE: int = int(os.getenv("EVENT_LOG_SIZE", "2000"))

CONFIG = Config()
