import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

# Load variables from .env file
load_dotenv()


@dataclass(frozen=True)
class Settings:
    PROJECT_NAME: str = "QuillQuest"
    VERSION: str = "1.0.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Venice.ai (empty key means every call fails authentication)
    VENICE_API_KEY: str = ""
    VENICE_API_URL: str = "https://api.venice.ai"
    VENICE_TEXT_MODEL: str = "llama-3.3-70b"
    VENICE_IMAGE_MODEL: str = "fluently-xl"
    VENICE_TIMEOUT: float = 120.0

    # Logging
    LOG_LEVEL: str = "INFO"
    # Relative to the working directory the server is started from
    LOG_DIR: Path = Path("logs")

    @classmethod
    def from_env(cls) -> "Settings":
        """Read the process environment once. Values never change afterwards."""
        return cls(
            HOST=os.getenv("HOST", cls.HOST),
            PORT=int(os.getenv("PORT", str(cls.PORT))),
            VENICE_API_KEY=os.getenv("VENICE_API_KEY", ""),
            VENICE_API_URL=os.getenv("VENICE_API_URL", cls.VENICE_API_URL).rstrip("/"),
            VENICE_TEXT_MODEL=os.getenv("VENICE_TEXT_MODEL", cls.VENICE_TEXT_MODEL),
            VENICE_IMAGE_MODEL=os.getenv("VENICE_IMAGE_MODEL", cls.VENICE_IMAGE_MODEL),
            VENICE_TIMEOUT=float(os.getenv("VENICE_TIMEOUT", str(cls.VENICE_TIMEOUT))),
            LOG_LEVEL=os.getenv("LOG_LEVEL", cls.LOG_LEVEL).upper(),
            LOG_DIR=Path(os.getenv("QUILLQUEST_LOG_DIR", str(cls.LOG_DIR))),
        )


settings = Settings.from_env()
