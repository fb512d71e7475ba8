import os
import logging
from dataclasses import dataclass
from dotenv import find_dotenv, load_dotenv

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"Environment variable '{name}' must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    url: str = "http://localhost:8000"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(find_dotenv(usecwd=True))  # loads .env
        return cls(
            host=os.environ.get("MEETING_FINDER_HOST", cls.host),
            port=_int_env("MEETING_FINDER_PORT", cls.port),
            url=os.environ.get("MEETING_FINDER_URL", cls.url),
            log_level=os.environ.get("MEETING_FINDER_LOG_LEVEL", cls.log_level).upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
