import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(slots=True)
class Config:
    LOG_LEVEL: str = os.getenv("GAMMONMAX_LOG_LEVEL", "INFO")
    # Seconds between CLI event prints
    DELAY: float = float(os.getenv("GAMMONMAX_DELAY", 1.0))
    # Assert position invariants after every move
    DEBUG: bool = _env_bool("GAMMONMAX_DEBUG")
    # 0 = play until someone wins
    MAX_TURNS: int = int(os.getenv("GAMMONMAX_MAX_TURNS", 0))

    def __post_init__(self):
        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        if self.DELAY < 0:
            raise ValueError("GAMMONMAX_DELAY must not be negative")
        if self.MAX_TURNS < 0:
            raise ValueError("GAMMONMAX_MAX_TURNS must not be negative")

    @property
    def max_turns(self):
        return self.MAX_TURNS or None


config = Config()
