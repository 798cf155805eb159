import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_REPORT_DIR = "reports"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    report_dir: str = DEFAULT_REPORT_DIR
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(env_path=None):
    """Reads settings from the environment, after loading ``.env`` if present.

    Variables already set in the environment win over the .env file.
    """
    load_dotenv(env_path)
    return Settings(
        report_dir=os.getenv("WEARABLE_REPORT_DIR", DEFAULT_REPORT_DIR),
        log_level=os.getenv("WEARABLE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
