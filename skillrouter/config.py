"""Environment configuration for the hosting app.

Values come from the process environment, with a ``.env`` file loaded first
when present. The router itself never reads these.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# Empty disables the application id check
SKILL_APPLICATION_ID = os.getenv("SKILL_APPLICATION_ID", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("SKILL_HOST", "0.0.0.0")
PORT = int(os.getenv("SKILL_PORT", "8000"))


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
