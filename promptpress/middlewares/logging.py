# promptpress/middlewares/logging.py

import logging
import sys
import requests
from promptpress.core.config import settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


class BetterStackHandler(logging.Handler):
    """Ships formatted records to BetterStack. Never raises into the caller."""

    def __init__(self, api_key: str, host: str = settings.BETTERSTACK_HOST):
        super().__init__()
        self.api_key = api_key
        self.host = host

    def emit(self, record):
        log_entry = self.format(record)
        try:
            response = requests.post(
                self.host,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.api_key}",
                },
                json={
                    "dt": record.created,
                    "level": record.levelname,
                    "message": log_entry,
                },
                timeout=3,
            )
            if response.status_code not in (200, 202):
                sys.stderr.write(f"❌ BetterStack logging failed: {response.text}\n")
        except requests.RequestException as e:
            sys.stderr.write(f"❌ Exception while logging to BetterStack: {e}\n")


def setup_logging(level: str | None = None):
    logger = logging.getLogger()
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    logger.handlers = []

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if settings.ENV == "production" and settings.BETTERSTACK_API_KEY:
        betterstack_handler = BetterStackHandler(settings.BETTERSTACK_API_KEY)
        betterstack_handler.setFormatter(formatter)
        logger.addHandler(betterstack_handler)

    logger.info("✅ Logging system initialized")
