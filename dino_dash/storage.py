"""High score persistence."""

from __future__ import annotations

import json
import logging
import os
from typing import Protocol

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def read_high_score(self) -> int: ...

    def write_high_score(self, value: int) -> None: ...


class JsonHighScoreStore:
    """Keeps the best score in a small JSON file: {"high_score": 1234}."""

    def __init__(self, path: str) -> None:
        self.path = path

    def read_high_score(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return max(0, int(data.get("high_score", 0)))
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, exc)
            return 0

    def write_high_score(self, value: int) -> None:
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({"high_score": int(value)}, f)
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
            return
        logger.info("New high score %d saved", value)
