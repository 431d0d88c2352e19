from __future__ import annotations

import logging
from pathlib import Path
from typing import Union


logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".elaeht_block" / "highscore"


class HighScoreStore:
    """Persists the single best score as a plain integer in a text file."""

    def __init__(self, path: Union[str, Path] = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def load(self) -> int:
        try:
            return max(0, int(self.path.read_text(encoding="utf-8").strip()))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("ignoring unreadable high score file %s: %s", self.path, exc)
            return 0

    def update(self, score: int) -> bool:
        """Store ``score`` if it beats the saved value. Returns True when written."""
        if score <= self.load():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(str(int(score)), encoding="utf-8")
        logger.info("new high score %d", score)
        return True
