"""Pair list file reader."""

import logging
from pathlib import Path

from src.alert_bot.exceptions import PairListUnreadableError

logger = logging.getLogger(__name__)


class PairListFile:
    """Newline-delimited list of base asset symbols, one per line.

    Blank lines are skipped and surrounding whitespace is stripped. There is
    no header and no escaping. The file is re-read on every call so edits
    take effect on the next cycle.
    """

    def __init__(self, path: str | Path = "pairs.txt", encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def read(self) -> list[str]:
        """Read the pair list.

        Raises:
            PairListUnreadableError: If the file is missing or cannot be decoded.
        """
        try:
            content = self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise PairListUnreadableError(
                f"Cannot read pairs file {self.path}: {e}"
            ) from e

        return [line.strip() for line in content.splitlines() if line.strip()]

    def load(self) -> list[str]:
        """Read the pair list, treating an unreadable file as an empty list."""
        try:
            return self.read()
        except PairListUnreadableError as e:
            logger.error(f"Error reading pairs file: {e}")
            return []
