import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


class MemoryTokenStore:
    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str):
        self._token = token

    def clear(self):
        self._token = None


class FileTokenStore:
    """Keeps the bearer token in a file so it survives restarts."""

    def __init__(self, path: str):
        self.path = path

    def get(self) -> Optional[str]:
        try:
            with open(self.path, encoding="utf-8") as fh:
                token = fh.read().strip()
        except FileNotFoundError:
            return None
        return token or None

    def set(self, token: str):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write(token)

    def clear(self):
        try:
            os.remove(self.path)
        except FileNotFoundError:
            return
        logger.info(f"Removed stored token at {self.path}")
