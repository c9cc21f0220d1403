"""
Export sinks — where a rendered statement ends up.

The formatter only builds strings. Anything with a side effect
(writing a file, handing the text to a messaging app) lives
behind an ExportSink so the formatting stays testable on its own.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from urllib.parse import quote

logger = logging.getLogger(__name__)

DEFAULT_SHARE_BASE_URL = "https://wa.me/"
DEFAULT_EXPORT_FILENAME = "account-statement.csv"


class ExportSink(ABC):

    @abstractmethod
    def deliver(self, content: str) -> str:
        """Deliver rendered statement content and return a locator for it."""


class ShareLinkSink(ExportSink):
    """
    Builds a messaging share link carrying the statement text.

    Nothing is opened or sent; the caller decides what to do
    with the returned URL.
    """

    def __init__(self, base_url: str = DEFAULT_SHARE_BASE_URL):
        self.base_url = base_url

    def deliver(self, content: str) -> str:
        return f"{self.base_url}?text={quote(content, safe='')}"


class FileSink(ExportSink):
    """Writes the statement to a file and returns its path."""

    def __init__(self, directory: str | Path, filename: str = DEFAULT_EXPORT_FILENAME):
        self.directory = Path(directory)
        self.filename = filename

    def deliver(self, content: str) -> str:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / self.filename
        path.write_text(content, encoding="utf-8")
        logger.info("Statement written to %s", path)
        return str(path)
