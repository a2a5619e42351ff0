"""
Payload acquisition for schedule imports.

Reading the source is the only step of an import that waits on I/O, so it
is the only coroutine; everything after it runs synchronously.
"""

import asyncio
from pathlib import Path

from schedule_sync.observability.logger import get_logger

logger = get_logger(__name__)

DEFAULT_EXTENSIONS = (".csv",)


class PayloadAcquisitionError(Exception):
    """Raised when the payload cannot be read. Aborts the whole import."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read payload '{source}': {reason}")


class PayloadReader:
    """
    Reads a payload file as text without blocking the event loop.
    """

    def __init__(
        self,
        allowed_extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
        encoding: str = "utf-8",
    ):
        """
        Initialize payload reader.

        Args:
            allowed_extensions: Accepted file suffixes (empty accepts any)
            encoding: Text encoding of the payload
        """
        self.allowed_extensions = tuple(ext.lower() for ext in allowed_extensions)
        self.encoding = encoding

    def check_source(self, path: Path) -> None:
        """
        Reject sources with an unexpected file type.

        Raises:
            PayloadAcquisitionError: If the suffix is not allowed
        """
        if self.allowed_extensions and path.suffix.lower() not in self.allowed_extensions:
            raise PayloadAcquisitionError(
                str(path),
                f"unsupported file type '{path.suffix or '(none)'}', "
                f"expected one of {', '.join(self.allowed_extensions)}",
            )

    async def read(self, file_path: str | Path) -> str:
        """
        Read the payload text.

        Args:
            file_path: Path to the payload file

        Returns:
            The file contents

        Raises:
            PayloadAcquisitionError: If the file has the wrong type, is
                missing, unreadable or not valid text
        """
        path = Path(file_path)
        self.check_source(path)

        try:
            text = await asyncio.to_thread(path.read_text, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read payload {path}: {e}")
            raise PayloadAcquisitionError(str(path), str(e)) from e

        logger.debug(f"Read payload {path.name} ({len(text)} characters)")
        return text


async def read_payload(file_path: str | Path, **reader_options) -> str:
    """Read a payload with a default-configured PayloadReader."""
    return await PayloadReader(**reader_options).read(file_path)
