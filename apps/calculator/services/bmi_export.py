"""
BMI Report Export

Sharing a report is a host capability (a share sheet on mobile, stdout for
the report script). The screen only knows the Exporter protocol; adapters
here cover the hosts we ship with.

Every adapter either delivers the text or raises ExportError.
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional, Protocol, TextIO, Union

from core.exceptions import ExportError

logger = logging.getLogger(__name__)


class Exporter(Protocol):
    """Anything that can take a finished report off our hands."""

    def share(self, text: str) -> None:
        ...


class StreamExporter:
    """Write reports to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def share(self, text: str) -> None:
        try:
            self.stream.write(text + "\n")
            self.stream.flush()
        except (OSError, ValueError) as e:
            # ValueError: write to a closed stream
            raise ExportError(f"Could not write report to stream: {e}", target="stream") from e


class LoggingExporter:
    """Emit reports as INFO log records."""

    def __init__(self, export_logger: Optional[logging.Logger] = None):
        self.logger = export_logger or logger

    def share(self, text: str) -> None:
        self.logger.info(text, extra={"extra_fields": {"event": "bmi_report_shared"}})


class FileExporter:
    """Write each report to a file, replacing the previous one."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def share(self, text: str) -> None:
        try:
            self.path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            raise ExportError(f"Could not write report to {self.path}: {e}", target="file") from e
        logger.info(f"BMI report written to {self.path}")


class RecordingExporter:
    """Keep shared reports in memory (previews and tests)."""

    def __init__(self):
        self.shared: List[str] = []

    def share(self, text: str) -> None:
        self.shared.append(text)

    @property
    def last(self) -> Optional[str]:
        return self.shared[-1] if self.shared else None
