# store_client/observers.py
from typing import Protocol
import logging

from store_client.config import logger as core_logger
from store_client.models import UploadRecord, UploadState


class UploadObserver(Protocol):
    """Receives a record at the start and at the terminal state of every upload."""

    def record(self, event: UploadRecord) -> None:
        ...


class LoggingUploadObserver:
    """Default observer: writes upload diagnostics to the store client logger."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or core_logger.getChild("Uploads")

    def record(self, event: UploadRecord) -> None:
        label = event.resource.label
        if event.state == UploadState.IN_FLIGHT:
            self.logger.info(f"uploading {label} to store ({event.payload_size} bytes)")
        elif event.state == UploadState.SUCCEEDED:
            self.logger.info(f"{label} uploaded. Got ID {event.identifier}")
        else:
            self.logger.warning(f"{label} upload failed: {event.error}")
