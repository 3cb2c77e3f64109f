import logging
import pytest

from store_client.exceptions import StatusError
from store_client.models import StoreResource, UploadRecord, UploadState
from store_client.observers import LoggingUploadObserver


@pytest.mark.parametrize("resource, label", [
    (StoreResource.RAW, "raw image"),
    (StoreResource.SIDECAR, "sidecar"),
    (StoreResource.IMAGE, "image"),
])
def test_resource_labels(resource, label):
    assert resource.label == label


def test_logging_observer_writes_start_and_success(caplog):
    caplog.set_level(logging.INFO, logger="StoreClient_Core")
    observer = LoggingUploadObserver()

    observer.record(UploadRecord(resource=StoreResource.RAW, payload_size=3, state=UploadState.IN_FLIGHT))
    observer.record(UploadRecord(resource=StoreResource.RAW, payload_size=3, state=UploadState.SUCCEEDED, identifier="abc123"))

    messages = [r.getMessage() for r in caplog.records]
    assert "uploading raw image to store (3 bytes)" in messages
    assert "raw image uploaded. Got ID abc123" in messages
    assert all(r.levelno == logging.INFO for r in caplog.records)


def test_logging_observer_warns_on_failure(caplog):
    caplog.set_level(logging.INFO, logger="StoreClient_Core")
    observer = LoggingUploadObserver()
    error = StatusError(500, "http://store.test:8000/sidecar")

    observer.record(UploadRecord(resource=StoreResource.SIDECAR, payload_size=0, state=UploadState.FAILED, error=error))

    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.WARNING
    assert caplog.records[0].getMessage() == f"sidecar upload failed: {error}"


def test_logging_observer_accepts_custom_logger(caplog):
    custom_logger = logging.getLogger("tests.uploads")
    caplog.set_level(logging.INFO, logger="tests.uploads")
    observer = LoggingUploadObserver(logger=custom_logger)

    observer.record(UploadRecord(resource=StoreResource.IMAGE, payload_size=10, state=UploadState.IN_FLIGHT))

    assert caplog.records[0].name == "tests.uploads"
