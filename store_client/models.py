# store_client/models.py
from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum

from store_client.exceptions import StoreClientError


class StoreResource(str, Enum):
    """Resource paths exposed by the store service."""
    RAW = "/raw"
    SIDECAR = "/sidecar"
    IMAGE = "/image"

    @property
    def label(self) -> str:
        return _RESOURCE_LABELS[self]


_RESOURCE_LABELS = {
    StoreResource.RAW: "raw image",
    StoreResource.SIDECAR: "sidecar",
    StoreResource.IMAGE: "image",
}


class UploadState(str, Enum):
    """Lifecycle of a single upload call."""
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class UploadRecord(BaseModel):
    """Diagnostic record handed to an upload observer."""
    resource: StoreResource
    payload_size: int = Field(..., ge=0, description="Size of the request body in bytes")
    state: UploadState
    identifier: Optional[str] = Field(None, description="Identifier assigned by the store (succeeded uploads only)")
    error: Optional[StoreClientError] = Field(None, description="Failure that ended the upload (failed uploads only)")

    class Config:
        arbitrary_types_allowed = True
