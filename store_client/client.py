# store_client/client.py
import httpx
from typing import Optional

from store_client.config import settings as default_settings, logger as core_logger, Settings
from store_client.exceptions import (
    StoreClientError, ConfigurationError, TransportError, StatusError, DecodeError
)
from store_client.models import StoreResource, UploadRecord, UploadState
from store_client.observers import UploadObserver, LoggingUploadObserver

# Use a child logger specific to this module
logger = core_logger.getChild("UploadClient")

BytesLike = bytes | bytearray | memoryview


def parse_endpoint(endpoint: str | httpx.URL) -> str:
    """
    Validates a store base endpoint and returns it in canonical form.

    The endpoint must be an absolute http(s) URI made of scheme, host and an
    optional port. A single trailing slash is accepted and dropped so resource
    paths can be appended by plain concatenation.

    Raises:
        ConfigurationError: If the endpoint is not such a URI.
    """
    try:
        url = httpx.URL(str(endpoint))
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Invalid store endpoint '{endpoint}': {e}") from e

    if url.scheme not in ("http", "https"):
        raise ConfigurationError(f"Store endpoint '{endpoint}' must use http or https, got scheme '{url.scheme}'")
    if not url.host:
        raise ConfigurationError(f"Store endpoint '{endpoint}' has no host")
    if url.userinfo:
        raise ConfigurationError(f"Store endpoint '{endpoint}' must not embed credentials")
    if url.path not in ("", "/") or url.query or url.fragment:
        raise ConfigurationError(f"Store endpoint '{endpoint}' must not carry a path, query or fragment")

    return f"{url.scheme}://{url.netloc.decode('ascii')}"


class StoreUploadClient:
    """
    Uploads binary payloads to the store service and returns the identifiers it assigns.

    All uploads share one httpx.AsyncClient and run on the caller's event loop;
    concurrent calls on the same instance are independent of each other.
    """

    def __init__(
        self,
        endpoint: str | httpx.URL,
        http_client: Optional[httpx.AsyncClient] = None,
        observer: Optional[UploadObserver] = None,
        timeout: float | None = default_settings.STORE_TIMEOUT,
    ):
        self.endpoint = parse_endpoint(endpoint)
        self.observer = observer or LoggingUploadObserver()
        self._owns_http_client = http_client is None
        self._http_client = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        logger.debug(f"Store upload client created for {self.endpoint} (owns transport: {self._owns_http_client})")

    @classmethod
    def from_settings(cls, settings: Settings = default_settings, observer: Optional[UploadObserver] = None) -> "StoreUploadClient":
        """Creates a client for the endpoint and transport timeout held in settings."""
        return cls(settings.STORE_URL, observer=observer, timeout=settings.STORE_TIMEOUT)

    async def upload_raw_image(self, data: BytesLike) -> str:
        """Uploads a raw image and returns its store identifier."""
        return await self._upload(StoreResource.RAW, data)

    async def upload_sidecar(self, data: BytesLike) -> str:
        """Uploads sidecar metadata and returns its store identifier."""
        return await self._upload(StoreResource.SIDECAR, data)

    async def upload_image(self, data: BytesLike) -> str:
        """Uploads a processed image and returns its store identifier."""
        return await self._upload(StoreResource.IMAGE, data)

    async def aclose(self) -> None:
        """Closes the HTTP transport if this client created it."""
        if self._owns_http_client and not self._http_client.is_closed:
            logger.debug(f"Closing HTTPX client for {self.endpoint}")
            await self._http_client.aclose()

    async def __aenter__(self) -> "StoreUploadClient":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()

    def _build_uri(self, resource: StoreResource) -> httpx.URL:
        uri = self.endpoint + resource.value
        try:
            return httpx.URL(uri)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"Composed store URI '{uri}' is invalid: {e}") from e

    async def _upload(self, resource: StoreResource, data: BytesLike) -> str:
        body = bytes(data)
        try:
            uri = self._build_uri(resource)
            self._notify(UploadRecord(resource=resource, payload_size=len(body), state=UploadState.IN_FLIGHT))
            identifier = await self._post(uri, body)
        except StoreClientError as e:
            self._notify(UploadRecord(resource=resource, payload_size=len(body), state=UploadState.FAILED, error=e))
            raise

        self._notify(UploadRecord(resource=resource, payload_size=len(body), state=UploadState.SUCCEEDED, identifier=identifier))
        return identifier

    async def _post(self, uri: httpx.URL, body: bytes) -> str:
        try:
            async with self._http_client.stream("POST", uri, content=body, follow_redirects=False) as response:
                if response.status_code != httpx.codes.OK:
                    # Leaving the block closes the response without reading the body
                    raise StatusError(response.status_code, str(uri))
                chunks = [chunk async for chunk in response.aiter_bytes()]
        except httpx.RequestError as e:
            raise TransportError(str(uri), e) from e

        try:
            return b"".join(chunks).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(str(uri), e) from e

    def _notify(self, event: UploadRecord) -> None:
        try:
            self.observer.record(event)
        except Exception as e:
            logger.warning(f"Upload observer failed on {event.state.value} record for {event.resource.value}: {e}", exc_info=True)
