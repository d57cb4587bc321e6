import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Iterable, Optional

from requests import Response

from solidpod.client import Client, ClientError, TransportError
from solidpod.codec import decode, encode
from solidpod.ldp import BASIC_CONTAINER_LINK, container_description, log_properties

logger = logging.getLogger(__name__)

WRITE_SUCCESS = {HTTPStatus.OK, HTTPStatus.CREATED}


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a `Pod` operation. Failures are reported here instead of
    being raised; `error` is either a `TransportError` (no response) or a
    `ClientError` (unexpected status)."""

    ok: bool
    status_code: Optional[int] = None
    error: Optional[Exception] = None
    value: Any = None

    def __bool__(self):
        return self.ok

    @classmethod
    def success(cls, response: Response, value: Any = None) -> 'OperationResult':
        return cls(ok=True, status_code=response.status_code, value=value)

    @classmethod
    def failure(cls, error: Exception, value: Any = None) -> 'OperationResult':
        status_code = error.status_code if isinstance(error, ClientError) else None
        return cls(ok=False, status_code=status_code, error=error, value=value)


class Pod:
    """Container and text-file operations against a Solid pod.

    Every operation returns an `OperationResult` and never raises for HTTP or
    transport failures; these are logged and reported in the result. Whether
    to write with PUT or POST is decided by probing the target first, which
    is subject to the usual check-then-act race."""

    def __init__(self, client: Client, slug_on_create: bool = False, lenient_status: bool = False):
        self.client = client

        self.slug_on_create = slug_on_create
        """When `True`, POSTs that create a new file send a `Slug` header with
        the file name. Off by default, in which case the server picks the
        name of the new resource."""

        self.write_success = WRITE_SUCCESS | {HTTPStatus.NO_CONTENT} if lenient_status else WRITE_SUCCESS
        """Status codes that count as a successful write"""

    @property
    def endpoint(self):
        return self.client.endpoint

    def create_container(self, container_name: str) -> OperationResult:
        """Create a basic container named `container_name` in the pod root,
        unless it already exists. The result value is `True` if a container
        was created, `False` otherwise."""
        target = self.endpoint.container_url(container_name)
        try:
            if self.client.exists(target):
                logger.info(f'Container {target} already exists')
                return OperationResult(ok=True, status_code=HTTPStatus.OK, value=False)

            body = container_description(container_name)
            log_properties(body)
            response = self.client.post(
                self.endpoint.url,
                headers={
                    'Content-Type': 'text/turtle',
                    'Link': BASIC_CONTAINER_LINK,
                    'Slug': container_name + '/',
                },
                data=body.encode('utf-8'),
            )
            logger.debug(response.text)
            if response.status_code != HTTPStatus.CREATED:
                raise ClientError(response)
        except (ClientError, TransportError) as e:
            logger.error(f'Error while creating container {target}: {e}')
            return OperationResult.failure(e, value=False)

        logger.info(f'Container created: {response.headers.get("Location", target)}')
        return OperationResult.success(response, value=True)

    def publish_data(self, container_name: str, file_name: str, values: Iterable[Any]) -> OperationResult:
        """Replace the contents of a file with `values`, one per line. If the
        file exists it is overwritten with PUT; otherwise the data is POSTed
        to the container."""
        content = encode(values)
        url = self.endpoint.resource_url(container_name, file_name)
        headers = {'Content-Type': 'text/plain'}
        try:
            if self.client.exists(url):
                response = self.client.put(url, headers=headers, data=content.encode('utf-8'))
            else:
                url = self.endpoint.container_url(container_name)
                if self.slug_on_create:
                    headers['Slug'] = file_name
                response = self.client.post(url, headers=headers, data=content.encode('utf-8'))
            logger.debug(response.text)
            if response.status_code not in self.write_success:
                raise ClientError(response)
        except (ClientError, TransportError) as e:
            logger.error(f'Error while writing file {url}: {e}')
            return OperationResult.failure(e)

        logger.info(f'File writing successful: {url}')
        return OperationResult.success(response)

    def read_data(self, container_name: str, file_name: str) -> OperationResult:
        """Read a file as a list of lines. On any failure the result value is
        an empty list, the same as for a file with no lines."""
        result, _ = self._read(container_name, file_name)
        return result

    def update_data(self, container_name: str, file_name: str, values: Iterable[Any]) -> OperationResult:
        """Append `values` to a file by reading it, concatenating, and writing
        the whole list back. Not atomic: concurrent updates to the same file
        can overwrite each other. A failed read is treated as an empty file."""
        old = self.read_data(container_name, file_name)
        return self.publish_data(container_name, file_name, [*old.value, *values])

    def update_data_if_match(self, container_name: str, file_name: str, values: Iterable[Any]) -> OperationResult:
        """Append `values` to a file, but only if it has not changed since it
        was read. Uses the `ETag` of the read response as an `If-Match`
        precondition on the PUT; if the server reports the precondition failed
        (412) the result is a failure and nothing is written.

        A file that does not exist yet is created with `publish_data()`. If the
        server sends no `ETag`, this behaves like `update_data()`. Any other
        read failure is returned without writing."""
        result, etag = self._read(container_name, file_name)
        if not result.ok and result.status_code != HTTPStatus.NOT_FOUND:
            return result

        merged = [*result.value, *values]
        if not result.ok or etag is None:
            return self.publish_data(container_name, file_name, merged)

        url = self.endpoint.resource_url(container_name, file_name)
        try:
            response = self.client.put(
                url,
                headers={
                    'Content-Type': 'text/plain',
                    'If-Match': etag,
                },
                data=encode(merged).encode('utf-8'),
            )
            if response.status_code not in self.write_success:
                raise ClientError(response)
        except (ClientError, TransportError) as e:
            logger.error(f'Error while updating file {url}: {e}')
            return OperationResult.failure(e)

        logger.info(f'File update successful: {url}')
        return OperationResult.success(response)

    def _read(self, container_name: str, file_name: str) -> tuple[OperationResult, Optional[str]]:
        url = self.endpoint.resource_url(container_name, file_name)
        try:
            response = self.client.get(url, headers={'Content-Type': 'text/plain'})
            if response.status_code != HTTPStatus.OK:
                raise ClientError(response)
        except (ClientError, TransportError) as e:
            logger.error(f'Error while reading data from {url}: {e}')
            return OperationResult.failure(e, value=[]), None

        logger.info(f'Data read successfully from {url}')
        # undecodable bytes become U+FFFD instead of failing the read
        values = decode(response.content.decode('utf-8', errors='replace'))
        return OperationResult.success(response, value=values), response.headers.get('ETag')
