import logging
from http import HTTPStatus
from typing import Optional

from requests import Response, Session
from requests.exceptions import RequestException

logger = logging.getLogger(__name__)


def reason_phrase(status_code: int, reason: Optional[str] = None) -> str:
    """Return `reason` if the server sent one, otherwise the standard phrase
    for `status_code`. Codes that have no standard phrase (e.g., 599) get an
    empty string."""
    if reason:
        return reason
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ''


class ClientError(Exception):
    """Raised when a `Client` receives an HTTP response with an unexpected
    status code."""
    def __init__(self, response: Response, *args):
        super().__init__(*args)

        self.response: Response = response
        """The Requests `Response` object from the failed request."""

        self.status_code = self.response.status_code
        """The numeric HTTP status code (e.g., 404) for the failed request."""

        self.reason = reason_phrase(self.status_code, self.response.reason)
        """The reason phrase (e.g., "Not Found") for the failed request. If
        the `response` does not have a reason code, use the standard status
        phrase from the built-in `HTTPStatus` enumeration corresponding to
        the `status_code`, or the empty string for a nonstandard code."""

    def __str__(self):
        return f'{self.status_code} {self.reason}'.rstrip()


class TransportError(RuntimeError):
    """Raised when a request did not produce a usable HTTP response (DNS
    failure, refused or reset connection, timeout, too many redirects,
    undecodable content)."""
    pass


class Endpoint:
    """Location of a Solid pod. The base URL is fixed when the endpoint is
    created; container and resource URLs are built by plain concatenation:

    ```pycon
    >>> endpoint = Endpoint('https://pod.example.net/alice/')

    >>> endpoint.container_url('notes')
    'https://pod.example.net/alice/notes'

    >>> endpoint.resource_url('notes', 'log.txt')
    'https://pod.example.net/alice/notes/log.txt'
    ```
    """

    def __init__(self, url: str):
        if not url:
            raise ValueError('Pod URL is required')
        self._url = str(url)

    @property
    def url(self) -> str:
        """Base URL of the pod's root container."""
        return self._url

    def __str__(self):
        return self._url

    def __repr__(self):
        return f'{self.__class__.__name__}({self._url!r})'

    def __contains__(self, item):
        return str(item).startswith(self._url)

    def container_url(self, container_name: str) -> str:
        """URL of the named container (no trailing slash)."""
        return self._url + container_name

    def resource_url(self, container_name: str, file_name: str) -> str:
        """URL of the file `file_name` inside the named container."""
        return self._url + container_name + '/' + file_name


class Client:
    """HTTP client for interacting with a Solid pod."""
    session: Session
    """Underlying Requests library Session object, or a subclass thereof"""

    def __init__(
        self,
        endpoint: Endpoint,
        ua_string: str = None,
        timeout: float = None,
        session: Session = None,
    ):
        self.endpoint: Endpoint = endpoint
        """Pod endpoint"""

        self.timeout: Optional[float] = timeout
        """Passed to every request; `None` means the transport default"""

        if session is None:
            # defaults to a basic requests.Session object
            self.session = Session()
        else:
            # otherwise, use the session object as is
            self.session = session

        if ua_string is not None:
            self.session.headers.update({'User-Agent': ua_string})

    def request(self, method: str, url: str, **kwargs) -> Response:
        """Send an HTTP request using the configured `session`. Additional
        keyword arguments are passed to the underlying `session.request()`
        method.

        Raises a `TransportError` if no response was received."""
        logger.debug(f'{method} {url}')
        if self.timeout is not None:
            kwargs.setdefault('timeout', self.timeout)
        try:
            response = self.session.request(method, url, **kwargs)
        except RequestException as e:
            message = ' '.join(str(arg) for arg in e.args)
            logger.error(message)
            raise TransportError(f'Connection error: {message}') from e
        reason = reason_phrase(response.status_code, response.reason)
        logger.debug(f'{response.status_code} {reason}')
        return response

    def post(self, url: str, **kwargs) -> Response:
        """Send an HTTP POST request using the configured session."""
        return self.request('POST', url, **kwargs)

    def put(self, url: str, **kwargs) -> Response:
        """Send an HTTP PUT request using the configured session."""
        return self.request('PUT', url, **kwargs)

    def get(self, url: str, **kwargs) -> Response:
        """Send an HTTP GET request using the configured session."""
        return self.request('GET', url, **kwargs)

    def exists(self, url: str) -> bool:
        """Returns `True` if an HTTP GET to `url` responds with 200 OK, and
        `False` for any other status. Transport failures are logged and
        also count as `False`."""
        try:
            response = self.get(url)
        except TransportError as e:
            logger.warning(f'Unable to check {url}: {e}')
            return False
        return response.status_code == HTTPStatus.OK

    def is_reachable(self) -> bool:
        """Returns `True` if an HTTP GET request to the configured `endpoint`
        yields a non-error response, and `False` otherwise."""
        try:
            return self.get(self.endpoint.url).ok
        except TransportError as e:
            logger.error(str(e))
            return False

    def test_connection(self):
        """Test the connection to the pod using `is_reachable()`. If it
        returns false, raises a `TransportError`."""
        logger.info(f'Testing connection to {self.endpoint.url}')
        if self.is_reachable():
            logger.info('Connection successful.')
        else:
            raise TransportError(f'Unable to connect to {self.endpoint.url}')
