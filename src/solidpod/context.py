import logging
from argparse import Namespace
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Optional

from solidpod.client import Client, Endpoint
from solidpod.pod import Pod
from solidpod.utils import strtobool

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    def __init__(self, message):
        self.message = message

    def __str__(self):
        return self.message


def get_flag(config: dict[str, Any], key: str) -> bool:
    value = config.get(key, False)
    if isinstance(value, str):
        try:
            return bool(strtobool(value))
        except ValueError as e:
            raise ConfigError(f"Invalid value for {key} in section 'POD': {value!r}") from e
    return bool(value)


@dataclass
class PodContext:
    """Lazily builds the endpoint, HTTP client, and pod from the `POD`
    section of a configuration dictionary."""
    config: dict[str, Any] = None
    args: Namespace = None
    _endpoint: Endpoint = None
    _client: Client = None
    _pod: Pod = None

    @property
    def version(self) -> str:
        try:
            return version('solidpod')
        except PackageNotFoundError:
            return 'unknown'

    @property
    def pod_config(self) -> dict[str, Any]:
        return (self.config or {}).get('POD', {})

    @property
    def endpoint(self) -> Endpoint:
        if self._endpoint is None:
            try:
                self._endpoint = Endpoint(url=self.pod_config['POD_URL'])
            except KeyError as e:
                raise ConfigError(f"Missing configuration key {e} in section 'POD'")
            logger.debug(f'Pod URL = {self._endpoint.url}')
        return self._endpoint

    @property
    def timeout(self) -> Optional[float]:
        timeout = self.pod_config.get('TIMEOUT')
        return float(timeout) if timeout is not None else None

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = Client(
                endpoint=self.endpoint,
                ua_string=f'solidpod/{self.version}',
                timeout=self.timeout,
            )
        return self._client

    @property
    def pod(self) -> Pod:
        if self._pod is None:
            self._pod = Pod(
                client=self.client,
                slug_on_create=get_flag(self.pod_config, 'SLUG_ON_CREATE'),
                lenient_status=get_flag(self.pod_config, 'LENIENT_STATUS'),
            )
        return self._pod
