"""Operations exposed to an agent runtime.

The runtime creates a `PodArtifact`, calls `init()` with the pod URL, and then
invokes the four operations. None of them raise for HTTP or transport
failures: writes return nothing, and a failed read delivers an empty tuple,
the same as a file with no lines. Use `Pod` directly to see the outcome of an
operation.
"""

import logging
from typing import Any, Generic, Iterable, Optional, TypeVar

from solidpod.client import Client, Endpoint
from solidpod.pod import Pod

logger = logging.getLogger(__name__)

T = TypeVar('T')


class FeedbackParam(Generic[T]):
    """Result slot for an operation that delivers its output through an
    argument instead of a return value."""

    def __init__(self):
        self.value: Optional[T] = None

    def set(self, value: T):
        self.value = value

    def get(self) -> Optional[T]:
        return self.value


class PodArtifact:
    def __init__(self, client_factory=Client):
        self.client_factory = client_factory
        self.pod: Optional[Pod] = None

    def init(self, pod_url: str, **kwargs):
        """Bind this artifact to the pod at `pod_url`. Additional keyword
        arguments are passed to the `Pod` constructor."""
        self.pod = Pod(client=self.client_factory(endpoint=Endpoint(pod_url)), **kwargs)
        logger.info(f'Pod artifact initialized for: {pod_url}')

    def _get_pod(self) -> Pod:
        if self.pod is None:
            raise RuntimeError('Pod artifact has not been initialized')
        return self.pod

    def create_container(self, container_name: str):
        self._get_pod().create_container(container_name)

    def publish_data(self, container_name: str, file_name: str, data: Iterable[Any]):
        self._get_pod().publish_data(container_name, file_name, data)

    def read_data(self, container_name: str, file_name: str, data: FeedbackParam[tuple[str, ...]]):
        result = self._get_pod().read_data(container_name, file_name)
        data.set(tuple(result.value))

    def update_data(self, container_name: str, file_name: str, data: Iterable[Any]):
        self._get_pod().update_data(container_name, file_name, data)
