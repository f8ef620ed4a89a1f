import abc
import logging
import threading
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from pylivebox.capabilities import Capabilities, Feature, Operation
from pylivebox.config import LiveboxClientConfiguration
from pylivebox.dispatcher import HTTPMethod
from pylivebox.feature_id import FeatureID, feature_key

log = logging.getLogger(__name__)

CAPABILITIES_PATH = "/API/Capabilities"

FeatureRef = Union[FeatureID, str]

# (capabilities, index) - always replaced together
_EMPTY_STATE: Tuple[Optional[Capabilities], Dict[str, Feature]] = (None, {})


def required_operation(method: HTTPMethod, path_variables: Optional[Mapping[str, str]]) -> Operation:
    """Operation a feature must allow for an HTTP method."""
    if method == HTTPMethod.GET:
        return Operation.READ
    if method == HTTPMethod.POST:
        # POST on a templated URI adds a child resource, otherwise it triggers an action
        return Operation.ADD if path_variables else Operation.INVOKE
    if method in (HTTPMethod.PUT, HTTPMethod.PATCH):
        return Operation.WRITE
    if method == HTTPMethod.DELETE:
        return Operation.DELETE
    return Operation.READ


class PyLiveboxBase:
    """Router client interface shared by the live and in-memory clients."""

    def __init__(self, configuration: LiveboxClientConfiguration):
        super().__init__()
        self.configuration = configuration
        self._lock = threading.Lock()
        self._state = _EMPTY_STATE

    @property
    def capabilities(self) -> Optional[Capabilities]:
        return self._state[0]

    @property
    def feature_index(self) -> Dict[str, Feature]:
        return self._state[1]

    def get_feature(self, feature_id: FeatureRef) -> Optional[Feature]:
        return self._state[1].get(feature_key(feature_id))

    def supports_feature(self, feature_id: FeatureRef, operation: Operation) -> bool:
        feature = self.get_feature(feature_id)
        return feature is not None and feature.supports(operation)

    def _set_capabilities(self, capabilities: Optional[Capabilities]):
        state = _EMPTY_STATE if capabilities is None else (capabilities, capabilities.index())
        with self._lock:
            self._state = state

    def update_credentials(self, username: Optional[str], password: Optional[str]):
        with self._lock:
            self.configuration = self.configuration.replace(username=username, password=password)

    def update_base_url(self, base_url: str, clear_cache: bool = False):
        """
        Point the client at another router.

        Args:
            base_url    = new base URL (validated, InvalidURLError when malformed)
            clear_cache = If True, forget the discovered capabilities
        """
        with self._lock:
            self.configuration = self.configuration.replace(base_url=base_url)
            if clear_cache:
                self._state = _EMPTY_STATE

    @abc.abstractmethod
    def discover_capabilities(self) -> Capabilities:
        raise NotImplementedError

    @abc.abstractmethod
    def invoke(self, feature_id: FeatureRef, path_variables: Optional[Mapping[str, str]] = None,
               method: HTTPMethod = HTTPMethod.GET, headers: Optional[Mapping[str, str]] = None,
               body: Any = None, decoder: Optional[Callable[[Any], Any]] = None) -> Any:
        raise NotImplementedError

    @abc.abstractmethod
    def invoke_action(self, feature_id: FeatureRef, path_variables: Optional[Mapping[str, str]] = None,
                      headers: Optional[Mapping[str, str]] = None, body: Any = None) -> None:
        raise NotImplementedError

    def close(self):
        pass
