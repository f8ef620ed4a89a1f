import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import ValidationError

from pylivebox.capabilities import Capabilities, Feature, Operation
from pylivebox.config import LiveboxClientConfiguration
from pylivebox.dispatcher import HTTPMethod, to_json_value
from pylivebox.exceptions import (
    CodecError, DecodingError, FeatureNotFoundError, LiveboxError, NotImplementedInMockError
)
from pylivebox.feature_id import FeatureID, feature_key
from pylivebox.pylivebox_base import FeatureRef, PyLiveboxBase

log = logging.getLogger(__name__)

MOCK_URL = "http://mock.url"


@dataclass(frozen=True)
class LoggedRequest:
    endpoint: str
    method: HTTPMethod
    headers: Optional[Mapping[str, str]]
    body: Any


def default_mock_capabilities() -> Capabilities:
    return Capabilities(features=(
        Feature(id="mock.feature.get", uri="/mock/feature/get", ops=(Operation.READ,)),
        Feature(id="mock.feature.post", uri="/mock/feature/post", ops=(Operation.ADD,)),
        Feature(id="mock.feature.all", uri="/mock/feature/all", ops=tuple(Operation)),
    ))


class PyLiveboxMock(PyLiveboxBase):
    """
    In-memory client for tests and previews, no network.

    Canned payloads are looked up by feature id in mock_responses and canned
    failures in mock_errors (errors win). Feature calls are not validated
    against the mocked capabilities. Every call is appended to request_log.
    """

    def __init__(self, configuration: Optional[LiveboxClientConfiguration] = None):
        super().__init__(configuration or LiveboxClientConfiguration.from_string(MOCK_URL))
        self.mocked_capabilities = default_mock_capabilities()
        self.discovery_should_succeed = True
        self.mock_responses: Dict[str, Any] = {}
        self.mock_errors: Dict[str, LiveboxError] = {}
        self.request_log: List[LoggedRequest] = []

    def _record(self, endpoint: str, method: HTTPMethod, headers, body):
        self.request_log.append(LoggedRequest(endpoint, method, headers, body))

    @staticmethod
    def build_endpoint(feature_id: str, path_variables: Optional[Mapping[str, str]]) -> str:
        endpoint = f"/sysbus/{feature_id}"
        for value in (path_variables or {}).values():
            endpoint += f"/{value}"
        return endpoint

    def discover_capabilities(self) -> Capabilities:
        self._record("/sysbus/Capabilities:get", HTTPMethod.POST, None, None)
        if not self.discovery_should_succeed:
            raise NotImplementedInMockError("Capabilities")
        self._set_capabilities(self.mocked_capabilities)
        return self.mocked_capabilities

    def invoke(self, feature_id: FeatureRef, path_variables: Optional[Mapping[str, str]] = None,
               method: HTTPMethod = HTTPMethod.GET, headers: Optional[Mapping[str, str]] = None,
               body: Any = None, decoder: Optional[Callable[[Any], Any]] = None) -> Any:
        key = feature_key(feature_id)
        self._record(self.build_endpoint(key, path_variables), method, headers, body)

        if key in self.mock_errors:
            raise self.mock_errors[key]
        if key not in self.mock_responses:
            raise FeatureNotFoundError(key)

        payload = self.mock_responses[key]
        if decoder is None:
            return None
        if not isinstance(payload, (dict, list)) and not hasattr(payload, 'to_dict'):
            # Already typed
            return payload
        try:
            return decoder(to_json_value(payload))
        except (ValidationError, ValueError, KeyError, TypeError, CodecError) as exc:
            raise DecodingError(exc) from exc

    def invoke_action(self, feature_id: FeatureRef, path_variables: Optional[Mapping[str, str]] = None,
                      headers: Optional[Mapping[str, str]] = None, body: Any = None) -> None:
        key = feature_key(feature_id)
        self._record(self.build_endpoint(key, path_variables), HTTPMethod.POST, headers, body)

        if key in self.mock_errors:
            raise self.mock_errors[key]
        if key in self.mock_responses or key == FeatureID.REBOOT.value:
            return None
        raise FeatureNotFoundError(key)
