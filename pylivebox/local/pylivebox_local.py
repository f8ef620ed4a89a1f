import logging
from typing import Any, Callable, Mapping, Optional

from pylivebox.capabilities import Capabilities, Operation
from pylivebox.config import LiveboxClientConfiguration
from pylivebox.dispatcher import HTTPMethod, RequestDescriptor, RequestDispatcher
from pylivebox.exceptions import FeatureNotFoundError, InvalidPathVariablesError, OperationNotSupportedError
from pylivebox.feature_id import feature_key
from pylivebox.logger import LoggingConfiguration
from pylivebox.pylivebox_base import CAPABILITIES_PATH, FeatureRef, PyLiveboxBase, required_operation
from pylivebox.transport import HTTPTransport, RequestsTransport

log = logging.getLogger(__name__)


class PyLiveboxLocal(PyLiveboxBase):
    """
    Client for a router reachable over HTTP(S).

    Feature calls are checked against the discovered capabilities before
    anything is sent: the feature must exist, allow the operation implied by
    the HTTP method and receive exactly the path variables its URI needs.
    """

    def __init__(self, configuration: LiveboxClientConfiguration, transport: Optional[HTTPTransport] = None,
                 logging_config: Optional[LoggingConfiguration] = None, poolmaxsize: int = 10):
        super().__init__(configuration)
        self.poolmaxsize = poolmaxsize  # pool max size for http connection re-use
        if transport is None:
            transport = RequestsTransport(poolmaxsize=poolmaxsize)
        self.dispatcher = RequestDispatcher(transport, logging_config)

    def discover_capabilities(self) -> Capabilities:
        log.debug(f"discovering capabilities at {self.configuration.base_url}")
        capabilities = self.dispatcher.dispatch(self.configuration, RequestDescriptor(CAPABILITIES_PATH),
                                                Capabilities.from_dict)
        self._set_capabilities(capabilities)
        log.debug(f"{len(capabilities.features)} features discovered")
        return capabilities

    def invoke(self, feature_id: FeatureRef, path_variables: Optional[Mapping[str, str]] = None,
               method: HTTPMethod = HTTPMethod.GET, headers: Optional[Mapping[str, str]] = None,
               body: Any = None, decoder: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        Call a feature of the router.

        Args:
            feature_id     = FeatureID member or string id of a discovered feature
            path_variables = values for the {placeholders} of the feature URI
            method         = HTTP method (selects the required operation)
            headers        = per-call headers, override the defaults
            body           = JSON body (model, list of models, dict...)
            decoder        = callable applied to the JSON response, None for no result
        """
        key = feature_key(feature_id)
        path_variables = dict(path_variables or {})
        feature = self.get_feature(key)
        if feature is None:
            raise FeatureNotFoundError(key)

        operation = required_operation(method, path_variables)
        if not feature.supports(operation):
            raise OperationNotSupportedError(key, operation)

        required = feature.get_path_variable_names()
        if set(required) != set(path_variables):
            raise InvalidPathVariablesError(key, required, path_variables)

        descriptor = RequestDescriptor(path=feature.get_path(path_variables), method=method,
                                       headers=dict(headers or {}), body=body)
        log.debug(f"{method} {key} -> {descriptor.path}")
        return self.dispatcher.dispatch(self.configuration, descriptor, decoder)

    def invoke_action(self, feature_id: FeatureRef, path_variables: Optional[Mapping[str, str]] = None,
                      headers: Optional[Mapping[str, str]] = None, body: Any = None) -> None:
        key = feature_key(feature_id)
        feature = self.get_feature(key)
        if feature is None:
            raise FeatureNotFoundError(key)
        if not feature.supports(Operation.INVOKE):
            raise OperationNotSupportedError(key, Operation.INVOKE)
        self.invoke(key, path_variables, HTTPMethod.POST, headers, body)

    def close(self):
        self.dispatcher.transport.close()
