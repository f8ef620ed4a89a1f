# pyLivebox - Request Dispatcher
# -*- coding: utf-8 -*-
"""
 Turns a RequestDescriptor into one HTTP call and a decoded result

 dispatch() builds the URL, headers and JSON body, sends the request through
 an HTTPTransport exactly once and classifies the outcome. Every failure is
 raised as one of the LiveboxError subclasses in pylivebox.exceptions.
"""
import base64
import json
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional
from urllib.parse import quote, urlsplit, urlunsplit

from pydantic import ValidationError
from requests.structures import CaseInsensitiveDict

from pylivebox.config import LiveboxClientConfiguration
from pylivebox.exceptions import (
    CodecError, DecodingError, EncodingError, InvalidURLError, LiveboxError, NetworkError,
    NoDataError, UnexpectedResponseError, HTTPError, AuthenticationRequiredError
)
from pylivebox.logger import HTTPMetrics, LogLevel, LoggingConfiguration, response_level
from pylivebox.transport import HTTPTransport, RequestsTransport

log = logging.getLogger(__name__)

SLASHES_REGEX = re.compile(r'/{2,}')
# RFC 3986 path characters; % is kept so already encoded values are not encoded twice
PATH_SAFE_CHARS = "/%:@!$&'()*+,;=-._~"
JSON_CONTENT_TYPE = "application/json"


class HTTPMethod(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class RequestDescriptor:
    path: str
    method: HTTPMethod = HTTPMethod.GET
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None


def passthrough(data):
    """Decoder returning the parsed JSON untouched."""
    return data


def to_json_value(value):
    """Convert models (anything with to_dict) and containers into plain JSON values."""
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    if isinstance(value, dict):
        return {k: to_json_value(v) for k, v in value.items()}
    if isinstance(value, Enum):
        return value.value
    return value


def encode_body(body) -> Optional[bytes]:
    if body is None:
        return None
    if isinstance(body, bytes):
        return body
    try:
        return json.dumps(to_json_value(body), allow_nan=False).encode('utf-8')
    except (TypeError, ValueError) as exc:
        raise EncodingError(exc) from exc


def build_url(base_url: str, path: str) -> str:
    try:
        parts = urlsplit(base_url)
    except ValueError as exc:
        raise InvalidURLError(base_url) from exc
    if not parts.scheme or not parts.netloc:
        raise InvalidURLError(base_url)
    full_path = SLASHES_REGEX.sub('/', f"{parts.path}/{path}")
    # Path variable values may carry reserved characters such as # or ?
    full_path = quote(full_path, safe=PATH_SAFE_CHARS)
    return urlunsplit((parts.scheme, parts.netloc, full_path, parts.query, ''))


def basic_auth(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode('utf-8')).decode('ascii')
    return f"Basic {token}"


class RequestDispatcher:

    def __init__(self, transport: Optional[HTTPTransport] = None,
                 logging_config: Optional[LoggingConfiguration] = None):
        self.transport = transport if transport is not None else RequestsTransport()
        self.logging_config = logging_config if logging_config is not None else LoggingConfiguration()

    def build_headers(self, config: LiveboxClientConfiguration, descriptor: RequestDescriptor,
                      has_body: bool) -> CaseInsensitiveDict:
        headers = CaseInsensitiveDict(config.default_headers)
        headers['Accept'] = JSON_CONTENT_TYPE
        if config.has_credentials:
            headers['Authorization'] = basic_auth(config.username, config.password)
        headers.update(descriptor.headers or {})
        if has_body:
            headers['Content-Type'] = JSON_CONTENT_TYPE
        return headers

    def dispatch(self, config: LiveboxClientConfiguration, descriptor: RequestDescriptor,
                 decoder: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        Send the request and return the decoded response.

        Args:
            config      = client configuration (base URL, timeout, credentials)
            descriptor  = path, method, per-call headers and body
            decoder     = callable applied to the parsed JSON, None for void operations

        Returns:
            The decoder's result, or None when decoder is None.
        """
        url = build_url(config.base_url, descriptor.path)
        body = encode_body(descriptor.body)
        headers = self.build_headers(config, descriptor, body is not None)
        method = str(descriptor.method)

        self._log_request(method, url, headers, body)
        start = HTTPMetrics.now()
        try:
            response = self.transport.send(method, url, headers, body, (config.timeout, config.timeout))
        except InvalidURLError:
            raise
        except LiveboxError as exc:
            self._log_response(url, None, None, exc, start, body)
            raise
        except Exception as exc:
            self._log_response(url, None, None, exc, start, body)
            raise NetworkError(exc) from exc

        status = getattr(response, 'status_code', None)
        content = getattr(response, 'content', None)
        if isinstance(status, bool) or not isinstance(status, int):
            self._log_response(url, None, content, None, start, body)
            raise UnexpectedResponseError()
        self._log_response(url, status, content, None, start, body)

        if status == 401:
            raise AuthenticationRequiredError()
        if not 200 <= status < 300:
            raise HTTPError(status, content)
        if decoder is None:
            return None
        if not content:
            raise NoDataError()
        try:
            return decoder(json.loads(content))
        except (ValidationError, ValueError, KeyError, TypeError, CodecError) as exc:
            log.debug(f"unable to decode response from {url}: {exc}")
            raise DecodingError(exc) from exc

    def _log_request(self, method, url, headers, body):
        level = LogLevel.INFO
        if not self.logging_config.should_log(level):
            return
        try:
            self.logging_config.logger.log_request(method, url, headers, body, level)
        except Exception as exc:
            log.debug(f"request logger failed: {exc}")

    def _log_response(self, url, status, content, error, start, body):
        if not self.logging_config.enabled:
            return
        metrics = HTTPMetrics(request_start_time=start, response_time=HTTPMetrics.now(),
                              status_code=status,
                              request_body_size=len(body) if body else 0,
                              response_body_size=len(content) if content else 0,
                              had_error=error is not None)
        level = response_level(status, error)
        try:
            if self.logging_config.should_log(level):
                self.logging_config.logger.log_response(url, status, content, error, level, metrics)
            if self.logging_config.metrics_enabled and self.logging_config.should_log(LogLevel.DEBUG):
                self.logging_config.logger.log_metrics(metrics, LogLevel.DEBUG)
        except Exception as exc:
            log.debug(f"response logger failed: {exc}")
