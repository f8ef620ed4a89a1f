# pyLivebox - HTTP Logging
# -*- coding: utf-8 -*-
"""
 Request / response logging for the dispatcher

 The dispatcher never logs HTTP traffic directly, it hands every request and
 response to a LiveboxLogger. DefaultLiveboxLogger writes to the standard
 logging module (loggers 'pylivebox.http' and 'pylivebox.metrics'),
 SilentLiveboxLogger drops everything and any object with the same two
 methods can be plugged in through LoggingConfiguration.

 Classes
    LogLevel              # DEBUG, INFO, DEFAULT, ERROR, FAULT
    HTTPMetrics           # timing and size of one request/response cycle
    LiveboxLogger         # logger interface
    DefaultLiveboxLogger  # stdlib logging implementation
    SilentLiveboxLogger   # no-op implementation
    LoggingConfiguration  # logger + minimum level + metrics switch
"""
import abc
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

PREVIEW_LIMIT = 1024  # bytes, bodies at or above this size are not printed
MASKED = "***MASKED***"
SENSITIVE_HEADERS = ('authorization',)


class LogLevel(Enum):
    DEBUG = 0
    INFO = 1
    DEFAULT = 2
    ERROR = 3
    FAULT = 4

    @property
    def logging_level(self) -> int:
        return _STDLIB_LEVELS[self]

    def __ge__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value >= other.value

    def __lt__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value


_STDLIB_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEFAULT: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FAULT: logging.CRITICAL,
}


def response_level(status_code: Optional[int], error: Optional[Exception] = None) -> LogLevel:
    """Level used to log a response: errors and 4xx are ERROR, 5xx FAULT."""
    if error is not None:
        return LogLevel.ERROR
    if status_code is None:
        return LogLevel.DEFAULT
    if 200 <= status_code < 300:
        return LogLevel.INFO
    if 400 <= status_code < 500:
        return LogLevel.ERROR
    if 500 <= status_code < 600:
        return LogLevel.FAULT
    return LogLevel.DEFAULT


@dataclass(frozen=True)
class HTTPMetrics:
    request_start_time: float
    response_time: float
    status_code: Optional[int] = None
    request_body_size: int = 0
    response_body_size: int = 0
    had_error: bool = False

    @property
    def duration(self) -> float:
        return self.response_time - self.request_start_time

    @staticmethod
    def now() -> float:
        return time.perf_counter()


def sanitize_headers(headers: Optional[Mapping[str, str]]) -> dict:
    if not headers:
        return {}
    return {k: (MASKED if k.lower() in SENSITIVE_HEADERS else v) for k, v in headers.items()}


def _preview(body: Optional[bytes]) -> Optional[str]:
    if body is None or len(body) >= PREVIEW_LIMIT:
        return None
    try:
        return body.decode('utf-8')
    except UnicodeDecodeError:
        return None


class LiveboxLogger(abc.ABC):
    """Interface for HTTP loggers. Implementations must not raise."""

    @abc.abstractmethod
    def log_request(self, method: str, url: str, headers: Optional[Mapping[str, str]],
                    body: Optional[bytes], level: LogLevel):
        raise NotImplementedError

    @abc.abstractmethod
    def log_response(self, url: str, status_code: Optional[int], body: Optional[bytes],
                     error: Optional[Exception], level: LogLevel, metrics: HTTPMetrics):
        raise NotImplementedError

    def log_metrics(self, metrics: HTTPMetrics, level: LogLevel):
        pass


class DefaultLiveboxLogger(LiveboxLogger):

    def __init__(self, name: str = "pylivebox"):
        self.http_log = logging.getLogger(f"{name}.http")
        self.metrics_log = logging.getLogger(f"{name}.metrics")

    def log_request(self, method, url, headers, body, level):
        message = f"HTTP REQUEST: {method} {url}"
        if headers:
            message += f"\n   Headers: {sanitize_headers(headers)}"
        if body is not None:
            message += f"\n   Body Size: {len(body)} bytes"
            preview = _preview(body)
            if preview is not None:
                message += f"\n   Body: {preview}"
        self.http_log.log(level.logging_level, message)

    def log_response(self, url, status_code, body, error, level, metrics):
        if error is not None:
            self.http_log.log(level.logging_level, f"HTTP ERROR: {error}")
            return
        if status_code is None:
            self.http_log.error("HTTP ERROR: No response received")
            return
        outcome = "OK" if status_code < 400 else "FAILED"
        message = f"HTTP RESPONSE: {status_code} {outcome} {url}"
        message += "\n   Duration: %.3fs" % metrics.duration
        if body is not None:
            message += f"\n   Response Size: {len(body)} bytes"
            preview = _preview(body)
            if preview is not None:
                message += f"\n   Response: {preview}"
        self.http_log.log(level.logging_level, message)

    def log_metrics(self, metrics, level):
        status = "N/A" if metrics.status_code is None else metrics.status_code
        self.metrics_log.log(level.logging_level,
                             "HTTP METRICS: duration=%.3fs status=%s request_size=%d response_size=%d error=%s",
                             metrics.duration, status, metrics.request_body_size,
                             metrics.response_body_size, "Yes" if metrics.had_error else "No")


class SilentLiveboxLogger(LiveboxLogger):

    def log_request(self, method, url, headers, body, level):
        pass

    def log_response(self, url, status_code, body, error, level, metrics):
        pass


@dataclass
class LoggingConfiguration:
    logger: LiveboxLogger = field(default_factory=DefaultLiveboxLogger)
    minimum_level: LogLevel = LogLevel.DEBUG
    metrics_enabled: bool = True

    @property
    def enabled(self) -> bool:
        return not isinstance(self.logger, SilentLiveboxLogger)

    def should_log(self, level: LogLevel) -> bool:
        return self.enabled and level >= self.minimum_level

    @classmethod
    def silent(cls) -> "LoggingConfiguration":
        return cls(logger=SilentLiveboxLogger())
