from typing import Dict, List, Optional


class LiveboxError(Exception):
    """Base error for all pylivebox failures."""


class InvalidURLError(LiveboxError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url}")


class EncodingError(LiveboxError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to encode request body: {cause}")


class DecodingError(LiveboxError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to decode response: {cause}")


class NoDataError(LiveboxError):
    def __init__(self):
        super().__init__("No data received from server")


class UnexpectedResponseError(LiveboxError):
    def __init__(self):
        super().__init__("Received an unexpected response from the server")


class HTTPError(LiveboxError):
    def __init__(self, status_code: int, body: Optional[bytes] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP error: {status_code}")


class NetworkError(LiveboxError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class AuthenticationRequiredError(LiveboxError):
    def __init__(self):
        super().__init__("Authentication is required")


class FeatureNotFoundError(LiveboxError):
    def __init__(self, feature_id: str):
        self.feature_id = feature_id
        super().__init__(f"Feature not found: {feature_id}")


class InvalidPathVariablesError(LiveboxError):
    def __init__(self, feature_id: str, required: List[str], provided: Dict[str, str]):
        self.feature_id = feature_id
        self.required = list(required)
        self.provided = dict(provided)
        super().__init__(f"Invalid path variables for {feature_id}: {self.provided}. "
                         f"Required variables: {', '.join(self.required)}")


class OperationNotSupportedError(LiveboxError):
    def __init__(self, feature_id: str, operation):
        self.feature_id = feature_id
        self.operation = operation
        super().__init__(f"Operation {operation} not supported by feature {feature_id}")


class NotImplementedInMockError(LiveboxError):
    def __init__(self, feature_id: str):
        self.feature_id = feature_id
        super().__init__(f"Feature {feature_id} is not implemented in the mock implementation")


# Field level decode failures - surfaced to callers wrapped in DecodingError

class CodecError(ValueError):
    """Raised when a JSON value cannot be decoded into a model field."""


class KeyNotFoundError(CodecError, KeyError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key not found: {key}")

    def __str__(self):
        return f"Key not found: {self.key}"


class InvalidValueError(CodecError):
    def __init__(self, value, expected: str):
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid value {value!r}, expected {expected}")
