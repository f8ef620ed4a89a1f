from pylivebox.mock.pylivebox_mock import LoggedRequest, PyLiveboxMock, default_mock_capabilities

__all__ = ["LoggedRequest", "PyLiveboxMock", "default_mock_capabilities"]
