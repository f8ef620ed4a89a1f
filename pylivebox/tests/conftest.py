import json

import pytest
from unittest.mock import MagicMock

from pylivebox.config import LiveboxClientConfiguration
from pylivebox.local.pylivebox_local import PyLiveboxLocal
from pylivebox.logger import LoggingConfiguration
from pylivebox.transport import HTTPTransport, TransportResponse

BASE_URL = "http://192.168.1.1"

ROUTER_FEATURES = [
    {"Id": "Capabilities", "Uri": "/API/Capabilities", "Ops": ["R"]},
    {"Id": "GeneralInfo", "Uri": "/API/GeneralInfo", "Ops": ["R"]},
    {"Id": "Reboot", "Uri": "/API/Reboot", "Ops": ["I"]},
    {"Id": "Wifi", "Uri": "/API/LAN/WIFI", "Ops": ["R"]},
    {"Id": "WlanInterface", "Uri": "/API/LAN/WIFI/{wlan_ifc}", "Ops": ["R", "W"]},
    {"Id": "WlanAccessPoint", "Uri": "/API/LAN/WIFI/{wlan_ifc}/{wlan_ap}", "Ops": ["R", "W"]},
    {"Id": "WlanSchedule", "Uri": "/API/LAN/WIFI/{wlan_ifc}/{wlan_ap}/Schedule", "Ops": ["R", "A", "D"]},
    {"Id": "WlanScheduleEnable", "Uri": "/API/LAN/WIFI/{wlan_ifc}/{wlan_ap}/Schedule/Enable", "Ops": ["R", "W"]},
    {"Id": "ConnectedDevices", "Uri": "/API/Hosts", "Ops": ["R"]},
    {"Id": "ConnectedDevicesMac", "Uri": "/API/Hosts/{mac}", "Ops": ["R", "W"]},
    {"Id": "PcDevicesMac", "Uri": "/API/ParentalControl/Devices/{mac}", "Ops": ["R", "W"]},
    {"Id": "PcDevicesMacSchedules", "Uri": "/API/ParentalControl/Devices/{mac}/Schedules", "Ops": ["R", "A", "D"]},
]


@pytest.fixture(name="json_response")
def fixture_json_response():
    """Factory for a TransportResponse carrying a JSON payload."""
    def _make(payload, status=200):
        return TransportResponse(status_code=status, headers={"Content-Type": "application/json"},
                                 content=json.dumps(payload).encode("utf-8"))
    return _make


@pytest.fixture(name="capabilities_payload")
def fixture_capabilities_payload():
    return {"Features": [dict(feature) for feature in ROUTER_FEATURES]}


@pytest.fixture(name="transport")
def fixture_transport():
    return MagicMock(spec=HTTPTransport)


@pytest.fixture(name="configuration")
def fixture_configuration():
    return LiveboxClientConfiguration.from_string(BASE_URL, username="UsrAdmin", password="secret")


@pytest.fixture(name="router")
def fixture_router(configuration, transport):
    """PyLiveboxLocal on a mocked transport, nothing discovered yet."""
    return PyLiveboxLocal(configuration, transport=transport, logging_config=LoggingConfiguration.silent())


@pytest.fixture(name="ready_router")
def fixture_ready_router(router, transport, json_response, capabilities_payload):
    """PyLiveboxLocal with the ROUTER_FEATURES discovered and the transport call history cleared."""
    transport.send.return_value = json_response(capabilities_payload)
    router.discover_capabilities()
    transport.reset_mock()
    return router
