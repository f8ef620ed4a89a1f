# pyLivebox Module
# -*- coding: utf-8 -*-
"""
 Python module to interface with Livebox and compatible home routers

 For more information see README.md

 Features
    * Discovers the router features at runtime (/API/Capabilities)
    * Validates every call against the discovered features (operation and path variables)
      before anything is sent to the router
    * HTTP Basic authentication on every request
    * Tolerant decoding of vendor specific JSON (numeric strings, alternative keys,
      unknown enum values)
    * Will re-use http connections to the router for reduced load and faster response times
    * Pluggable HTTP logging and an in-memory client for tests

 Classes
    Livebox(host, username, password, timeout, default_headers, poolmaxsize, verify_ssl,
        client, logging_config)

 Parameters
    host                      # Hostname, IP or base URL of the router (e.g. 192.168.1.1)
    username = None           # Router user (login() defaults to "UsrAdmin")
    password = None           # Router password
    timeout = 60              # Timeout for HTTP calls in seconds
    default_headers = None    # Headers sent with every request
    poolmaxsize = 10          # Pool max size for http connection re-use (persistent
                                connections disabled if zero)
    verify_ssl = True         # If False, accept self-signed router certificates
    client = None             # PyLiveboxBase instance to use instead of PyLiveboxLocal
    logging_config = None     # LoggingConfiguration for HTTP request/response logging

 Functions
    login(password, username)                   # Store credentials and verify them with discovery
    logout()                                    # Forget credentials
    get_capabilities()                          # Discover router features
    invoke(feature_id, ...)                     # Call any discovered feature
    get_general_info()                          # Router identity and firmware
    reboot()                                    # Reboot the router
    get_wifi_interfaces()                       # List of Wifi entries
    get_wlan_interface(wlan_ifc)                # One WLAN interface with its access points
    get_access_point(wlan_ifc, wlan_ap)         # Access point settings
    update_access_point(wlan_ifc, wlan_ap, ap)  # Write access point settings
    get_connected_devices()                     # Devices known to the router
    get_device_detail(mac)                      # Details of one device
    set_device_alias(mac, alias)                # Rename a device
    get_device_schedules(mac)                   # Parental control schedules of a device
    add_device_schedules(mac, schedules)        # Enable scheduling and add slots
    delete_device_schedules(mac, schedules)     # Remove slots
    change_device_schedule_status(mac, status)  # Enable / disable device scheduling
    get_wlan_schedules(wlan_ifc, wlan_ap)       # WLAN schedules
    add_wlan_schedules(...)                     # Add WLAN schedule slots
    delete_wlan_schedules(...)                  # Remove WLAN schedule slots
    get_wlan_schedule_status(wlan_ifc, wlan_ap) # WLAN scheduling enabled?
    change_wlan_schedule_status(...)            # Enable / disable WLAN scheduling

 Requirements
    This module requires the following modules: requests, python-dateutil
    pip install requests python-dateutil
"""
import logging
import sys
from typing import Any, Callable, Dict, List, Mapping, Optional

# noinspection PyPackageRequirements
import urllib3

version_tuple = (0, 1, 0)
version = __version__ = '%d.%d.%d' % version_tuple
__author__ = 'pylivebox'

from pylivebox.capabilities import Capabilities, Feature, Operation
from pylivebox.codecs import list_of, remove_colons
from pylivebox.config import LiveboxClientConfiguration, DEFAULT_TIMEOUT
from pylivebox.dispatcher import HTTPMethod, passthrough
from pylivebox.exceptions import LiveboxError
from pylivebox.feature_id import FeatureID
from pylivebox.local.pylivebox_local import PyLiveboxLocal
from pylivebox.logger import LoggingConfiguration
from pylivebox.models import (
    AccessPoint, DeviceDetail, DeviceInfo, DeviceScheduleStatus, GeneralInfo, Schedule, ScheduleState,
    Wifi, WlanInterface, WlanScheduleStatus
)
from pylivebox.pylivebox_base import PyLiveboxBase
from pylivebox.transport import RequestsTransport

DEFAULT_USERNAME = "UsrAdmin"

log = logging.getLogger(__name__)
log.debug('%s version %s', __name__, __version__)
log.debug('Python %s on %s', sys.version, sys.platform)


def set_debug(toggle=True, color=True):
    """Enable verbose logging"""
    if toggle:
        if color:
            logging.basicConfig(format='\x1b[31;1m%(levelname)s:%(name)s:%(message)s\x1b[0m', level=logging.DEBUG)
        else:
            logging.basicConfig(format='%(levelname)s:%(name)s:%(message)s', level=logging.DEBUG)
        log.setLevel(logging.DEBUG)
        log.debug("%s [%s]\n" % (__name__, __version__))
    else:
        log.setLevel(logging.NOTSET)


def base_url_for(host: str) -> str:
    """Accept a bare host or IP and turn it into an http base URL."""
    if "://" in host:
        return host
    return f"http://{host}"


# pylint: disable=too-many-public-methods
class Livebox(object):
    def __init__(self, host="", username=None, password=None, timeout=DEFAULT_TIMEOUT,
                 default_headers=None, poolmaxsize=10, verify_ssl=True,
                 client: Optional[PyLiveboxBase] = None, logging_config: Optional[LoggingConfiguration] = None):
        """
        Represents a Livebox (or compatible) router.

        Args:
            host            = Hostname, IP address or base URL of the router (e.g. 192.168.1.1)
            username        = Router user, None for anonymous access
            password        = Router password
            timeout         = Seconds for the timeout on http requests
            default_headers = Headers added to every request
            poolmaxsize     = Pool max size for http connection re-use (persistent connections disabled if zero)
            verify_ssl      = If False, do not verify the router certificate
            client          = Use this client (e.g. PyLiveboxMock) instead of connecting over HTTP
            logging_config  = HTTP logging configuration (default logs to the pylivebox.http logger)
        """
        self.client: PyLiveboxBase
        if client is not None:
            self.client = client
        else:
            if not verify_ssl:
                urllib3.disable_warnings()  # Disable SSL warnings
            configuration = LiveboxClientConfiguration.from_string(
                base_url_for(host), timeout=timeout, default_headers=default_headers,
                username=username, password=password)
            transport = RequestsTransport(poolmaxsize=poolmaxsize, verify=verify_ssl)
            self.client = PyLiveboxLocal(configuration, transport=transport, logging_config=logging_config,
                                         poolmaxsize=poolmaxsize)
        # Credentials given up front are assumed valid until a call says otherwise
        self.is_authenticated = self.client.configuration.has_credentials
        self.capabilities_fetched = False

    # Session bookkeeping

    @property
    def base_url(self) -> str:
        return self.client.configuration.base_url

    @property
    def current_username(self) -> Optional[str]:
        return self.client.configuration.username

    def login(self, password: str, username: str = DEFAULT_USERNAME) -> bool:
        """
        Store credentials and check them by discovering the router features.

        Returns True when the router exposes at least one feature. On failure
        the previous credentials are restored and the error is raised.
        """
        previous = self.client.configuration
        self.client.update_credentials(username, password)
        try:
            capabilities = self.client.discover_capabilities()
        except Exception as exc:
            log.debug(f"login failed for {username}: {exc}")
            self.client.update_credentials(previous.username, previous.password)
            raise
        self.is_authenticated = True
        self.capabilities_fetched = True
        return len(capabilities.features) > 0

    def logout(self):
        self.client.update_credentials(None, None)
        self.is_authenticated = False
        self.capabilities_fetched = False

    def update_credentials(self, username: Optional[str], password: Optional[str]):
        self.client.update_credentials(username, password)
        self.is_authenticated = username is not None and password is not None

    def update_base_url(self, base_url: str, clear_capabilities: bool = False):
        self.client.update_base_url(base_url_for(base_url), clear_cache=clear_capabilities)
        if clear_capabilities:
            self.capabilities_fetched = False

    def close(self):
        self.client.close()

    # Generic access

    def get_capabilities(self) -> Capabilities:
        capabilities = self.client.discover_capabilities()
        self.capabilities_fetched = True
        return capabilities

    def get_feature(self, feature_id) -> Optional[Feature]:
        return self.client.get_feature(feature_id)

    def supports_feature(self, feature_id, operation: Operation) -> bool:
        return self.client.supports_feature(feature_id, operation)

    def invoke(self, feature_id, path_variables: Optional[Mapping[str, str]] = None,
               method: HTTPMethod = HTTPMethod.GET, headers: Optional[Mapping[str, str]] = None,
               body: Any = None, decoder: Optional[Callable[[Any], Any]] = passthrough) -> Any:
        """Call any discovered feature; returns the raw JSON unless a decoder is given."""
        return self.client.invoke(feature_id, path_variables, method, headers, body, decoder)

    # Router

    def get_general_info(self) -> GeneralInfo:
        return self.client.invoke(FeatureID.GENERAL_INFO, decoder=GeneralInfo.from_dict)

    def reboot(self):
        self.client.invoke_action(FeatureID.REBOOT)

    # WiFi

    def get_wifi_interfaces(self) -> List[Wifi]:
        return self.client.invoke(FeatureID.WIFI, decoder=list_of(Wifi))

    def get_wlan_interface(self, wlan_ifc: str) -> WlanInterface:
        return self.client.invoke(FeatureID.WLAN_INTERFACE, {"wlan_ifc": wlan_ifc},
                                  decoder=WlanInterface.from_dict)

    def get_access_point(self, wlan_ifc: str, wlan_ap: str) -> AccessPoint:
        return self.client.invoke(FeatureID.WLAN_ACCESS_POINT, self._ap_vars(wlan_ifc, wlan_ap),
                                  decoder=AccessPoint.from_dict)

    def update_access_point(self, wlan_ifc: str, wlan_ap: str, access_point: AccessPoint) -> AccessPoint:
        return self.client.invoke(FeatureID.WLAN_ACCESS_POINT, self._ap_vars(wlan_ifc, wlan_ap),
                                  HTTPMethod.PUT, body=access_point, decoder=AccessPoint.from_dict)

    # Devices

    def get_connected_devices(self) -> List[DeviceInfo]:
        return self.client.invoke(FeatureID.CONNECTED_DEVICES, decoder=list_of(DeviceInfo))

    def get_device_detail(self, mac: str) -> DeviceDetail:
        return self.client.invoke(FeatureID.CONNECTED_DEVICES_MAC, self._mac_vars(mac),
                                  decoder=DeviceDetail.from_dict)

    def set_device_alias(self, mac: str, alias: str) -> DeviceDetail:
        return self.client.invoke(FeatureID.CONNECTED_DEVICES_MAC, self._mac_vars(mac), HTTPMethod.PUT,
                                  body={"alias": alias}, decoder=DeviceDetail.from_dict)

    def get_device_schedules(self, mac: str) -> List[Schedule]:
        return self.client.invoke(FeatureID.PC_DEVICES_MAC_SCHEDULES, self._mac_vars(mac),
                                  decoder=list_of(Schedule))

    def add_device_schedules(self, mac: str, schedules: List[Schedule]) -> List[Schedule]:
        # Slots are ignored by the router while scheduling is disabled for the device
        self.change_device_schedule_status(mac, DeviceScheduleStatus(mac=mac, status=ScheduleState.ENABLED))
        return self.client.invoke(FeatureID.PC_DEVICES_MAC_SCHEDULES, self._mac_vars(mac), HTTPMethod.POST,
                                  body=list(schedules), decoder=list_of(Schedule))

    def change_device_schedule_status(self, mac: str, status: DeviceScheduleStatus):
        self.client.invoke(FeatureID.PC_DEVICES_MAC, self._mac_vars(mac), HTTPMethod.PUT, body=status)

    def delete_device_schedules(self, mac: str, schedules: List[Schedule]) -> List[Schedule]:
        return self.client.invoke(FeatureID.PC_DEVICES_MAC_SCHEDULES, self._mac_vars(mac), HTTPMethod.DELETE,
                                  body=list(schedules), decoder=list_of(Schedule))

    # WLAN schedules

    def get_wlan_schedules(self, wlan_ifc: str, wlan_ap: str) -> List[Schedule]:
        return self.client.invoke(FeatureID.WLAN_SCHEDULE, self._ap_vars(wlan_ifc, wlan_ap),
                                  decoder=list_of(Schedule))

    def add_wlan_schedules(self, wlan_ifc: str, wlan_ap: str, schedules: List[Schedule]) -> List[Schedule]:
        return self.client.invoke(FeatureID.WLAN_SCHEDULE, self._ap_vars(wlan_ifc, wlan_ap), HTTPMethod.POST,
                                  body=list(schedules), decoder=list_of(Schedule))

    def delete_wlan_schedules(self, wlan_ifc: str, wlan_ap: str, schedules: List[Schedule]) -> List[Schedule]:
        return self.client.invoke(FeatureID.WLAN_SCHEDULE, self._ap_vars(wlan_ifc, wlan_ap), HTTPMethod.DELETE,
                                  body=list(schedules), decoder=list_of(Schedule))

    def get_wlan_schedule_status(self, wlan_ifc: str, wlan_ap: str) -> WlanScheduleStatus:
        return self.client.invoke(FeatureID.WLAN_SCHEDULE_ENABLE, self._ap_vars(wlan_ifc, wlan_ap),
                                  decoder=WlanScheduleStatus.from_dict)

    def change_wlan_schedule_status(self, wlan_ifc: str, wlan_ap: str, status: WlanScheduleStatus):
        self.client.invoke(FeatureID.WLAN_SCHEDULE_ENABLE, self._ap_vars(wlan_ifc, wlan_ap), HTTPMethod.PUT,
                           body=status)

    @staticmethod
    def _mac_vars(mac: str) -> Dict[str, str]:
        return {"mac": remove_colons(mac)}

    @staticmethod
    def _ap_vars(wlan_ifc: str, wlan_ap: str) -> Dict[str, str]:
        return {"wlan_ifc": wlan_ifc, "wlan_ap": remove_colons(wlan_ap)}
