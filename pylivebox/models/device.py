import logging
from datetime import datetime
from enum import Enum
from typing import Optional

from dateutil import parser as dateparser
from pydantic import Field, StrictInt

from pylivebox.codecs import FlexibleInt, LiveboxModel, decode_enum, enum_field
from pylivebox.models.schedule import ScheduleState

log = logging.getLogger(__name__)


class InterfaceType(Enum):
    ETHERNET = "Ethernet"
    WIFI = "Wifi"
    WIFI24 = "Wifi24"
    WIFI50 = "Wifi50"
    UNKNOWN = "Unknown"


class DeviceInfo(LiveboxModel):
    """Entry of the connected devices list."""
    phys_address: str = Field(alias="physAddress")
    ip_address: str = Field(alias="ipAddress")
    ip_v6_address: str = Field(alias="ipV6Address")
    host_name: str = Field(alias="hostName")
    alias: str = Field(alias="alias")
    interface_type: str = Field(alias="interfaceType")
    active: bool = Field(alias="active")


class DeviceDetail(LiveboxModel):
    phys_address: str = Field(alias="physAddress")
    ip_address: str = Field(alias="ipAddress")
    ip_v6_address: str = Field(alias="ipV6Address")
    address_source: Optional[str] = Field(None, alias="addressSource")
    detected_types: Optional[str] = Field(None, alias="detectedTypes")
    host_name: str = Field(alias="hostName")
    alias: str = Field(alias="alias")
    ssid: str = Field(alias="SSID")
    active: bool = Field(alias="active")
    lease_time_remaining: FlexibleInt = Field(None, alias="leaseTimeRemaining")
    last_connection: str = Field(alias="lastConnection")
    tags: str = Field(alias="tags")
    # A number on every firmware seen so far, no string form accepted
    layer2_interface: StrictInt = Field(alias="layer2Interface")
    interface_type: str = Field(alias="interfaceType")
    device_type: str = Field(alias="deviceType")
    device_id: str = Field(alias="deviceID")
    vendor_class_id: Optional[str] = Field(None, alias="vendorClassID")
    client_id: Optional[str] = Field(None, alias="clientID")
    user_class_id: Optional[str] = Field(None, alias="userClassID")
    upnp_names: Optional[str] = Field(None, alias="uPnPNames")
    mdns_names: Optional[str] = Field(None, alias="mDNSNames")
    lltd_device: Optional[bool] = Field(None, alias="lLTDDevice")
    manufacturer_oui: Optional[str] = Field(None, alias="manufacturerOUI")
    serial_number: Optional[str] = Field(None, alias="serialNumber")
    product_class: Optional[str] = Field(None, alias="productClass")
    device_icon: Optional[str] = Field(None, alias="deviceIcon")
    device_location: Optional[str] = Field(None, alias="deviceLocation")
    device_source: Optional[str] = Field(None, alias="deviceSource")

    @property
    def interface(self) -> InterfaceType:
        return decode_enum(InterfaceType, self.interface_type, InterfaceType.UNKNOWN)

    @property
    def last_connection_time(self) -> Optional[datetime]:
        if not self.last_connection:
            return None
        try:
            return dateparser.isoparse(self.last_connection)
        except (ValueError, OverflowError) as exc:
            log.debug(f"unable to parse lastConnection '{self.last_connection}': {exc}")
            return None


class DeviceScheduleStatus(LiveboxModel):
    mac: str = Field(alias="MAC")
    status: enum_field(ScheduleState) = Field(alias="Status")

    @property
    def enabled(self) -> bool:
        return self.status == ScheduleState.ENABLED
