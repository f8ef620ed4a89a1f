from enum import Enum
from typing import Optional

from pydantic import AliasChoices, Field

from pylivebox.codecs import FlexibleInt, LiveboxModel, enum_field, open_enum_field


class AccessPointType(Enum):
    HOME = "Home"
    GUEST = "Guest"


class Manner(Enum):
    COMBINED = "Combined"
    SPLIT = "Split"


class Status(Enum):
    UP = "Up"
    DOWN = "Down"


class ChannelConf(Enum):
    AUTO = "Auto"
    AUTO1 = "Auto1"
    AUTO2 = "Auto2"


class BandwidthConf(Enum):
    AUTO = "Auto"
    MHZ_20 = "20MHz"
    MHZ_40 = "40MHz"
    MHZ_80 = "80MHz"
    MHZ_160 = "160MHz"
    MHZ_20_40 = "20/40MHz"
    MHZ_80_40_20 = "80/40/20MHz"


# Fields the router accepts back in a WlanAccessPoint update
MUTABLE_FIELDS = (
    'status', 'ssid', 'password', 'ssid_advertisement_enabled', 'retry_limit', 'wmm_enable',
    'uapsd_enable', 'max_stations', 'ap_bridge_disable', 'channel_conf', 'channel', 'bandwidth_conf', 'mode',
)


class AccessPoint(LiveboxModel):
    # ZTE routers send Idx
    idx: Optional[str] = Field(None, validation_alias=AliasChoices("idx", "Idx"), serialization_alias="idx")
    bssid: str = Field(alias="BSSID")
    type: open_enum_field(AccessPointType) = Field(alias="Type")
    manner: enum_field(Manner) = Field(alias="Manner")
    status: enum_field(Status) = Field(alias="Status")
    ssid: str = Field(alias="SSID")
    password: str = Field(alias="Password")
    ssid_advertisement_enabled: Optional[bool] = Field(None, alias="SSIDAdvertisementEnabled")
    retry_limit: FlexibleInt = Field(None, alias="RetryLimit")
    wmm_capability: Optional[bool] = Field(None, alias="WMMCapability")
    uapsd_capability: Optional[bool] = Field(None, alias="UAPSDCapability")
    wmm_enable: Optional[bool] = Field(None, alias="WMMEnable")
    uapsd_enable: Optional[bool] = Field(None, alias="UAPSDEnable")
    max_stations: FlexibleInt = Field(None, alias="MaxStations")
    ap_bridge_disable: Optional[bool] = Field(None, alias="APBridgeDisable")
    channel_conf: enum_field(ChannelConf) = Field(alias="ChannelConf")
    channel: FlexibleInt = Field(None, alias="Channel")
    # Bandwith (sic) is the spelling on the wire
    bandwidth_conf: open_enum_field(BandwidthConf) = Field(alias="BandwithConf")
    bandwidth: str = Field(alias="Bandwith")
    mode: Optional[str] = Field(None, alias="Mode")
    scheduling_allowed: bool = Field(alias="SchedulingAllowed")

    def copy(self, **changes) -> "AccessPoint":
        """Return a copy with some of the writable fields changed; None values are ignored."""
        unknown = set(changes) - set(MUTABLE_FIELDS)
        if unknown:
            raise TypeError(f"read-only or unknown access point fields: {', '.join(sorted(unknown))}")
        values = dict(self)
        values.update({k: v for k, v in changes.items() if v is not None})
        return type(self)(**values)
