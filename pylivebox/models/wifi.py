from enum import Enum
from typing import Iterable, List, Optional, Tuple

from pydantic import Field, field_validator, model_validator

from pylivebox.codecs import FlexibleInt, LiveboxModel, as_str, decode_first_of_optional, enum_field, remove_colons


class WifiStatus(Enum):
    UP = "Up"
    DOWN = "Down"
    UNKNOWN = "Unknown"


class Frequency(Enum):
    GHZ_2_4 = "2.4GHz"
    GHZ_5 = "5GHz"
    GHZ_6 = "6GHz"
    UNKNOWN = "Unknown"


WifiStatusField = enum_field(WifiStatus, WifiStatus.UNKNOWN)


class Wifi(LiveboxModel):
    """
    Entry of the Wifi feature list.

    The list also carries a global entry holding only WiFiStatusButton;
    is_wifi_interface tells radio interfaces apart from it.
    """
    wifi_status_button: Optional[bool] = Field(None, alias="WiFiStatusButton")
    id: str = Field("", alias="Id")
    status: WifiStatusField = Field(WifiStatus.UNKNOWN, alias="Status")
    frequency: enum_field(Frequency, Frequency.UNKNOWN) = Field(Frequency.UNKNOWN, alias="Frequency")

    @field_validator("id", mode="before")
    @classmethod
    def _null_id(cls, value):
        return "" if value is None else value

    @property
    def is_wifi_interface(self) -> bool:
        return self.wifi_status_button is None and bool(self.id)


def wifi_interfaces(items: Iterable[Wifi]) -> List[Wifi]:
    return [item for item in items if item.is_wifi_interface]


class ShortAccessPoint(LiveboxModel):
    idx: str = Field(alias="Idx")
    bssid: str = Field(alias="BSSID")
    ssid: str = Field(alias="SSID")
    status: WifiStatusField = Field(alias="Status")
    remaining_duration: FlexibleInt = Field(None, alias="RemainingDuration")

    @model_validator(mode="before")
    @classmethod
    def _idx_from_bssid(cls, data):
        # Derived from the BSSID when the router omits it
        if not isinstance(data, dict):
            return data
        idx = decode_first_of_optional(data, ("Idx", "idx"), as_str)
        bssid = data.get("BSSID", data.get("bssid"))
        if idx is None and isinstance(bssid, str):
            idx = remove_colons(bssid)
        return {**data, "Idx": idx} if idx is not None else data


class WlanInterface(LiveboxModel):
    id: str = Field(alias="Id")
    status: WifiStatusField = Field(alias="Status")
    frequency: str = Field(alias="Frequency")
    last_change_time: FlexibleInt = Field(None, alias="LastChangeTime")
    last_change: FlexibleInt = Field(None, alias="LastChange")
    access_points: Tuple[ShortAccessPoint, ...] = Field(alias="AccessPoints")
