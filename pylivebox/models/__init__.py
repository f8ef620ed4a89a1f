from pylivebox.models.access_point import (
    AccessPoint, AccessPointType, BandwidthConf, ChannelConf, Manner, Status as AccessPointStatus
)
from pylivebox.models.device import DeviceDetail, DeviceInfo, DeviceScheduleStatus, InterfaceType
from pylivebox.models.general_info import GeneralInfo
from pylivebox.models.schedule import (
    Schedule, ScheduleID, ScheduleState, ScheduleStatus, Weekday, WlanScheduleStatus
)
from pylivebox.models.wifi import Frequency, ShortAccessPoint, Wifi, WifiStatus, WlanInterface, wifi_interfaces

__all__ = [
    "AccessPoint", "AccessPointType", "AccessPointStatus", "BandwidthConf", "ChannelConf", "Manner",
    "DeviceDetail", "DeviceInfo", "DeviceScheduleStatus", "InterfaceType",
    "GeneralInfo",
    "Schedule", "ScheduleID", "ScheduleState", "ScheduleStatus", "Weekday", "WlanScheduleStatus",
    "Frequency", "ShortAccessPoint", "Wifi", "WifiStatus", "WlanInterface", "wifi_interfaces",
]
