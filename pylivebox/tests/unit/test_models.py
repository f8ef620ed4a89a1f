from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from pylivebox.models import (
    DeviceDetail, DeviceInfo, DeviceScheduleStatus, Frequency, GeneralInfo, InterfaceType, ScheduleState,
    ShortAccessPoint, Wifi, WifiStatus, WlanInterface, wifi_interfaces
)

GENERAL_INFO = {
    "Manufacturer": "Arcadyan",
    "ModelName": "Livebox 5",
    "ProductClass": "Livebox",
    "SerialNumber": "AN0987654321",
    "HardwareVersion": "AR_LB5_1.0",
    "SoftwareVersion": "AR50-fr-4.2",
    "UpTime": 86400,
    "NumberOfReboots": "12",
    "UpgradeOccurred": False,
    "Country": "fr",
}

DEVICE_DETAIL = {
    "physAddress": "AA:BB:CC:DD:EE:FF",
    "ipAddress": "192.168.1.20",
    "ipV6Address": "",
    "addressSource": "DHCP",
    "hostName": "laptop",
    "alias": "Laptop",
    "SSID": "Livebox-1234",
    "active": True,
    "leaseTimeRemaining": "3450",
    "lastConnection": "2024-05-01T10:15:00Z",
    "tags": "lan",
    "layer2Interface": 3,
    "interfaceType": "Wifi50",
    "deviceType": "Computer",
    "deviceID": "ID-1",
}


def test_general_info():
    info = GeneralInfo.from_dict(GENERAL_INFO)
    assert info.up_time == 86400
    assert info.number_of_reboots == 12
    assert info.upgrade_occurred is False
    assert info.router_name is None
    out = info.to_dict()
    assert out["NumberOfReboots"] == 12
    assert "RouterName" not in out


def test_general_info_manufacturer_spelling():
    data = dict(GENERAL_INFO)
    data["ManuFacturer"] = data.pop("Manufacturer")
    assert GeneralInfo.from_dict(data).manufacturer == "Arcadyan"
    assert GeneralInfo.from_dict(data).to_dict()["Manufacturer"] == "Arcadyan"


def test_general_info_prefers_canonical_manufacturer_key():
    data = dict(GENERAL_INFO, ManuFacturer="Other")
    assert GeneralInfo.from_dict(data).manufacturer == "Arcadyan"


def test_general_info_without_manufacturer():
    data = dict(GENERAL_INFO)
    del data["Manufacturer"]
    with pytest.raises(ValidationError) as excinfo:
        GeneralInfo.from_dict(data)
    assert excinfo.value.errors()[0]["loc"] == ("Manufacturer",)


def test_wifi_list_filters_global_entry():
    items = [Wifi.from_dict(d) for d in (
        {"WiFiStatusButton": True},
        {"Id": "wl0", "Status": "Up", "Frequency": "2.4GHz"},
        {"Id": "wl1", "Status": "Down", "Frequency": "5GHz"},
    )]
    assert items[0].id == ""
    assert items[0].status is WifiStatus.UNKNOWN
    assert [w.id for w in wifi_interfaces(items)] == ["wl0", "wl1"]
    assert items[2].frequency is Frequency.GHZ_5


def test_wifi_unknown_values_fall_back():
    wifi = Wifi.from_dict({"Id": "wl2", "Status": "Booting", "Frequency": "60GHz"})
    assert wifi.status is WifiStatus.UNKNOWN
    assert wifi.frequency is Frequency.UNKNOWN


def test_short_access_point_idx_from_bssid():
    ap = ShortAccessPoint.from_dict({"BSSID": "AA:BB:CC:DD:EE:FF", "SSID": "x", "Status": "Up",
                                     "RemainingDuration": "120"})
    assert ap.idx == "AABBCCDDEEFF"
    assert ap.remaining_duration == 120


def test_wlan_interface():
    wlan = WlanInterface.from_dict({
        "Id": "wl0", "Status": "Up", "Frequency": "2.4GHz", "LastChangeTime": "100", "LastChange": 5,
        "AccessPoints": [{"Idx": "ap0", "BSSID": "AA:BB", "SSID": "home", "Status": "Down"}],
    })
    assert wlan.last_change_time == 100
    assert wlan.access_points[0].idx == "ap0"
    assert wlan.to_dict()["AccessPoints"][0]["Status"] == "Down"


def test_device_info():
    device = DeviceInfo.from_dict({
        "physAddress": "AA:BB", "ipAddress": "192.168.1.2", "ipV6Address": "", "hostName": "tv",
        "alias": "TV", "interfaceType": "Ethernet", "active": False,
    })
    assert device.host_name == "tv"
    assert device.to_dict()["physAddress"] == "AA:BB"


def test_device_detail():
    detail = DeviceDetail.from_dict(DEVICE_DETAIL)
    assert detail.lease_time_remaining == 3450
    assert detail.interface is InterfaceType.WIFI50
    assert detail.last_connection_time == datetime(2024, 5, 1, 10, 15, tzinfo=timezone.utc)
    assert detail.address_source == "DHCP"
    assert detail.to_dict()["leaseTimeRemaining"] == 3450


def test_device_detail_strict_layer2_interface():
    data = dict(DEVICE_DETAIL, layer2Interface="3")
    with pytest.raises(ValidationError):
        DeviceDetail.from_dict(data)


def test_device_detail_unknown_interface_and_bad_date():
    detail = DeviceDetail.from_dict(dict(DEVICE_DETAIL, interfaceType="Powerline", lastConnection="yesterday"))
    assert detail.interface is InterfaceType.UNKNOWN
    assert detail.last_connection_time is None


def test_device_schedule_status():
    status = DeviceScheduleStatus(mac="AA:BB", status=ScheduleState.ENABLED)
    assert status.enabled
    assert status.to_dict() == {"MAC": "AA:BB", "Status": "Enabled"}
    assert DeviceScheduleStatus.from_dict({"MAC": "AA:BB", "Status": "Disabled"}).enabled is False


def test_wifi_null_values_use_defaults():
    wifi = Wifi.from_dict({"Id": None, "Status": None, "Frequency": None})
    assert wifi.id == ""
    assert wifi.status is WifiStatus.UNKNOWN
    assert not wifi.is_wifi_interface


def test_wifi_global_entry_encoding():
    assert Wifi.from_dict({"WiFiStatusButton": True}).to_dict() == {
        "WiFiStatusButton": True, "Id": "", "Status": "Unknown", "Frequency": "Unknown",
    }


def test_short_access_point_lowercase_idx():
    ap = ShortAccessPoint.from_dict({"idx": "ap1", "BSSID": "AA:BB", "SSID": "x", "Status": "Up"})
    assert ap.idx == "ap1"
    assert ap.to_dict()["Idx"] == "ap1"


def test_short_access_point_without_bssid():
    with pytest.raises(ValidationError):
        ShortAccessPoint.from_dict({"SSID": "x", "Status": "Up"})


def test_device_detail_rejects_boolean_layer2_interface():
    with pytest.raises(ValidationError):
        DeviceDetail.from_dict(dict(DEVICE_DETAIL, layer2Interface=True))


def test_models_are_hashable():
    info = DeviceInfo(phys_address="AA:BB", ip_address="192.168.1.2", ip_v6_address="", host_name="tv",
                      alias="TV", interface_type="Ethernet", active=True)
    assert len({info, info.model_copy()}) == 1
