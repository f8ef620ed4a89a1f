"""
 Well known router feature identifiers

 Routers only expose a subset of these; the authoritative list is whatever
 /API/Capabilities returns. Every router call accepts either a FeatureID
 member or a plain string id.
"""
from enum import Enum
from typing import Union


class FeatureID(Enum):
    # General information
    CAPABILITIES = ("Capabilities", "Router capabilities")
    GENERAL_INFO = ("GeneralInfo", "General router information")
    REBOOT = ("Reboot", "Reboot the router")
    RESET = ("Reset", "Reset router configuration")
    FULL_RESET = ("FullReset", "Factory reset the router")
    FW_UPGRADE = ("FwUpgrade", "Firmware upgrade")
    AUTOREBOOT = ("Autoreboot", "Automatic reboot configuration")

    # WAN
    WAN = ("Wan", "WAN configuration")
    WAN_SUPPORTED = ("WanSupported", "Supported WAN features")
    DSL = ("Dsl", "DSL configuration")
    DSL_STATS = ("DslStats", "DSL statistics")
    THREE_G = ("3g", "3G configuration")
    THREE_G_NETWORK = ("3gNetwork", "3G network settings")
    THREE_G_PIN = ("3gPin", "3G PIN management")
    THREE_G_PUK = ("3gPuk", "3G PUK management")
    ONT = ("Ont", "ONT configuration")
    ONT_ALARMS = ("OntAlarms", "ONT alarms")
    ONT_GEM = ("OntGem", "ONT GEM statistics")
    ONT_GTC = ("OntGtc", "ONT GTC statistics")
    PPP = ("Ppp", "PPP configuration")
    PPP_RESTART = ("PppRestart", "Restart PPP connection")
    WAN_DHCP = ("WanDhcp", "WAN DHCP configuration")
    WAN_DHCP_RENEW = ("WanDhcpRenew", "Renew WAN DHCP lease")
    WAN_DHCPV6 = ("WanDhcpv6", "WAN DHCPv6 configuration")
    WAN_DHCPV6_RENEW = ("WanDhcpv6Renew", "Renew WAN DHCPv6 lease")

    # WiFi
    WIFI_SUPPORTED = ("WifiSupported", "Supported WiFi features")
    WIFI = ("Wifi", "WiFi interfaces")
    SMART_WIFI = ("SmartWifi", "Smart WiFi configuration")
    WLAN_INTERFACE = ("WlanInterface", "WLAN interface configuration")
    WLAN_SUPPORTED = ("WlanSupported", "Supported WLAN features")
    WLAN_ACCESS_POINT = ("WlanAccessPoint", "WLAN access point configuration")
    WLAN_SECURITY = ("WlanSecurity", "WLAN security settings")
    WLAN_WPS = ("WlanWPS", "WLAN WPS configuration")
    WLAN_WPS_START_PAIRING = ("WlanWpsStartPairing", "Start WLAN WPS pairing")
    WLAN_MAC_FILTERING = ("WlanMacFiltering", "WLAN MAC filtering")
    WLAN_MAC_FILTERING_MAC = ("WlanMacFilteringMac", "WLAN MAC filtering entry")
    WLAN_SCHEDULE = ("WlanSchedule", "WLAN scheduling")
    WLAN_SCHEDULE_ENABLE = ("WlanScheduleEnable", "Enable WLAN scheduling")
    WLAN_SCHEDULE_ID = ("WlanScheduleId", "WLAN schedule entry")
    WLAN_SCHEDULE_DEL_BY_ID = ("WlanScheduleDelById", "Delete WLAN schedule by ID")
    WLAN_SCHEDULE_TEMP_SWITCH_ON = ("WlanScheduleTempSwitchOn", "Temporarily switch on WLAN")
    SCAN_CHANNEL = ("ScanChannel", "Scan WiFi channels")

    # LAN and DHCP
    LAN_DHCP = ("LanDhcp", "LAN DHCP configuration")
    LAN_DHCP_FIXED_IP = ("LanDhcpFixedIp", "DHCP fixed IP addresses")
    LAN_DHCP_FIXED_IP_ID = ("LanDhcpFixedIpId", "DHCP fixed IP address entry")
    CONNECTED_DEVICES = ("ConnectedDevices", "Connected devices")
    CONNECTED_DEVICES_MAC = ("ConnectedDevicesMac", "Connected device details")
    DEVICE_LIST = ("DeviceList", "Device list")

    # Connectivity
    CONNECTIVITY = ("Connectivity", "Connectivity status")
    ETH_PORT = ("EthPort", "Ethernet ports")
    ETH_PORT_ID = ("EthPortId", "Ethernet port configuration")
    USB_PORT = ("UsbPort", "USB ports")
    USB_PORT_ID = ("UsbPortId", "USB port details")
    USB_PORT_ID_EJECT = ("UsbPortIdEject", "Eject USB device")
    FXS_PORT = ("FxsPort", "FXS ports")

    # VoIP
    VOIP = ("VoIP", "VoIP configuration")
    SIP = ("SIP", "SIP configuration")
    SIP_LINES = ("SipLines", "SIP lines")
    SIP_LINES_LINE = ("SipLinesLine", "SIP line configuration")
    SIP_SUBSCRIPTION = ("SipSuscription", "SIP subscription")  # sic, as sent by the router
    H323 = ("H323", "H.323 configuration")
    H323_LINES = ("H323Lines", "H.323 lines")
    H323_LINES_LINE = ("H323LinesLine", "H.323 line configuration")
    SOFTPHONE = ("Softphone", "Softphone configuration")
    SOFTPHONE_PAIRED_CLIENTS = ("SoftphonePairedClients", "Softphone paired clients")
    AUTODIAL = ("Autodial", "Autodial configuration")
    RING = ("Ring", "Ring phone")
    CALL_REGISTRY = ("CallRegistry", "Call registry")

    # Services
    DDNS = ("DDNS", "Dynamic DNS configuration")
    DDNS_PROVIDERS = ("DdnsProviders", "Available DDNS providers")
    PARENTAL_CTRL = ("ParentalCtrl", "Parental control")
    PC_URLS = ("PcUrls", "Parental control")
    PC_URLS_ID = ("PcUrlsId", "Parental control URL entry")
    PARENTAL_CTRL_URLS = ("ParentalCtrlUrls", "Parental control URLs")
    PC_DEVICES = ("PcDevices", "Parental control devices")
    PC_DEVICES_MAC = ("PcDevicesMac", "Parental control device settings")
    PC_DEVICES_MAC_URLS = ("PcDevicesMacUrls", "Parental control device URLs")
    PC_DEVICES_MAC_URLS_ID = ("PcDevicesMacUrlsId", "Parental control device URL entry")
    PC_DEVICES_MAC_SERVICES = ("PcDevicesMacServices", "Parental control device services")
    PC_DEVICES_MAC_SERVICES_ID = ("PcDevicesMacServicesId", "Parental control device service entry")
    PC_DEVICES_MAC_SCHEDULES = ("PcDevicesMacSchedules", "Parental control device schedules")
    PC_DEVICES_MAC_SCHEDULES_ID = ("PcDevicesMacSchedulesId", "Parental control device schedule entry")
    FIREWALL = ("Firewall", "Firewall configuration")
    FIREWALL_SERVICES = ("FirewallServices", "Firewall services")
    FIREWALL_SERVICES_ID = ("FirewallServicesId", "Firewall service entry")
    NAT = ("NAT", "NAT configuration")
    IP_NAT = ("IpNat", "IP NAT rules")
    IP_NAT_ID = ("IpNatId", "IP NAT rule entry")
    PORT_NAT = ("PortNat", "Port NAT rules")
    PORT_NAT_ID = ("PortNatId", "Port NAT rule entry")
    NOTIFICATIONS = ("Notifications", "Notification settings")
    NOTIFICATIONS_EMAIL = ("NotificationsEmail", "Email notification settings")
    QOS = ("Qos", "Quality of Service")
    QOS_SUPPORTED = ("QosSupported", "Supported QoS features")
    QOS_RUN = ("QosRun", "Run QoS analysis")

    # Access control
    ACCESS = ("Access", "Access control")
    ACCESS_LAN_GUI = ("AccessLanGui", "LAN GUI access control")
    ACCESS_WAN_GUI = ("AccessWanGui", "WAN GUI access control")
    ACCESS_WAN_GUI_ALLOW = ("AccessWanGuiAllow", "Allow WAN GUI access")
    ACCESS_OPEN_API = ("AccessOpenApi", "Open API access control")
    ACCESS_LAN_API = ("AccessLanApi", "LAN API access control")
    ACCESS_WAN_API = ("AccessWanApi", "WAN API access control")
    ACCESS_OSP_API = ("AccessOspApi", "OSP API access control")

    # Reporting
    REPORT = ("Report", "System reports")
    REPORT_DISPATCH = ("ReportDispatch", "Dispatch system report")

    def __new__(cls, feature_id, description):
        obj = object.__new__(cls)
        obj._value_ = feature_id
        obj.description = description
        return obj

    @property
    def id(self) -> str:
        return self.value

    def __str__(self):
        return self.value


DEVICE_MANAGEMENT = (
    FeatureID.CONNECTED_DEVICES,
    FeatureID.CONNECTED_DEVICES_MAC,
    FeatureID.DEVICE_LIST,
    FeatureID.PC_DEVICES_MAC,
    FeatureID.PC_DEVICES_MAC_SCHEDULES,
    FeatureID.PC_DEVICES_MAC_SERVICES,
)

WIFI_FEATURES = (
    FeatureID.WIFI,
    FeatureID.WIFI_SUPPORTED,
    FeatureID.SMART_WIFI,
    FeatureID.WLAN_INTERFACE,
    FeatureID.WLAN_ACCESS_POINT,
    FeatureID.WLAN_SECURITY,
    FeatureID.WLAN_WPS,
    FeatureID.WLAN_MAC_FILTERING,
    FeatureID.WLAN_SCHEDULE,
    FeatureID.SCAN_CHANNEL,
)

WAN_FEATURES = (
    FeatureID.WAN,
    FeatureID.WAN_SUPPORTED,
    FeatureID.DSL,
    FeatureID.DSL_STATS,
    FeatureID.PPP,
    FeatureID.WAN_DHCP,
    FeatureID.WAN_DHCPV6,
)

# Features that are triggered with the invoke operation
INVOKE_FEATURES = (
    FeatureID.REBOOT,
    FeatureID.RESET,
    FeatureID.FULL_RESET,
    FeatureID.FW_UPGRADE,
    FeatureID.PPP_RESTART,
    FeatureID.WAN_DHCP_RENEW,
    FeatureID.WAN_DHCPV6_RENEW,
    FeatureID.WLAN_WPS_START_PAIRING,
    FeatureID.WLAN_SCHEDULE_TEMP_SWITCH_ON,
    FeatureID.WLAN_SCHEDULE_DEL_BY_ID,
    FeatureID.USB_PORT_ID_EJECT,
    FeatureID.RING,
    FeatureID.QOS_RUN,
    FeatureID.ACCESS_WAN_GUI_ALLOW,
    FeatureID.REPORT_DISPATCH,
)


def feature_key(feature_id: Union[FeatureID, str]) -> str:
    """String id of a FeatureID member or of a plain string."""
    if isinstance(feature_id, FeatureID):
        return feature_id.value
    return str(feature_id)
