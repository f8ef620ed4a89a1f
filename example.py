# Example: pyLivebox Usage Demo
# ------------------------------
# This script connects to a Livebox (or compatible) router, discovers its
# features and prints a few of them.
#
# Usage:
#   - Set the router address and password below, or use a .env file with the following variables:
#       LIVEBOX_URL, LIVEBOX_USERNAME, LIVEBOX_PASSWORD
#   - Run: python example.py

import os

import dotenv

import pylivebox
from pylivebox import FeatureID, Operation

# Load environment variables from .env file if present
dotenv.load_dotenv()

# Enable debug logging for more verbose output (optional for learning)
# pylivebox.set_debug(True)

url = os.getenv('LIVEBOX_URL', "http://192.168.1.1")
username = os.getenv('LIVEBOX_USERNAME', "UsrAdmin")
password = os.getenv('LIVEBOX_PASSWORD', "password")

# Connect and check the credentials (discovers the router features)
print(f"Connecting to router at {url}...")
lb = pylivebox.Livebox(url)
if not lb.login(password, username):
    raise SystemExit("Router did not report any feature")

# --- Router Info ---
info = lb.get_general_info()
print("Router: %s %s - Firmware: %s" % (info.manufacturer, info.model_name, info.software_version))
print("Uptime: %ss - Reboots: %s\n" % (info.up_time, info.number_of_reboots))

# --- Features ---
print("Features exposed: %d" % len(lb.client.capabilities.features))
print("Reboot supported: %s\n" % lb.supports_feature(FeatureID.REBOOT, Operation.INVOKE))

# --- WiFi ---
for wifi in lb.get_wifi_interfaces():
    if not wifi.is_wifi_interface:
        continue
    print("WiFi %s (%s) is %s" % (wifi.id, wifi.frequency.value, wifi.status.value))
    wlan = lb.get_wlan_interface(wifi.id)
    for ap in wlan.access_points:
        print("   AP %s: SSID %s (%s)" % (ap.idx, ap.ssid, ap.status.value))
print("")

# --- Devices ---
for device in lb.get_connected_devices():
    state = "active" if device.active else "inactive"
    print("%-18s %-16s %-24s %s" % (device.phys_address, device.ip_address, device.host_name, state))

# --- Raw JSON for any discovered feature ---
# print(lb.invoke(FeatureID.WAN))

lb.close()
