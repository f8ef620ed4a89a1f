# pyLivebox Module - Command Line
# -*- coding: utf-8 -*-
"""
 Python module to interface with Livebox and compatible home routers

 Command Line:
    python -m pylivebox [-debug] <capabilities|info|wifi|devices|version>

 Settings are read from the command line, then from the environment or a
 .env file: LIVEBOX_URL, LIVEBOX_USERNAME, LIVEBOX_PASSWORD, LIVEBOX_TIMEOUT
"""

import argparse
import json
import os
import sys

import dotenv

# Modules
from pylivebox import DEFAULT_USERNAME, Livebox, LiveboxError, set_debug, version
from pylivebox.dispatcher import to_json_value

# Global Variables
DEFAULT_URL = "http://192.168.1.1"


def build_parser(url, username, password, timeout):
    p = argparse.ArgumentParser(prog="PyLivebox", description=f"PyLivebox Module v{version}")
    subparsers = p.add_subparsers(dest="command", title='commands (run <command> -h to see usage information)',
                                  required=True)
    for name, help_text in (("capabilities", "List the features exposed by the router"),
                            ("info", "Show router general information"),
                            ("wifi", "Show WiFi interfaces"),
                            ("devices", "List connected devices")):
        cmd = subparsers.add_parser(name, help=help_text)
        cmd.add_argument("-url", type=str, default=url, help=f"Router base URL [Default={url}]")
        cmd.add_argument("-username", type=str, default=username, help="Router user")
        cmd.add_argument("-password", type=str, default=password, help="Router password")
        cmd.add_argument("-timeout", type=float, default=timeout, help=f"Seconds per request [Default={timeout}]")
        cmd.add_argument("-format", type=str, default="text", choices=["text", "json"],
                         help="Output format: text or json")
    subparsers.add_parser("version", help='Print version information')
    # Add a global debug flag
    p.add_argument("-debug", action="store_true", default=False, help="Enable debug output")
    return p


def print_output(output, fmt):
    if fmt == 'json':
        print(json.dumps(to_json_value(output), indent=2))
        return
    if isinstance(output, dict):
        for item in output:
            print("  {:<28}{}".format(item, output[item]))
    else:
        for row in output:
            print("  " + "  ".join(str(col) for col in row))
    print("")


def run(args) -> int:
    lb = Livebox(args.url, timeout=args.timeout)
    try:
        return query(lb, args)
    finally:
        lb.close()


def query(lb, args) -> int:
    if args.password:
        if not lb.login(args.password, args.username or DEFAULT_USERNAME):
            print("ERROR: Router did not report any feature.")
            return 1
    else:
        lb.get_capabilities()

    if args.command == 'capabilities':
        capabilities = lb.client.capabilities
        if args.format == 'json':
            print_output(capabilities, 'json')
        else:
            print_output([(f.id, "".join(op.value for op in f.ops), f.uri) for f in capabilities.features], 'text')
    elif args.command == 'info':
        info = lb.get_general_info()
        if args.format == 'json':
            print_output(info, 'json')
        else:
            print_output(info.to_dict(), 'text')
    elif args.command == 'wifi':
        interfaces = [w for w in lb.get_wifi_interfaces() if w.is_wifi_interface]
        if args.format == 'json':
            print_output(interfaces, 'json')
        else:
            print_output([(w.id, w.frequency.value, w.status.value) for w in interfaces], 'text')
    elif args.command == 'devices':
        devices = lb.get_connected_devices()
        if args.format == 'json':
            print_output(devices, 'json')
        else:
            print_output([(d.phys_address, d.ip_address, d.host_name, d.interface_type,
                           "active" if d.active else "inactive") for d in devices], 'text')
    return 0


def main(argv=None) -> int:
    # Load environment variables from .env file if present
    dotenv.load_dotenv()
    url = os.getenv("LIVEBOX_URL", DEFAULT_URL)
    username = os.getenv("LIVEBOX_USERNAME", DEFAULT_USERNAME)
    password = os.getenv("LIVEBOX_PASSWORD", "")
    timeout = float(os.getenv("LIVEBOX_TIMEOUT", "60"))

    p = build_parser(url, username, password, timeout)
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) == 0:
        p.print_help(sys.stderr)
        return 1
    args = p.parse_args(argv)

    # Set Debug Mode
    if args.debug:
        set_debug(True)

    if args.command == 'version':
        print("pyLivebox [%s]" % version)
        return 0

    if args.format == 'text':
        print(f"pyLivebox [{version}] - {args.command} from {args.url}\n")
    try:
        return run(args)
    except LiveboxError as exc:
        print(f"ERROR: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
