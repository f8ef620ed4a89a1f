import json
from unittest.mock import patch

import pytest

from pylivebox import __main__ as cli
from pylivebox import version
from pylivebox.capabilities import Capabilities, Feature, Operation
from pylivebox.exceptions import HTTPError
from pylivebox.models import GeneralInfo, Wifi, WifiStatus, Frequency


@pytest.fixture(name="livebox")
def fixture_livebox(monkeypatch):
    for name in ("LIVEBOX_URL", "LIVEBOX_USERNAME", "LIVEBOX_PASSWORD", "LIVEBOX_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    with patch("pylivebox.__main__.dotenv.load_dotenv"), patch("pylivebox.__main__.Livebox") as livebox:
        yield livebox


def test_version(livebox, capsys):
    assert cli.main(["version"]) == 0
    assert version in capsys.readouterr().out
    livebox.assert_not_called()


def test_no_arguments_prints_help(livebox, capsys):
    assert cli.main([]) == 1
    assert "usage" in capsys.readouterr().err.lower()


def test_capabilities_text(livebox, capsys):
    lb = livebox.return_value
    lb.client.capabilities = Capabilities(features=(Feature(id="Reboot", uri="/API/Reboot", ops=(Operation.INVOKE,)),))

    assert cli.main(["capabilities", "-url", "http://10.0.0.1", "-password", "secret"]) == 0

    livebox.assert_called_once_with("http://10.0.0.1", timeout=60.0)
    lb.login.assert_called_once_with("secret", "UsrAdmin")
    out = capsys.readouterr().out
    assert "Reboot" in out and "/API/Reboot" in out
    lb.close.assert_called_once()


def test_info_json_without_password(livebox, capsys):
    lb = livebox.return_value
    lb.get_general_info.return_value = GeneralInfo(
        manufacturer="Sagemcom", model_name="Livebox 6", product_class="Livebox", serial_number="S1",
        hardware_version="1", software_version="2")

    assert cli.main(["info", "-format", "json", "-password", ""]) == 0

    lb.login.assert_not_called()
    lb.get_capabilities.assert_called_once()
    assert json.loads(capsys.readouterr().out)["ModelName"] == "Livebox 6"


def test_wifi_skips_global_entry(livebox, capsys):
    lb = livebox.return_value
    lb.get_wifi_interfaces.return_value = [
        Wifi(wifi_status_button=True),
        Wifi(id="wl0", status=WifiStatus.UP, frequency=Frequency.GHZ_5),
    ]
    assert cli.main(["wifi", "-password", "pw", "-format", "json"]) == 0
    assert [w["Id"] for w in json.loads(capsys.readouterr().out)] == ["wl0"]


def test_environment_settings(livebox, monkeypatch):
    monkeypatch.setenv("LIVEBOX_URL", "https://livebox.home")
    monkeypatch.setenv("LIVEBOX_TIMEOUT", "5")
    livebox.return_value.get_connected_devices.return_value = []
    assert cli.main(["devices"]) == 0
    livebox.assert_called_once_with("https://livebox.home", timeout=5.0)


def test_router_error(livebox, capsys):
    lb = livebox.return_value
    lb.login.side_effect = HTTPError(500)
    assert cli.main(["info", "-password", "pw"]) == 1
    assert "ERROR: HTTP error: 500" in capsys.readouterr().out
    lb.close.assert_called_once()


def test_no_features_reported(livebox, capsys):
    livebox.return_value.login.return_value = False
    assert cli.main(["devices", "-password", "pw"]) == 1
    assert "did not report any feature" in capsys.readouterr().out
