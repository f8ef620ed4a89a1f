import pytest
from pydantic import ValidationError

from pylivebox.capabilities import Capabilities, Feature, Operation


def feature(id, uri, *ops):
    return Feature(id=id, uri=uri, ops=ops)


def test_feature_from_dict():
    feature = Feature.from_dict({"Id": "WlanInterface", "Uri": "/API/LAN/WIFI/{wlan_ifc}", "Ops": ["R", "W"]})
    assert feature.id == "WlanInterface"
    assert feature.ops == (Operation.READ, Operation.WRITE)
    assert feature.supports(Operation.WRITE)
    assert not feature.supports(Operation.DELETE)


def test_operation_letters_are_case_insensitive():
    assert Feature.from_dict({"Id": "X", "Uri": "/x", "Ops": ["r", "q"]}).ops == (Operation.READ, Operation.QUERY)


def test_unknown_operation_letter_is_a_decode_error():
    with pytest.raises(ValidationError):
        Feature.from_dict({"Id": "X", "Uri": "/x", "Ops": ["Z"]})


def test_missing_ops_is_a_decode_error():
    with pytest.raises(ValidationError) as excinfo:
        Feature.from_dict({"Id": "X", "Uri": "/x"})
    assert excinfo.value.errors()[0]["loc"] == ("Ops",)


def test_path_variable_names_in_order_with_duplicates():
    assert feature("X", "/a/{first}/b/{second}/{first}").get_path_variable_names() == ["first", "second", "first"]


def test_no_path_variables():
    assert feature("GeneralInfo", "/API/GeneralInfo").get_path_variable_names() == []


def test_get_path_substitutes_every_occurrence():
    path = feature("X", "/API/LAN/WIFI/{wlan_ifc}/{wlan_ap}/{wlan_ifc}").get_path({"wlan_ifc": "wl0", "wlan_ap": "AABB"})
    assert path == "/API/LAN/WIFI/wl0/AABB/wl0"


def test_get_path_leaves_unresolved_placeholders():
    assert feature("X", "/API/LAN/WIFI/{wlan_ifc}/{wlan_ap}").get_path({"wlan_ifc": "wl0"}) == \
        "/API/LAN/WIFI/wl0/{wlan_ap}"


def test_capabilities_round_trip_dict():
    payload = {"Features": [{"Id": "Reboot", "Uri": "/API/Reboot", "Ops": ["I"]}]}
    capabilities = Capabilities.from_dict(payload)
    assert capabilities.feature_ids() == ["Reboot"]
    assert capabilities.to_dict() == payload


def test_index_later_duplicates_win():
    capabilities = Capabilities(features=(feature("A", "/first", Operation.READ),
                                          feature("A", "/second", Operation.WRITE)))
    assert capabilities.index()["A"].uri == "/second"
    assert len(capabilities) == 2


def test_unrelated_keys_are_ignored():
    capabilities = Capabilities.from_dict({"Features": [], "Version": 2})
    assert capabilities.feature_ids() == []


def test_missing_features_key():
    with pytest.raises(ValidationError):
        Capabilities.from_dict({"FeatureList": []})


def test_capabilities_are_immutable():
    capabilities = Capabilities(features=())
    with pytest.raises(ValidationError):
        capabilities.features = (feature("A", "/a"),)
