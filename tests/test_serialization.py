"""
Tests for serialization.py - dict / YAML 形式
"""
import pytest
import yaml

from jplawid import decode
from jplawid.errors import UnknownLawTypeCode, UnknownMinistryGroup
from jplawid.serialization import dump_yaml, from_dict, load_yaml, to_dict


@pytest.fixture
def joint_order():
    return decode("505M60001024060")


class TestToDict:
    """LawId → dict"""

    def test_ministry_order(self, joint_order):
        assert to_dict(joint_order) == {
            "id": "505M60001024060",
            "era": "REIWA",
            "year": 5,
            "law_type": {
                "code": "M",
                "group": 6,
                "ministries": ["RECONSTRUCTION_AGENCY", "FOREIGN_AFFAIRS", "ENVIRONMENT"],
                "num": 60,
            },
        }

    def test_act(self):
        assert to_dict(decode("345AC0000000089"))["law_type"] == {
            "code": "AC",
            "legislator": "CABINET",
            "num": 89,
        }

    def test_constitution(self):
        assert to_dict(decode("321CONSTITUTION"))["law_type"] == {"code": "CONSTITUTION"}


class TestFromDict:
    """dict → LawId"""

    @pytest.mark.parametrize("s", [
        "505M60001024060",
        "345AC0000000089",
        "321CONSTITUTION",
        "322CO1000000003",
        "427RJNJ09017000",
        "502RPMD03310001",
        "326R00000011009",
    ])
    def test_round_trip(self, s):
        law_id = decode(s)
        assert from_dict(to_dict(law_id)) == law_id

    def test_id_is_optional(self, joint_order):
        data = to_dict(joint_order)
        del data["id"]
        assert from_dict(data) == joint_order

    def test_ministry_order_independent(self, joint_order):
        data = to_dict(joint_order)
        data["law_type"]["ministries"].reverse()
        assert from_dict(data) == joint_order

    def test_id_mismatch(self, joint_order):
        data = to_dict(joint_order)
        data["id"] = "505M60001024061"
        with pytest.raises(ValueError):
            from_dict(data)

    def test_missing_key(self, joint_order):
        data = to_dict(joint_order)
        del data["era"]
        with pytest.raises(ValueError):
            from_dict(data)

    def test_unknown_ministry_name(self, joint_order):
        data = to_dict(joint_order)
        data["law_type"]["ministries"] = ["MINISTRY_OF_MAGIC"]
        with pytest.raises(ValueError):
            from_dict(data)

    @pytest.mark.parametrize("key, value", [
        ("year", "5"),
        ("year", 5.0),
        ("law_type", "M"),
        ("law_type", None),
    ])
    def test_wrong_type_field(self, joint_order, key, value):
        data = to_dict(joint_order)
        data[key] = value
        with pytest.raises(ValueError):
            from_dict(data)

    def test_wrong_type_num(self, joint_order):
        data = to_dict(joint_order)
        data["law_type"]["num"] = "60"
        with pytest.raises(ValueError):
            from_dict(data)

    def test_unknown_code(self, joint_order):
        data = to_dict(joint_order)
        data["law_type"]["code"] = "XX"
        with pytest.raises(UnknownLawTypeCode):
            from_dict(data)

    def test_unknown_group(self, joint_order):
        data = to_dict(joint_order)
        data["law_type"]["group"] = 9
        with pytest.raises(UnknownMinistryGroup):
            from_dict(data)


class TestYaml:
    """YAML 入出力"""

    def test_dump_is_readable(self, joint_order):
        text = dump_yaml(joint_order)
        assert yaml.safe_load(text) == to_dict(joint_order)
        assert text.startswith("id: 505M60001024060\n")

    def test_load_mapping(self, joint_order):
        assert load_yaml(dump_yaml(joint_order)) == joint_order

    def test_load_scalar_id(self):
        assert load_yaml("345AC0000000089") == decode("345AC0000000089")

    def test_load_other(self):
        with pytest.raises(ValueError):
            load_yaml("- 1\n- 2\n")
