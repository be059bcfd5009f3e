import math

from bounded_stat.models.stat_options import StatOptions, MOD_PROPERTIES


def test_defaults_when_empty():
    opts = StatOptions.from_dict({})
    assert opts.base_value == 0
    assert opts.proxy_value == 0
    assert opts.proxy_value_previous == 0
    assert opts.minimum_value == -math.inf
    assert opts.maximum_value == math.inf
    assert opts.minimum_boundary == -10
    assert opts.maximum_boundary == 10
    assert opts.increment_by is None
    assert opts.round_to_increment is False
    assert opts.cancel_on_min_max_breach is False

def test_proxy_starts_from_base_when_absent():
    opts = StatOptions.from_dict({"base_value": 7})
    assert opts.proxy_value == 7
    assert opts.proxy_value_previous == 7

def test_proxy_override():
    opts = StatOptions.from_dict({"base_value": 7, "proxy_value": 3})
    assert opts.base_value == 7
    assert opts.proxy_value == 3
    assert opts.proxy_value_previous == 3

def test_non_numeric_options_fall_back():
    opts = StatOptions.from_dict({
        "base_value": "lots",
        "minimum_value": None,
        "maximum_value": float("nan"),
        "maximum_boundary": True,
        "minimum_boundary": [1, 2],
    })
    assert opts.base_value == 0
    assert opts.minimum_value == -math.inf
    assert opts.maximum_value == math.inf
    assert opts.maximum_boundary == 10
    assert opts.minimum_boundary == -10

def test_numeric_strings_are_accepted():
    opts = StatOptions.from_dict({"base_value": "12.5", "maximum_value": "20"})
    assert opts.base_value == 12.5
    assert opts.maximum_value == 20

def test_increment_disabled_for_zero_infinite_or_junk():
    assert StatOptions.from_dict({"increment_by": 0}).increment_by is None
    assert StatOptions.from_dict({"increment_by": "inf"}).increment_by is None
    assert StatOptions.from_dict({"increment_by": False}).increment_by is None
    assert StatOptions.from_dict({"increment_by": "one"}).increment_by is None
    assert StatOptions.from_dict({"increment_by": 0.5}).increment_by == 0.5

def test_flags_read_by_truthiness():
    opts = StatOptions.from_dict({"round_to_increment": 1, "cancel_on_min_max_breach": "yes"})
    assert opts.round_to_increment is True
    assert opts.cancel_on_min_max_breach is True

def test_identifiers_are_opaque():
    opts = StatOptions.from_dict({"id": 42, "name": ["not", "a", "string"]})
    assert opts.id == 42
    assert opts.name == ["not", "a", "string"]

def test_unknown_keys_ignored():
    opts = StatOptions.from_dict({"colour": "red"})
    assert not hasattr(opts, "colour")

def test_json_dump_and_load_keeps_infinite_bounds():
    opts = StatOptions.from_dict({"name": "HP", "base_value": 5, "minimum_value": 0})
    loaded = StatOptions.from_json(opts.to_json())
    assert loaded.name == "HP"
    assert loaded.base_value == 5
    assert loaded.minimum_value == 0
    assert loaded.maximum_value == math.inf

def test_from_json_bad_input_uses_defaults():
    assert StatOptions.from_json("{not json").base_value == 0
    assert StatOptions.from_json("[1, 2]").maximum_value == math.inf

def test_only_base_value_is_moddable():
    assert MOD_PROPERTIES == ("base_value",)

def test_negative_increment_keeps_its_magnitude():
    assert StatOptions.from_dict({"increment_by": -5}).increment_by == 5
    assert StatOptions.from_dict({"increment_by": "-0.5"}).increment_by == 0.5
