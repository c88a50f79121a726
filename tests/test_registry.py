import pytest

from easekit import easing as ez
from easekit.easing import Easing, available_easings, get_easing


def test_every_enum_member_registered():
    for easing in Easing:
        assert callable(get_easing(easing))
    assert len(available_easings()) == len(Easing) == 31


def test_lookup_by_name():
    assert get_easing("ease_out_cubic") is ez.ease_out_cubic
    assert get_easing("LINEAR") is ez.linear


@pytest.mark.parametrize("name", [
    "easeOutBounce",
    "ease-out-bounce",
    "EASE_OUT_BOUNCE",
    "  ease_out_bounce ",
])
def test_name_spellings(name):
    assert get_easing(name) is ez.ease_out_bounce


def test_unknown_easing_raises():
    with pytest.raises(ValueError):
        get_easing("nope")


def test_available_easings_order():
    names = available_easings()
    assert names[0] == "linear"
    assert names[-1] == "ease_in_out_bounce"
    assert "ease_in_out_elastic" in names
