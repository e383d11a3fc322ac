import pytest
from onrates.enums import AveragingMethod, Segment
from onrates.enums.generics import Err, NoInput, Ok, _drb
from onrates.enums.parameters import _get_averaging_method


@pytest.mark.parametrize(
    ("method", "expected"),
    [
        ("approx", AveragingMethod.Approximated),
        ("APPROXIMATED", AveragingMethod.Approximated),
        ("forward", AveragingMethod.Forward),
        ("exact", AveragingMethod.Forward),
        (AveragingMethod.Forward, AveragingMethod.Forward),
    ],
)
def test_get_averaging_method(method, expected) -> None:
    assert _get_averaging_method(method) is expected


def test_get_averaging_method_raises() -> None:
    with pytest.raises(ValueError, match="is not a valid option"):
        _get_averaging_method("compounded")


def test_segment_str() -> None:
    assert str(Segment.CutOff) == "CutOff"
    assert [str(_) for _ in Segment] == ["Realized", "Approximated", "CutOff"]


def test_drb() -> None:
    assert _drb(1, NoInput(0)) == 1
    assert _drb(1, 2) == 2


def test_noinput_members() -> None:
    assert [_.name for _ in NoInput] == ["blank"]
    assert NoInput(0) is NoInput.blank


def test_result() -> None:
    ok = Ok(2.0)
    assert ok.is_ok and not ok.is_err
    assert ok.unwrap() == 2.0

    err = Err(ValueError("bad"))
    assert err.is_err and not err.is_ok
    with pytest.raises(ValueError, match="bad"):
        err.unwrap()
