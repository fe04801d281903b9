import pytest

from clean_paging import BadRequest
from clean_paging import FetchOptions


def test_defaults():
    options = FetchOptions()
    assert options.default_current == 1
    assert options.default_page_size == 20
    assert options.effects == ()
    assert options.on_load is None
    assert options.on_request_error is None


@pytest.mark.parametrize("value", [0, None])
def test_default_current_unset(value):
    assert FetchOptions(default_current=value).default_current == 1


def test_effects_from_list():
    assert FetchOptions(effects=["a", 1]).effects == ("a", 1)


@pytest.mark.parametrize(
    "values", [{"default_page_size": 0}, {"default_current": -1}, {"on_load": 3}]
)
def test_invalid(values):
    with pytest.raises(BadRequest):
        FetchOptions.create(**values)
