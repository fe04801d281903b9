from clean_paging import Previous


def test_initial_value():
    assert Previous().value is None
    assert Previous(3).value == 3


def test_observe_returns_previous():
    previous = Previous(1)
    assert previous.observe(2) == 1
    assert previous.observe(5) == 2
    assert previous.value == 5


def test_observe_first():
    assert Previous().observe("a") is None
