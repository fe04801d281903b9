from pydantic import ValidationError

from clean_paging import BadRequest
from clean_paging import PageInfo
from clean_paging import ValueObject


def test_bad_request_short_str():
    e = BadRequest("bla bla bla")
    assert str(e) == "validation error: bla bla bla"


def test_bad_request_errors_from_str():
    (error,) = BadRequest("bla").errors()
    assert error["type"] == "value_error"
    assert error["msg"] == "bla"


class Book(ValueObject):
    title: str


def test_bad_request_from_validation_error():
    try:
        Book()
    except ValidationError as e:
        err = BadRequest(e)

    assert str(err) == "validation error: 'title' Field required"


def test_bad_request_from_invalid_page_info():
    try:
        PageInfo(page=0, page_size=20)
    except ValidationError as e:
        err = BadRequest(e)

    assert str(err).startswith("validation error: 'page' ")
    assert err.errors()[0]["loc"] == ("page",)
