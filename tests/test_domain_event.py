from clean_paging import DomainEvent
from clean_paging import PaginationChanged
from clean_paging import StateChanged


class TestEvent(DomainEvent, path="test"):
    foo: str


def test_event_subclass():
    class TestEvent(DomainEvent):
        pass

    assert TestEvent.event_path == ("TestEvent",)


def test_event_subclass_with_path():
    class TestEvent(DomainEvent, path="some.path"):
        pass

    assert TestEvent.event_path == ("some", "path")


def test_event_double_subclass():
    class TestEvent2(TestEvent):
        pass

    assert TestEvent2.event_path == ("test", "TestEvent2")
    assert TestEvent.event_path == ("test",)  # unchanged


def test_event_init():
    event = TestEvent(foo="bar")
    assert event.foo == "bar"


def test_fetch_event_paths():
    assert PaginationChanged.event_path == ("paging", "pagination_changed")
    assert StateChanged.event_path == ("paging", "state_changed")


def test_pagination_changed_page_size_changed():
    event = PaginationChanged(
        controller_id="c1",
        page=1,
        page_size=50,
        previous_page=3,
        previous_page_size=20,
    )
    assert event.page_size_changed
    assert not event.append


def test_pagination_changed_page_only():
    event = PaginationChanged(
        controller_id="c1",
        page=2,
        page_size=20,
        previous_page=1,
        previous_page_size=20,
        append=True,
    )
    assert not event.page_size_changed
