import pytest

from quick_input_fakes import FakeQuickInput, make_items
from wizard_tester.core.config import KEY_DOWN, KEY_UP
from wizard_tester.core.errors import EmptyList, OutOfRangeIndex, WaitTimeout
from wizard_tester.dom.inspector import ItemInspector
from wizard_tester.wizard.crawler import VirtualizedListCrawler


def _ids(items):
    return [item["id"] for item in items]


def test_five_items_window_three():
    items = make_items(5)
    fake = FakeQuickInput(items, visible=3)
    found = VirtualizedListCrawler(fake).discover_all()
    print(f"Found: {_ids(found)}")
    assert _ids(found) == _ids(items)
    assert fake.interactions == [(KEY_DOWN, 2), (KEY_DOWN, 3), (KEY_UP, 3)]


def test_list_exactly_one_window():
    items = make_items(3)
    fake = FakeQuickInput(items, visible=3)
    found = VirtualizedListCrawler(fake).discover_all()
    assert found == items


def test_single_item_list():
    items = make_items(1)
    fake = FakeQuickInput(items, visible=3)
    assert _ids(VirtualizedListCrawler(fake).discover_all()) == ["item-0"]


def test_three_windows_plus_two():
    for width in (1, 2, 3, 4, 7):
        items = make_items(3 * width + 2)
        fake = FakeQuickInput(items, visible=width)
        found = VirtualizedListCrawler(fake).discover_all()
        assert _ids(found) == _ids(items), f"width={width}"


def test_every_size_and_width_is_complete_and_unique():
    for size in range(1, 15):
        for width in range(1, size + 1):
            items = make_items(size)
            fake = FakeQuickInput(items, visible=width)
            found = _ids(VirtualizedListCrawler(fake).discover_all())
            assert len(found) == len(set(found)), f"duplicates for size={size} width={width}"
            assert found == _ids(items), f"size={size} width={width}"


def test_optional_fields_survive_crawl():
    items = make_items(4)
    items[1]["description"] = "io.quarkus:quarkus-resteasy"
    items[2]["detail"] = "REST endpoint framework"
    fake = FakeQuickInput(items, visible=2)
    found = VirtualizedListCrawler(fake).discover_all()
    assert found[1]["description"] == "io.quarkus:quarkus-resteasy"
    assert "detail" not in found[1]
    assert found[2]["detail"] == "REST endpoint framework"
    assert "description" not in found[0] and "detail" not in found[0]


def test_empty_list_is_rejected():
    fake = FakeQuickInput([], visible=3)
    with pytest.raises(EmptyList):
        VirtualizedListCrawler(fake).discover_all()
    assert fake.interactions == []


def test_get_nth_matches_inspector():
    items = make_items(6)
    items[0]["description"] = "default"
    fake = FakeQuickInput(items, visible=4)
    crawler = VirtualizedListCrawler(fake)
    inspector = ItemInspector(fake)
    handles = fake.get_visible_items()
    for n in range(4):
        assert crawler.get_nth(n) == inspector.inspect(handles[n])
    assert crawler.get_nth(0)["description"] == "default"


def test_get_nth_indexes_the_visible_window_only():
    items = make_items(6)
    fake = FakeQuickInput(items, visible=3)
    crawler = VirtualizedListCrawler(fake)

    with pytest.raises(OutOfRangeIndex) as info:
        crawler.get_nth(3)
    assert info.value.window_length == 3
    assert "3" in str(info.value)

    with pytest.raises(OutOfRangeIndex):
        crawler.get_nth(-1)


def test_get_nth_times_out_on_empty_window():
    fake = FakeQuickInput([], visible=3)
    crawler = VirtualizedListCrawler(fake, timeout_ms=0)
    with pytest.raises(WaitTimeout) as info:
        crawler.get_nth(0)
    assert info.value.last_observed == []
    assert "Could not find quick picks" in str(info.value)
