from logic.buffer_controller import BufferController
from utils.text_cleanup import fix_spacing


def test_starts_empty() -> None:
    controller = BufferController()
    assert controller.get_text() == ""
    assert controller.stats.word_count == 0
    assert controller.stats.reading_minutes == 0


def test_set_text_refreshes_stats() -> None:
    controller = BufferController()
    controller.set_text("hello  there")
    assert controller.stats.word_count == 2
    assert controller.stats.char_count == 12
    assert controller.stats.reading_minutes == 1


def test_apply_transform_updates_buffer_and_stats() -> None:
    controller = BufferController("a   b\n\n\n\nc   ")
    result = controller.apply(fix_spacing)
    assert result == "a b\n\nc"
    assert controller.get_text() == "a b\n\nc"
    assert controller.stats.char_count == len("a b\n\nc")


def test_subscribers_are_notified_until_unsubscribed() -> None:
    controller = BufferController()
    seen: list[str] = []
    unsubscribe = controller.subscribe(seen.append)
    controller.set_text("first")
    unsubscribe()
    controller.set_text("second")
    assert seen == ["first"]


def test_custom_reading_speed() -> None:
    controller = BufferController("one two three", words_per_minute=1)
    assert controller.stats.reading_minutes == 3
