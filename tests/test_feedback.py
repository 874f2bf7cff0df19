from logic.feedback import FeedbackTracker


class _Clock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_acknowledgement_expires_after_duration() -> None:
    clock = _Clock()
    feedback = FeedbackTracker(duration=2.0, clock=clock)
    feedback.trigger("copy")
    clock.now += 1.5
    assert feedback.is_active("copy")
    clock.now += 0.5
    assert not feedback.is_active("copy")


def test_retrigger_restarts_window() -> None:
    clock = _Clock()
    feedback = FeedbackTracker(duration=2.0, clock=clock)
    feedback.trigger("copy")
    clock.now += 1.5
    feedback.trigger("copy")
    clock.now += 1.5
    assert feedback.is_active("copy")
    clock.now += 0.5
    assert not feedback.is_active("copy")


def test_controls_are_independent() -> None:
    clock = _Clock()
    feedback = FeedbackTracker(duration=2.0, clock=clock)
    feedback.trigger("clean")
    assert feedback.is_active("clean")
    assert not feedback.is_active("copy")
    clock.now += 2.0
    assert not feedback.is_active("clean")
