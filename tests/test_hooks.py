"""
Unit tests for hook chains.
"""

import pytest
from tagwm.errors import SchedulingError
from tagwm.hooks import HookChain, RefreshHook


class Recorder(RefreshHook):
    def __init__(self, name, log, result=None):
        self.name = name
        self.log = log
        self.result = result

    def on_refresh(self, session):
        self.log.append(self.name)
        return self.result


@pytest.mark.unit
class TestHookChain:
    """Test ordering and composition."""

    def test_runs_in_registration_order(self):
        log = []
        chain = HookChain([Recorder("a", log), Recorder("b", log)])

        assert chain.run(lambda h: h.on_refresh(None))
        assert log == ["a", "b"]

    def test_concatenation(self):
        log = []
        first = HookChain([Recorder("a", log)])
        second = HookChain([Recorder("b", log)])

        combined = first + second
        combined = combined.then(Recorder("c", log))
        combined.run(lambda h: h.on_refresh(None))

        assert log == ["a", "b", "c"]
        assert len(first) == 1
        assert len(combined) == 3

    def test_false_stops_chain(self):
        log = []
        chain = HookChain(
            [Recorder("a", log, result=False), Recorder("b", log)]
        )

        assert chain.run(lambda h: h.on_refresh(None)) is False
        assert log == ["a"]

    def test_true_continues_chain(self):
        log = []
        chain = HookChain([Recorder("a", log, result=True), Recorder("b", log)])

        assert chain.run(lambda h: h.on_refresh(None))
        assert log == ["a", "b"]

    def test_errors_abort_chain(self):
        log = []

        class Failing(RefreshHook):
            def on_refresh(self, session):
                raise SchedulingError("boom")

        chain = HookChain([Failing(), Recorder("b", log)])

        with pytest.raises(SchedulingError):
            chain.run(lambda h: h.on_refresh(None))
        assert log == []
