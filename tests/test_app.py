"""Tests for the Streamlit page, driven headlessly through AppTest.

The page never computes traces itself; these tests check how it wires the
sidebar form, the step navigation buttons and the empty cache shown
before the first run.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def app() -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def simulate(at: AppTest, sequence=None, cache_size=None) -> AppTest:
    if sequence is not None:
        at.text_input(key="page_string").input(sequence)
    if cache_size is not None:
        at.number_input(key="cache_size").set_value(cache_size)
    at.button(key="simulate").click().run()
    assert not at.exception
    return at


class TestBeforeSimulation:
    """Verify the page before the Simulate button is pressed."""

    def test_empty_cache_is_drawn(self, app) -> None:
        """The frame chart is rendered without a trace."""
        assert app.session_state.steps == []
        assert "click Simulate" in app.info[0].value
        assert len(app.get("plotly_chart")) >= 1

    def test_no_navigation_without_trace(self, app) -> None:
        """Step buttons appear only once a trace exists."""
        keys = [b.key for b in app.button]
        assert "next_step" not in keys
        assert "prev_step" not in keys


class TestNavigation:
    """Verify the step buttons follow the current index."""

    def test_previous_enabled_after_next(self, app) -> None:
        """After one Next click the Previous button is usable at once."""
        simulate(app)
        assert app.button(key="prev_step").disabled
        app.button(key="next_step").click().run()
        assert app.session_state.step_index == 1
        assert not app.button(key="prev_step").disabled

    def test_next_disabled_on_last_step(self, app) -> None:
        """Reaching the final step disables Next in the same rerun."""
        simulate(app, sequence="A B")
        app.button(key="next_step").click().run()
        assert not app.button(key="next_step").disabled
        app.button(key="next_step").click().run()
        assert app.session_state.step_index == 2
        assert app.button(key="next_step").disabled
        assert not app.button(key="prev_step").disabled

    def test_previous_and_start(self, app) -> None:
        """Previous steps back once and Go to Start rewinds to step 0."""
        simulate(app, sequence="A B C")
        for _ in range(3):
            app.button(key="next_step").click().run()
        app.button(key="prev_step").click().run()
        assert app.session_state.step_index == 2
        app.button(key="go_to_start").click().run()
        assert app.session_state.step_index == 0
        assert app.button(key="prev_step").disabled


class TestSimulateButton:
    """Verify trace creation and error reporting from the sidebar."""

    def test_trace_is_stored(self, app) -> None:
        """A valid input stores one step per request plus the initial step."""
        simulate(app, sequence="A B A C", cache_size=2)
        assert len(app.session_state.steps) == 5
        assert app.session_state.run_cache_size == 2

    def test_invalid_size_is_reported(self, app) -> None:
        """An out-of-range cache size shows the error and clears the trace."""
        simulate(app, cache_size=11)
        assert app.session_state.steps == []
        assert "between 1 and 10" in app.sidebar.error[0].value
