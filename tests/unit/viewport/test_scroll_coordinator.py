"""Unit tests for frame-throttled scroll coordination."""

import pytest

from diffview.options import ViewportOptions
from diffview.viewport.scheduler import ManualFrameScheduler
from diffview.viewport.scroll import ScrollCoordinator, ScrollState


@pytest.fixture
def scheduler():
    return ManualFrameScheduler()


@pytest.fixture
def coordinator(recording_layer, scheduler, make_lines):
    return ScrollCoordinator(recording_layer, scheduler, ViewportOptions(), make_lines(1_000))


@pytest.mark.unit
class TestInitialRender:
    """Tests for construction and first render."""

    def test_lines_render_immediately(self, coordinator, recording_layer, scheduler):
        """Content given at construction is rendered without waiting for a frame."""
        assert len(recording_layer.frames) == 1
        assert recording_layer.last_window.bounds == (0, 45)
        assert recording_layer.last_rows[0].content == "Line 1 content"
        assert coordinator.state is ScrollState.IDLE
        assert scheduler.pending_count == 0

    def test_no_lines_no_render(self, recording_layer, scheduler):
        """A coordinator without content renders nothing until lines arrive."""
        coordinator = ScrollCoordinator(recording_layer, scheduler)

        assert recording_layer.frames == []
        assert coordinator.window is None
        assert coordinator.visible_rows == ()

    def test_visible_rows_match_last_render(self, coordinator, recording_layer):
        """visible_rows is the subset handed to the render layer."""
        assert tuple(coordinator.visible_rows) == recording_layer.last_rows


@pytest.mark.unit
class TestScrollCoalescing:
    """Bursts of scroll events cost one recomputation per frame."""

    def test_first_scroll_requests_frame(self, coordinator, scheduler):
        """A scroll in the idle state schedules exactly one frame."""
        coordinator.on_scroll(1_200)

        assert coordinator.state is ScrollState.FRAME_PENDING
        assert scheduler.pending_count == 1

    def test_burst_schedules_single_frame(self, coordinator, scheduler, recording_layer):
        """Many events before a frame share one pending frame."""
        for offset in range(0, 4_801, 240):
            coordinator.on_scroll(offset)

        assert scheduler.pending_count == 1
        assert coordinator.coalesced_events == 20

        scheduler.run_pending()

        assert len(recording_layer.frames) == 2
        assert coordinator.state is ScrollState.IDLE
        assert coordinator.coalesced_events == 0

    def test_last_offset_wins(self, coordinator, scheduler, recording_layer):
        """The frame uses the most recent offset, not the first."""
        coordinator.on_scroll(100)
        coordinator.on_scroll(99_999)
        coordinator.on_scroll(4_800)
        scheduler.run_pending()

        assert recording_layer.last_window.start_index == 180
        assert recording_layer.last_rows[0].line_number == 181

    def test_scroll_after_frame_schedules_again(self, coordinator, scheduler):
        """Once a frame has fired, the next scroll requests a new one."""
        coordinator.on_scroll(240)
        scheduler.run_pending()
        coordinator.on_scroll(480)

        assert scheduler.pending_count == 1
        assert coordinator.state is ScrollState.FRAME_PENDING

    def test_unchanged_bounds_skip_render(self, coordinator, scheduler, recording_layer):
        """A frame whose range equals the previous one does not re-render."""
        coordinator.on_scroll(2_400)
        scheduler.run_pending()
        rendered = len(recording_layer.frames)

        coordinator.on_scroll(2_410)
        scheduler.run_pending()

        assert len(recording_layer.frames) == rendered
        assert coordinator.scroll_offset == 2_410

    def test_rendered_rows_respect_bound(self, coordinator, scheduler, recording_layer):
        """Every frame mounts at most the bounded number of rows."""
        for offset in (0, 1_000, 7_777, 20_000, 10**8):
            coordinator.on_scroll(offset)
            scheduler.run_pending()
            assert len(recording_layer.last_rows) <= 25 + 2 * 20


@pytest.mark.unit
class TestContentAndGeometry:
    """Tests for set_lines, resize and close."""

    def test_set_lines_resets_offset_and_renders(self, coordinator, recording_layer, make_lines):
        """New content scrolls back to the top and renders at once."""
        coordinator.scroll_offset = 9_000
        coordinator.set_lines(make_lines(10))

        assert coordinator.scroll_offset == 0
        assert recording_layer.last_window.bounds == (0, 9)
        assert len(recording_layer.last_rows) == 10

    def test_set_lines_with_same_bounds_still_renders(self, coordinator, recording_layer, make_lines):
        """Replacing content forces a render even when indices are unchanged."""
        before = len(recording_layer.frames)
        coordinator.set_lines(make_lines(1_000))

        assert len(recording_layer.frames) == before + 1

    def test_pending_frame_after_set_lines(self, coordinator, scheduler, recording_layer, make_lines):
        """A frame pending across a content swap finds nothing new to render."""
        coordinator.on_scroll(5_000)
        coordinator.set_lines(make_lines(50))
        rendered = len(recording_layer.frames)

        scheduler.run_pending()

        assert len(recording_layer.frames) == rendered
        assert recording_layer.last_window.bounds == (0, 45)

    def test_set_lines_to_empty(self, coordinator, recording_layer):
        """Clearing the content renders an empty window."""
        coordinator.set_lines([])

        assert recording_layer.last_rows == ()
        assert recording_layer.last_window.is_empty

    def test_resize_recomputes_on_next_frame(self, coordinator, scheduler, recording_layer):
        """A new container height takes effect when the frame fires."""
        coordinator.resize(240)

        assert coordinator.options.container_height == 240
        assert scheduler.pending_count == 1

        scheduler.run_pending()

        assert recording_layer.last_window.bounds == (0, 30)

    def test_resize_while_pending_shares_frame(self, coordinator, scheduler):
        """Resizing during a pending frame does not request another."""
        coordinator.on_scroll(1_000)
        coordinator.resize(300)

        assert scheduler.pending_count == 1

    def test_close_cancels_pending_frame(self, coordinator, scheduler, recording_layer):
        """Closing drops the pending frame so nothing renders afterwards."""
        coordinator.on_scroll(3_000)
        coordinator.close()

        assert coordinator.state is ScrollState.IDLE
        assert scheduler.run_pending() == 0
        assert len(recording_layer.frames) == 1

    def test_close_when_idle_is_noop(self, coordinator, scheduler):
        """Closing an idle coordinator does nothing."""
        coordinator.close()

        assert coordinator.state is ScrollState.IDLE
        assert scheduler.pending_count == 0
