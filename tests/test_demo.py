"""Tests for the demo window and the command line entry point."""

import logging
import os

import numpy as np
import pytest

from rainbow_loop.animation.loop_controller import LoopState
from rainbow_loop.config.loop_config import DEMO_BACKGROUND, DEMO_CANVAS_SIZE
from rainbow_loop.host.render_loop import FrameClock, RenderLoop
from rainbow_loop.utils.logging_config import setup_logging
from rainbow_loop.video.demo import PAUSE_LABEL, RESUME_LABEL, DemoTimeline, DemoWindow, create_demo_video, save_snapshot


@pytest.fixture
def window():
    return DemoWindow(RenderLoop(FrameClock()))


def test_window_starts_all_loops(window):
    assert len(window.loops) == 4
    assert all(loop is not None and loop.is_running() for loop in window.loops)
    assert window.title_loop.period == 2.0
    assert window.border.find_gradient().rotation == 0
    assert window.button.find_gradient().rotation == 90


def test_click_toggles_button_loops_only(window):
    window.button.click()
    assert window.button_loop.is_paused()
    assert window.button_text_loop.is_paused()
    assert window.title_loop.is_running()
    assert window.button_text.text == RESUME_LABEL

    window.button.click()
    assert window.button_loop.is_running()
    assert window.button_text.text == PAUSE_LABEL


def test_close_stops_everything(window):
    window.close()
    window.close()
    assert all(loop.state is LoopState.STOPPED for loop in window.loops)
    assert window.window.destroyed
    assert window.screen.children == []


def test_render_shape(window):
    frame = window.render()
    width, height = DEMO_CANVAS_SIZE
    assert frame.shape == (height, width, 3)
    assert frame.dtype == np.uint8


def test_timeline_applies_scheduled_clicks():
    timeline = DemoTimeline(toggle_times=[1.0, 2.0], close_at=3.0)
    timeline.frame(0.0)
    timeline.frame(0.5)
    assert timeline.window.button_loop.is_running()
    timeline.frame(1.0)
    assert timeline.window.button_loop.is_paused()
    paused_frame = timeline.frame(1.5)
    # The title keeps moving while the button is paused
    assert not np.array_equal(paused_frame, timeline.frame(1.9))
    timeline.frame(2.0)
    assert timeline.window.button_loop.is_running()
    timeline.frame(3.0)
    assert timeline.window.closed
    assert len(timeline.render_loop.render_stepped) == 0


def test_frame_after_pause_and_resume_keeps_the_paused_phase():
    timeline = DemoTimeline(toggle_times=[3.0, 5.0])
    timeline.frame(0.0)
    timeline.frame(6.0)
    # Ran 3s before the pause and 1s after the resume
    assert timeline.window.button_loop.is_running()
    assert timeline.window.button_loop.offset == pytest.approx((4.0 / 2.2) % 1.0)
    assert timeline.window.title_loop.offset == pytest.approx((6.0 / 2.0) % 1.0)


def test_frame_while_paused_freezes_the_button_at_click_time():
    timeline = DemoTimeline(toggle_times=[1.0])
    timeline.frame(0.0)
    timeline.frame(1.6)
    assert timeline.window.button_loop.is_paused()
    assert timeline.window.button_loop.offset == pytest.approx(1.0 / 2.2)


def test_snapshot_after_close_shows_an_empty_screen(tmp_path):
    frame = save_snapshot(str(tmp_path / "closed.png"), t=2.0, close_at=1.0)
    assert np.all(frame == DEMO_BACKGROUND)


def test_animation_changes_frames():
    timeline = DemoTimeline(toggle_times=[])
    first = timeline.frame(0.0)
    later = timeline.frame(0.7)
    assert not np.array_equal(first, later)


def test_save_snapshot(tmp_path):
    path = str(tmp_path / "shots" / "demo.png")
    frame = save_snapshot(path, t=1.25)
    assert os.path.exists(path)
    assert frame.shape[2] == 3


def test_create_demo_video_validates_arguments(tmp_path):
    with pytest.raises(ValueError):
        create_demo_video(str(tmp_path / "x.mp4"), duration=0)
    with pytest.raises(ValueError):
        create_demo_video(str(tmp_path / "x.mp4"), fps=0)


@pytest.mark.integration
@pytest.mark.skip(reason="Integration test requires ffmpeg and may be slow")
def test_create_demo_video(tmp_path):
    output = str(tmp_path / "demo.mp4")
    create_demo_video(output, duration=1.0, fps=10, toggle_times=[0.5])
    assert os.path.getsize(output) > 0


def test_cli_snapshot(tmp_path, monkeypatch):
    from rainbow_loop_cli import main

    monkeypatch.chdir(tmp_path)
    main(['--snapshot', 'snap.png', '--snapshot-time', '0.5'])
    assert (tmp_path / 'snap.png').exists()
    assert (tmp_path / 'debug.log').exists()
    setup_logging(log_file=None)


def test_cli_rejects_bad_duration(tmp_path, monkeypatch):
    from rainbow_loop_cli import main

    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit):
        main(['--duration', '0'])
    setup_logging(log_file=None)


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    log_file = str(tmp_path / "app.log")
    setup_logging(debug=True, log_file=log_file)
    logger = setup_logging(debug=True, log_file=log_file)
    assert logger.name == 'app'
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    logger = setup_logging(log_file=None)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_cli_snapshot_honours_close_at(tmp_path, monkeypatch):
    from rainbow_loop_cli import main

    calls = []
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr('rainbow_loop_cli.save_snapshot', lambda path, **kwargs: calls.append((path, kwargs)))
    main(['--snapshot', 'snap.png', '--snapshot-time', '2', '--close-at', '1.5'])
    setup_logging(log_file=None)
    assert calls == [('snap.png', {'t': 2.0, 'toggle_times': [3.0, 5.0], 'close_at': 1.5})]
