"""Demo window with rainbow loops on its title, border and button.

The window is rendered headlessly: a FrameClock-driven RenderLoop is stepped
once per video frame, and the scene is rasterized with the renderer. Clicking
the button (simulated at the configured toggle times) pauses or resumes both
button loops; closing the window stops every loop.
"""

import logging
import os

import cv2
from moviepy.video.VideoClip import VideoClip

from rainbow_loop.animation.loop_controller import add_rainbow_loop
from rainbow_loop.config.loop_config import (
    DEMO_BACKGROUND,
    DEMO_BORDER_LOOP,
    DEMO_BORDER_THICKNESS,
    DEMO_BUTTON_LOOP,
    DEMO_BUTTON_TEXT_LOOP,
    DEMO_CANVAS_SIZE,
    DEMO_DURATION,
    DEMO_FPS,
    DEMO_TITLE_LOOP,
    DEMO_TOGGLE_TIMES,
    DEMO_WINDOW_SIZE,
)
from rainbow_loop.host.elements import Frame, ScreenGui, TextButton, TextLabel, UIStroke
from rainbow_loop.host.render_loop import FrameClock, RenderLoop
from rainbow_loop.video.renderer import render_scene

logger = logging.getLogger('app.demo')

PAUSE_LABEL = "Pause rainbow"
RESUME_LABEL = "Resume rainbow"


class DemoWindow:
    def __init__(self, render_loop, canvas_size=DEMO_CANVAS_SIZE):
        self.canvas_size = canvas_size
        self.screen = ScreenGui('RainbowDemo')

        canvas_w, canvas_h = canvas_size
        win_w, win_h = DEMO_WINDOW_SIZE
        self.window = Frame(
            'Window',
            position=((canvas_w - win_w) // 2, (canvas_h - win_h) // 2),
            size=(win_w, win_h),
            background=(36, 36, 42),
            parent=self.screen,
        )
        self.topbar = Frame('Topbar', size=(win_w, 44), background=(48, 48, 56), parent=self.window)
        self.title = TextLabel(
            'Title',
            text="Rainbow loop demo",
            text_scale=0.9,
            position=(12, 0),
            size=(win_w - 24, 44),
            parent=self.topbar,
        )
        self.border = UIStroke('Border', thickness=DEMO_BORDER_THICKNESS, parent=self.window)

        self.button = TextButton(
            'Button',
            position=((win_w - 220) // 2, (win_h - 60) // 2 + 22),
            size=(220, 60),
            background=(70, 70, 80),
            parent=self.window,
        )
        self.button_text = TextLabel('ButtonText', text=PAUSE_LABEL, text_scale=0.7, size=(220, 60), parent=self.button)

        self.title_loop = add_rainbow_loop(self.title, render_loop, *DEMO_TITLE_LOOP)
        self.border_loop = add_rainbow_loop(self.border, render_loop, *DEMO_BORDER_LOOP)
        self.button_loop = add_rainbow_loop(self.button, render_loop, *DEMO_BUTTON_LOOP)
        self.button_text_loop = add_rainbow_loop(self.button_text, render_loop, *DEMO_BUTTON_TEXT_LOOP)

        self.button.clicked.connect(self.toggle)
        self.closed = False

    @property
    def loops(self):
        return [self.title_loop, self.border_loop, self.button_loop, self.button_text_loop]

    def toggle(self):
        """Pause both button loops if they run, resume them otherwise."""
        if self.button_loop.is_running():
            self.button_loop.pause()
            self.button_text_loop.pause()
            self.button_text.text = RESUME_LABEL
        else:
            self.button_loop.resume()
            self.button_text_loop.resume()
            self.button_text.text = PAUSE_LABEL
        logger.debug(f"Button toggled, running={self.button_loop.is_running()}")

    def close(self):
        if self.closed:
            return
        for loop in self.loops:
            loop.stop()
        self.window.destroy()
        self.closed = True
        logger.info("Demo window closed")

    def render(self):
        return render_scene(self.screen, self.canvas_size, background=DEMO_BACKGROUND)


class DemoTimeline:
    """
    Steps the render loop to a frame time and applies scheduled clicks.

    Frames must be requested in non-decreasing time order.
    """

    def __init__(self, toggle_times=DEMO_TOGGLE_TIMES, close_at=None, canvas_size=DEMO_CANVAS_SIZE):
        self.render_loop = RenderLoop(FrameClock())
        self.window = DemoWindow(self.render_loop, canvas_size=canvas_size)
        self._pending_toggles = sorted(toggle_times or [])
        self.close_at = close_at

    def frame(self, t):
        # Scheduled events happen at their own time, not at the frame time
        while self._pending_toggles and self._pending_toggles[0] <= t:
            click_time = self._pending_toggles.pop(0)
            self.render_loop.step(click_time)
            self.window.button.click()
        if self.close_at is not None and t >= self.close_at and not self.window.closed:
            self.render_loop.step(self.close_at)
            self.window.close()
        self.render_loop.step(t)
        return self.window.render()


def save_snapshot(path, t=0.0, toggle_times=DEMO_TOGGLE_TIMES, close_at=None):
    """Render the demo at time ``t`` to an image file."""
    timeline = DemoTimeline(toggle_times=toggle_times, close_at=close_at)
    frame = timeline.frame(0.0)
    if t > 0:
        frame = timeline.frame(t)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    if not cv2.imwrite(path, cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)):
        raise RuntimeError(f"Failed to write snapshot: {path}")
    logger.info(f"Snapshot at t={t:.2f}s written to {path}")
    return frame


def create_demo_video(output_path, duration=DEMO_DURATION, fps=DEMO_FPS, toggle_times=DEMO_TOGGLE_TIMES, close_at=None):
    """
    Render the demo window animation to a video file.

    Args:
        output_path: Path for the output video (mp4)
        duration: Length of the video in seconds
        fps: Frames per second
        toggle_times: Times (seconds) at which the button is clicked
        close_at: Optional time at which the window is closed
    """
    if duration <= 0:
        raise ValueError(f"Duration must be positive, got {duration}")
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    logger.info(f"Output: {output_path}, Duration: {duration}s, FPS: {fps}, Toggles: {toggle_times}")
    timeline = DemoTimeline(toggle_times=toggle_times, close_at=close_at)

    video_clip = VideoClip(timeline.frame, duration=duration)
    video_clip = video_clip.with_fps(fps)
    try:
        video_clip.write_videofile(output_path, fps=fps, codec='libx264', audio=False, logger=None)
    finally:
        video_clip.close()
    logger.info(f"Rendered {timeline.render_loop.frame_count} frames to {output_path}")
