"""
Configuration settings for the rainbow loop animation and the demo scene.
"""

# Animation defaults
DEFAULT_PERIOD = 2.5    # Seconds per full trip around the color wheel
DEFAULT_ROTATION = 90   # Gradient rotation in degrees (0 = left to right, 90 = top to bottom)

# Rainbow table
# Format: (position, hex color)
RAINBOW_STOPS = [
    (0.0, "#ff0000"),  # Red
    (0.2, "#ff9500"),  # Orange
    (0.4, "#ffff00"),  # Yellow
    (0.6, "#34c759"),  # Green
    (0.8, "#007aff"),  # Blue
    (1.0, "#af52de"),  # Purple
]

# Demo scene settings
DEMO_FPS = 30
DEMO_DURATION = 8.0           # Seconds of video to render
DEMO_CANVAS_SIZE = (640, 440)  # (width, height)
DEMO_BACKGROUND = (24, 24, 28)
DEMO_WINDOW_SIZE = (550, 380)
DEMO_TOGGLE_TIMES = [3.0, 5.0]  # Simulated button clicks (pause, then resume)
DEMO_BORDER_THICKNESS = 3

# Per-element loop settings
# Format: (period, rotation)
DEMO_TITLE_LOOP = (2.0, 0)
DEMO_BORDER_LOOP = (3.0, 0)
DEMO_BUTTON_LOOP = (2.2, 90)
DEMO_BUTTON_TEXT_LOOP = (1.8, 90)

OUTPUT_PATH = "output/"
