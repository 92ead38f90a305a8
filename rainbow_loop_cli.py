#!/usr/bin/env python3
import os
import argparse
import traceback
import logging

from rainbow_loop.config.loop_config import DEMO_DURATION, DEMO_FPS, DEMO_TOGGLE_TIMES, OUTPUT_PATH
from rainbow_loop.utils.logging_config import setup_logging
from rainbow_loop.video.demo import create_demo_video, save_snapshot

def main(argv=None):
    """
    Main entry point for the rainbow loop demo.
    Parses command line arguments and renders the demo window.
    """
    parser = argparse.ArgumentParser(description='Render the rainbow loop demo window.')
    parser.add_argument('--output', default=os.path.join(OUTPUT_PATH, 'rainbow_demo.mp4'), help='Output video path')
    parser.add_argument('--duration', type=float, default=DEMO_DURATION, help='Video length in seconds')
    parser.add_argument('--fps', type=int, default=DEMO_FPS, help='Frames per second')
    parser.add_argument('--toggle', type=float, nargs='*', default=DEMO_TOGGLE_TIMES,
                        help='Times (seconds) at which the button is clicked')
    parser.add_argument('--close-at', type=float, default=None, help='Close the window at this time')
    parser.add_argument('--snapshot', default=None, help='Write a single PNG frame instead of a video')
    parser.add_argument('--snapshot-time', type=float, default=0.0, help='Time of the snapshot frame')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')
    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(args.debug)

    if args.duration <= 0:
        parser.error("--duration must be positive")
    if args.fps <= 0:
        parser.error("--fps must be positive")

    if args.snapshot:
        save_snapshot(args.snapshot, t=args.snapshot_time, toggle_times=args.toggle, close_at=args.close_at)
        return

    create_demo_video(
        output_path=args.output,
        duration=args.duration,
        fps=args.fps,
        toggle_times=args.toggle,
        close_at=args.close_at,
    )

if __name__ == "__main__":
    try:
        main()
    except Exception as error:
        logging.error(f"Fatal error: {error}")
        traceback.print_exc()
