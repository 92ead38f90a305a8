from rainbow_loop.animation.loop_controller import add_rainbow_loop
from rainbow_loop.gradient.color_utils import sample_color
from rainbow_loop.host.elements import Frame, ScreenGui
from rainbow_loop.host.render_loop import FrameClock, RenderLoop

# Print the phase and the left-edge color of a 2 second loop, pausing at 1s
loop = RenderLoop(FrameClock())
frame = Frame(size=(100, 20), parent=ScreenGui())
controller = add_rainbow_loop(frame, loop, period=2.0, rotation=0)

for t in loop.run(duration=3.0, fps=4):
    if t == 1.0:
        controller.pause()
    if t == 2.0:
        controller.resume()
    color = sample_color(frame.find_gradient().color, 0.0)
    print(f"t={t:.2f}s state={controller.state.value:<7} offset={controller.offset:.3f} left={color}")
