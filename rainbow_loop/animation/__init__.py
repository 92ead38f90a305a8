from rainbow_loop.animation.loop_controller import LoopController, LoopState, add_rainbow_loop
