import unittest

import numpy as np

from rainbow_loop.gradient.color_sequence import ColorSequence, rainbow_gradient
from rainbow_loop.host.elements import Frame, ScreenGui, TextLabel, UIGradient, UIStroke
from rainbow_loop.video.renderer import gradient_image, render_element, render_scene

BLACK_WHITE = ColorSequence([(0.0, (0, 0, 0)), (1.0, (255, 255, 255))])


def _close(pixel, color, tolerance=10):
    return all(abs(int(p) - int(c)) <= tolerance for p, c in zip(pixel, color))


class TestGradientImage(unittest.TestCase):
    def test_horizontal_gradient(self):
        image = gradient_image(UIGradient(rotation=0, color=rainbow_gradient()), 100, 20)
        self.assertEqual(image.shape, (20, 100, 3))
        # Columns are uniform; rows vary from red to purple
        self.assertTrue(np.all(image == image[0:1]))
        self.assertTrue(_close(image[0, 0], (255, 0, 0)))
        self.assertTrue(_close(image[0, -1], (175, 82, 222)))

    def test_vertical_gradient(self):
        image = gradient_image(UIGradient(rotation=90, color=BLACK_WHITE), 30, 50)
        self.assertTrue(np.all(image == image[:, 0:1]))
        self.assertLess(image[0, 0, 0], image[-1, 0, 0])
        self.assertTrue(np.all(np.diff(image[:, 0, 0].astype(int)) >= 0))

    def test_reversed_rotation(self):
        forward = gradient_image(UIGradient(rotation=0, color=BLACK_WHITE), 40, 10)
        backward = gradient_image(UIGradient(rotation=180, color=BLACK_WHITE), 40, 10)
        np.testing.assert_allclose(forward[:, ::-1].astype(int), backward.astype(int), atol=1)

    def test_empty_size(self):
        self.assertEqual(gradient_image(UIGradient(color=BLACK_WHITE), 0, 5).shape, (5, 0, 3))


class TestRenderElement(unittest.TestCase):
    def test_solid_background(self):
        image = render_element(Frame(size=(4, 3), background=(1, 2, 3)))
        self.assertEqual(image.shape, (3, 4, 3))
        self.assertTrue(np.all(image == (1, 2, 3)))

    def test_gradient_overrides_background(self):
        frame = Frame(size=(50, 10), background=(1, 2, 3))
        frame.create_gradient(0, BLACK_WHITE)
        image = render_element(frame)
        self.assertLess(image[0, 0, 0], 10)
        self.assertGreater(image[0, -1, 0], 245)


class TestRenderScene(unittest.TestCase):
    def setUp(self):
        self.screen = ScreenGui()
        self.frame = Frame(position=(10, 10), size=(20, 20), background=(200, 0, 0), parent=self.screen)

    def test_draws_frames_at_their_position(self):
        canvas = render_scene(self.screen, (64, 48), background=(5, 5, 5))
        self.assertEqual(canvas.shape, (48, 64, 3))
        self.assertEqual(tuple(canvas[15, 15]), (200, 0, 0))
        self.assertEqual(tuple(canvas[5, 5]), (5, 5, 5))
        self.assertEqual(tuple(canvas[30, 30]), (5, 5, 5))

    def test_clips_to_canvas(self):
        Frame(position=(50, 40), size=(40, 40), background=(0, 200, 0), parent=self.screen)
        canvas = render_scene(self.screen, (64, 48))
        self.assertEqual(tuple(canvas[47, 63]), (0, 200, 0))

    def test_children_draw_over_parents(self):
        Frame(position=(5, 5), size=(5, 5), background=(0, 0, 200), parent=self.frame)
        canvas = render_scene(self.screen, (64, 48))
        self.assertEqual(tuple(canvas[17, 17]), (0, 0, 200))
        self.assertEqual(tuple(canvas[12, 12]), (200, 0, 0))

    def test_invisible_and_destroyed_screens(self):
        self.frame.visible = False
        self.assertTrue(np.all(render_scene(self.screen, (64, 48)) == 0))
        self.frame.visible = True
        self.screen.destroy()
        self.assertTrue(np.all(render_scene(self.screen, (64, 48)) == 0))

    def test_stroke_draws_border_only(self):
        UIStroke(thickness=2, color=(0, 255, 0), parent=self.frame)
        canvas = render_scene(self.screen, (64, 48))
        self.assertEqual(tuple(canvas[8, 20]), (0, 255, 0))
        self.assertEqual(tuple(canvas[20, 31]), (0, 255, 0))
        self.assertEqual(tuple(canvas[20, 20]), (200, 0, 0))
        self.assertEqual(tuple(canvas[5, 5]), (0, 0, 0))

    def test_text_is_drawn(self):
        label = TextLabel(text="HELLO", text_color=(255, 255, 255), text_scale=0.5,
                          position=(0, 0), size=(64, 20), parent=self.screen)
        canvas = render_scene(self.screen, (64, 48))
        self.assertTrue(np.any(canvas[:20] == 255))
        label.create_gradient(0, ColorSequence([(0.0, (0, 0, 250)), (1.0, (0, 0, 250))]))
        canvas = render_scene(self.screen, (64, 48))
        self.assertTrue(np.any(np.all(canvas[:20] == (0, 0, 250), axis=-1)))
        self.assertFalse(np.any(np.all(canvas[:20] == (255, 255, 255), axis=-1)))


if __name__ == '__main__':
    unittest.main()
