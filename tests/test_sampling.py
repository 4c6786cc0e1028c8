"""
Cell Sampler Tests
==================
Verifies luminance, disk sampling and the 6-region cell vector.
"""

import unittest
import numpy as np

from shape_ascii.sampling import PixelBuffer, luminance, sample_cell, sample_circle


def solid_buffer(width, height, rgb):
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[..., :3] = rgb
    pixels[..., 3] = 255
    return PixelBuffer.from_array(pixels)


class TestPixelBuffer(unittest.TestCase):

    def test_wrong_data_length_is_rejected(self):
        with self.assertRaises(ValueError):
            PixelBuffer(2, 2, bytes(15))

    def test_from_array_round_trips_layout(self):
        pixels = np.arange(2 * 3 * 4, dtype=np.uint8).reshape(2, 3, 4)
        buffer = PixelBuffer.from_array(pixels)
        self.assertEqual((buffer.width, buffer.height), (3, 2))
        self.assertEqual(buffer.data[4:8], bytes([4, 5, 6, 7]))
        np.testing.assert_array_equal(buffer.pixels, pixels)

    def test_complement_flips_color_and_keeps_alpha(self):
        buffer = PixelBuffer(1, 1, bytes([10, 200, 255, 77]))
        self.assertEqual(buffer.complement().data, bytes([245, 55, 0, 77]))


class TestLuminance(unittest.TestCase):

    def test_white_is_exactly_one_and_black_zero(self):
        plane = luminance(np.array([[[255, 255, 255, 0], [0, 0, 0, 255]]], dtype=np.uint8))
        self.assertEqual(plane[0, 0], 1.0)
        self.assertEqual(plane[0, 1], 0.0)

    def test_perceptual_weights(self):
        plane = luminance(np.array([[[255, 0, 0], [0, 255, 0], [0, 0, 255]]], dtype=np.uint8))
        np.testing.assert_allclose(plane[0], [0.299, 0.587, 0.114])

    def test_alpha_is_ignored(self):
        opaque = luminance(np.array([[[100, 100, 100, 255]]], dtype=np.uint8))
        clear = luminance(np.array([[[100, 100, 100, 0]]], dtype=np.uint8))
        self.assertEqual(opaque[0, 0], clear[0, 0])


class TestSampleCircle(unittest.TestCase):

    def test_mean_inside_disk(self):
        plane = np.zeros((5, 5))
        plane[2, 2] = 1.0
        # radius 1 around the center covers the center plus its 4 neighbours
        self.assertAlmostEqual(sample_circle(plane, 2.0, 2.0, 1.0), 0.2)

    def test_disk_outside_buffer_is_zero(self):
        plane = np.ones((4, 4))
        self.assertEqual(sample_circle(plane, -10.0, -10.0, 1.0), 0.0)

    def test_disk_is_clamped_to_bounds(self):
        plane = np.ones((4, 4))
        self.assertEqual(sample_circle(plane, 0.0, 0.0, 2.0), 1.0)


class TestSampleCell(unittest.TestCase):

    def test_tiny_white_cell_samples_all_ones(self):
        buffer = solid_buffer(2, 2, (255, 255, 255))
        self.assertEqual(sample_cell(buffer, 0, 0, 2, 2), [1.0] * 6)

    def test_black_cell_samples_all_zeros(self):
        buffer = solid_buffer(12, 12, (0, 0, 0))
        self.assertEqual(sample_cell(buffer, 0, 0, 12, 12), [0.0] * 6)

    def test_region_order_left_right(self):
        pixels = np.zeros((30, 20, 4), dtype=np.uint8)
        pixels[:, :10, :3] = 255
        buffer = PixelBuffer.from_array(pixels)
        self.assertEqual(sample_cell(buffer, 0, 0, 20, 30), [1.0, 0.0, 1.0, 0.0, 1.0, 0.0])

    def test_region_order_top_bottom(self):
        pixels = np.zeros((30, 20, 4), dtype=np.uint8)
        pixels[:10, :, :3] = 255
        buffer = PixelBuffer.from_array(pixels)
        self.assertEqual(sample_cell(buffer, 0, 0, 20, 30), [1.0, 1.0, 0.0, 0.0, 0.0, 0.0])

    def test_fractional_cell_stays_in_range(self):
        buffer = solid_buffer(7, 5, (128, 128, 128))
        vector = sample_cell(buffer, 7 / 3, 5 / 4, 7 / 3, 5 / 4)
        self.assertEqual(len(vector), 6)
        for value in vector:
            self.assertAlmostEqual(value, 128 / 255)

    def test_empty_disk_in_pixel_sized_cell_uses_center_pixel(self):
        # Checkerboard 2x2: no radius-0.3 disk reaches a pixel
        pixels = np.zeros((2, 2, 4), dtype=np.uint8)
        pixels[0, 0, :3] = 255
        pixels[1, 1, :3] = 255
        buffer = PixelBuffer.from_array(pixels)
        self.assertEqual(sample_cell(buffer, 0, 0, 2, 2), [1.0, 0.0, 0.0, 1.0, 0.0, 1.0])

    def test_empty_disk_in_sub_pixel_cell_is_zero(self):
        buffer = solid_buffer(1, 1, (255, 255, 255))
        self.assertEqual(sample_cell(buffer, 0.25, 0.25, 0.25, 0.25), [0.0] * 6)
        self.assertEqual(sample_cell(buffer, 0, 0, 0.5, 2), [0.0] * 6)

    def test_empty_buffer_samples_zeros(self):
        buffer = PixelBuffer(0, 0, b'')
        self.assertEqual(sample_cell(buffer, 0, 0, 0, 0), [0.0] * 6)


if __name__ == '__main__':
    unittest.main()
