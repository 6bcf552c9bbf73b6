"""Tests for palette_recolour.denoise: per-channel median filter."""

import numpy as np
import pytest

from palette_recolour.denoise import denoise
from palette_recolour.errors import ConfigError


class TestDenoise:
    def test_uniform_image_unchanged(self):
        img = np.empty((6, 7, 4), dtype=np.uint8)
        img[...] = [40, 80, 120, 200]
        out = denoise(img, 1)
        assert np.array_equal(out, img)

    def test_removes_salt_pixel(self):
        img = np.zeros((5, 5, 4), dtype=np.uint8)
        img[..., 3] = 255
        img[2, 2, :3] = 255
        out = denoise(img, 1)
        assert out[2, 2].tolist() == [0, 0, 0, 255]

    def test_input_not_mutated(self):
        rng = np.random.default_rng(1)
        img = rng.integers(0, 256, size=(8, 8, 4), dtype=np.uint8)
        before = img.copy()
        out = denoise(img, 1)
        assert out is not img
        assert np.array_equal(img, before)

    def test_channels_independent(self):
        img = np.zeros((3, 3, 4), dtype=np.uint8)
        img[..., 0] = 10
        img[..., 1] = 20
        img[..., 2] = 30
        img[..., 3] = 255
        img[1, 1, 0] = 99
        out = denoise(img, 1)
        assert out[1, 1].tolist() == [10, 20, 30, 255]

    def test_clamp_to_edge(self):
        # radius 2 distinguishes clamp from reflect at the borders
        img = np.zeros((1, 5, 4), dtype=np.uint8)
        img[0, :, 0] = [0, 10, 20, 30, 40]
        out = denoise(img, 2)
        assert out[0, 0, 0] == 0
        assert out[0, 4, 0] == 40
        assert out[0, 2, 0] == 20

    def test_radius_zero_is_copy(self):
        rng = np.random.default_rng(2)
        img = rng.integers(0, 256, size=(4, 4, 4), dtype=np.uint8)
        out = denoise(img, 0)
        assert out is not img
        assert np.array_equal(out, img)

    def test_negative_radius(self):
        with pytest.raises(ConfigError):
            denoise(np.zeros((2, 2, 4), dtype=np.uint8), -1)

    def test_parallel_matches_serial(self):
        rng = np.random.default_rng(4)
        img = rng.integers(0, 256, size=(12, 9, 4), dtype=np.uint8)
        assert np.array_equal(denoise(img, 1, workers=1), denoise(img, 1, workers=4))

    def test_shape_preserved(self):
        img = np.zeros((3, 11, 4), dtype=np.uint8)
        assert denoise(img, 2).shape == (3, 11, 4)
