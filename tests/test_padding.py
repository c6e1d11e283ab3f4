"""
Tests for border padding policies.
"""
import numpy as np
import pytest

from blurify import PaddingPolicy, pad


@pytest.fixture
def buffer() -> np.ndarray:
    """3x4 single-channel buffer with distinct values."""
    return np.arange(1, 13, dtype=np.uint32).reshape(3, 4, 1)


class TestZeroTrailing:
    def test_buffer_grows_by_padding_only(self, buffer):
        padded = pad(buffer, 2)
        assert padded.policy is PaddingPolicy.ZERO_TRAILING
        assert (padded.width, padded.height) == (4 + 2, 3 + 2)
        assert padded.source_size == (4, 3)

    def test_pixels_shifted_and_margin_zero(self, buffer):
        padded = pad(buffer, 1)
        np.testing.assert_array_equal(padded.pixels[1:, 1:], buffer)
        assert np.all(padded.pixels[0, :] == 0)
        assert np.all(padded.pixels[:, 0] == 0)

    def test_reads_past_buffer_are_zero(self, buffer):
        padded = pad(buffer, 1)
        # Bottom-right source pixel (3, 2) lives at (4, 3)
        window = padded.neighborhood(4, 3)
        assert window.shape == (3, 3, 1)
        assert window[1, 1, 0] == 12
        assert np.all(window[2, :, 0] == 0)
        assert np.all(window[:, 2, 0] == 0)

    def test_windows_cover_every_source_pixel(self, buffer):
        padded = pad(buffer, 1)
        windows = padded.windows()
        assert windows.shape == (3, 4, 3, 3, 1)
        np.testing.assert_array_equal(windows[:, :, 1, 1], buffer)
        np.testing.assert_array_equal(windows[0, 0], padded.neighborhood(1, 1))

    def test_zero_padding_is_identity(self, buffer):
        padded = pad(buffer, 0)
        np.testing.assert_array_equal(padded.pixels, buffer)
        assert padded.windows().shape == (3, 4, 1, 1, 1)


class TestOtherPolicies:
    def test_edge_clamp(self, buffer):
        padded = pad(buffer, 2, PaddingPolicy.EDGE_CLAMP)
        assert (padded.width, padded.height) == (8, 7)
        np.testing.assert_array_equal(padded.pixels[2:5, 2:6], buffer)
        assert np.all(padded.pixels[0, 0] == buffer[0, 0])
        assert np.all(padded.pixels[-1, -1] == buffer[-1, -1])

    def test_mirror(self, buffer):
        padded = pad(buffer, 1, "mirror")
        assert padded.policy is PaddingPolicy.MIRROR
        # Row above the image reflects row 1 about row 0
        np.testing.assert_array_equal(padded.pixels[0, 1:5], buffer[1])
        np.testing.assert_array_equal(padded.pixels[1:4, 0], buffer[:, 1])

    def test_mirror_single_pixel(self):
        padded = pad(np.full((1, 1, 1), 7, dtype=np.uint32), 2, PaddingPolicy.MIRROR)
        assert padded.pixels.shape == (5, 5, 1)
        assert np.all(padded.pixels == 7)


class TestErrors:
    def test_neighborhood_out_of_range(self, buffer):
        padded = pad(buffer, 1)
        with pytest.raises(ValueError):
            padded.neighborhood(0, 0)

    def test_requires_channel_axis(self):
        with pytest.raises(ValueError):
            pad(np.zeros((3, 3), dtype=np.uint32), 1)

    def test_negative_padding(self, buffer):
        with pytest.raises(ValueError):
            pad(buffer, -1)
