"""
Tests for the in-memory and PNG sequence surfaces.
"""

import pytest
from PIL import Image

from bubblewall.surface.png_surface import PngSequenceSurface
from bubblewall.surface.virtual_surface import VirtualSurface


class TestVirtualSurface:

    def test_acquire_gives_rgba_frame_of_requested_size(self):
        surface = VirtualSurface()
        image = surface.acquire_frame(120, 80)
        assert image.mode == "RGBA"
        assert image.size == (120, 80)

    def test_submit_swaps_buffers(self):
        surface = VirtualSurface()
        first = surface.acquire_frame(10, 10)
        surface.submit_frame(first)
        second = surface.acquire_frame(10, 10)

        assert surface.last_frame is first
        assert second is not first
        assert surface.frames_submitted == 1

    def test_resize_allocates_new_buffer(self):
        surface = VirtualSurface()
        surface.submit_frame(surface.acquire_frame(10, 10))
        surface.submit_frame(surface.acquire_frame(10, 10))
        assert surface.acquire_frame(20, 30).size == (20, 30)

    def test_pixel_reads_last_frame(self):
        surface = VirtualSurface()
        image = surface.acquire_frame(4, 4)
        image.putpixel((1, 2), (10, 20, 30, 255))
        surface.submit_frame(image)
        assert surface.pixel(1, 2) == (10, 20, 30, 255)

    def test_pixel_before_first_frame_raises(self):
        with pytest.raises(RuntimeError):
            VirtualSurface().pixel(0, 0)

    def test_history_keeps_copies(self):
        surface = VirtualSurface(history=2)
        for _ in range(3):
            surface.submit_frame(surface.acquire_frame(4, 4))
        assert len(surface.history) == 2

    def test_unavailable_surface_gives_no_frame(self):
        surface = VirtualSurface()
        surface.available = False
        assert surface.acquire_frame(10, 10) is None

    def test_close(self):
        surface = VirtualSurface()
        surface.submit_frame(surface.acquire_frame(4, 4))
        surface.close()
        assert surface.last_frame is None
        assert surface.acquire_frame(4, 4) is None


class TestPngSequenceSurface:

    def test_writes_numbered_files(self, tmp_path):
        surface = PngSequenceSurface(tmp_path)
        for _ in range(3):
            surface.submit_frame(surface.acquire_frame(8, 6))

        names = sorted(p.name for p in tmp_path.glob("*.png"))
        assert names == ["frame_00001.png", "frame_00002.png", "frame_00003.png"]
        with Image.open(tmp_path / "frame_00001.png") as image:
            assert image.size == (8, 6)
            assert image.mode == "RGBA"

    def test_every_nth(self, tmp_path):
        surface = PngSequenceSurface(tmp_path / "out", every_nth=2, prefix="bubbles")
        for _ in range(5):
            surface.submit_frame(surface.acquire_frame(4, 4))

        assert surface.frames_submitted == 5
        assert surface.files_written == 3
        assert sorted(p.name for p in (tmp_path / "out").glob("*.png")) == [
            "bubbles_00001.png", "bubbles_00003.png", "bubbles_00005.png",
        ]

    def test_invalid_every_nth(self, tmp_path):
        with pytest.raises(ValueError):
            PngSequenceSurface(tmp_path, every_nth=0)

    def test_closed_surface_gives_no_frame(self, tmp_path):
        surface = PngSequenceSurface(tmp_path)
        surface.close()
        assert surface.acquire_frame(4, 4) is None
