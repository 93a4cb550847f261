"""
Rendering of finished (or in-progress) grids.

Converts a ``PlacementGrid`` into an RGB pixel buffer, writes PNG files and
collects animated GIF frames at fill milestones. Location ``(x, y)`` becomes
pixel column ``x``, row ``y``.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np
import structlog
from PIL import Image

from .config import MosaicParams, Settings
from .core.generator import MosaicGenerator
from .core.grid import PlacementGrid

logger = structlog.get_logger()

GRAY: Tuple[int, int, int] = (128, 128, 128)


class MosaicOutputError(OSError):
    """An image file could not be written."""


def render_pixels(grid: PlacementGrid, fill_color=GRAY) -> np.ndarray:
    """
    Pixel buffer of shape ``(size, size, 3)`` indexed ``[row, column]``.

    Empty cells take ``fill_color``.
    """
    fill = np.asarray(fill_color, dtype=np.uint8)
    pixels = np.where(grid.filled[:, :, np.newaxis], grid.colors, fill)
    return np.ascontiguousarray(pixels.transpose(1, 0, 2).astype(np.uint8))


def to_image(grid: PlacementGrid, fill_color=GRAY) -> Image.Image:
    return Image.fromarray(render_pixels(grid, fill_color))


def save_image(image: Image.Image, path: Union[str, Path], **kwargs) -> Path:
    """Write ``image`` to ``path``, wrapping I/O failures."""
    path = Path(path)
    try:
        image.save(path, **kwargs)
    except OSError as e:
        raise MosaicOutputError(f"Could not write {path}: {e}") from e
    logger.info("Image written", path=str(path), width=image.width, height=image.height)
    return path


class FrameRecorder:
    """
    Collects a frame every time the filled percentage of the grid grows.

    Attach to a ``MosaicGenerator`` and call ``save`` once the run is over.
    """

    def __init__(self):
        self.frames: List[Image.Image] = []
        self.current_percent = 0

    def observe(self, grid: PlacementGrid) -> None:
        percent = grid.percent_filled()
        if percent > self.current_percent:
            self.current_percent = percent
            self.frames.append(to_image(grid))

    def save(self, path: Union[str, Path]) -> Optional[Path]:
        """Write the frames as an animated GIF; nothing is written without frames."""
        if not self.frames:
            logger.warning("No frames captured, skipping GIF", path=str(path))
            return None
        first, rest = self.frames[0], self.frames[1:]
        return save_image(first, path, format="GIF", save_all=True, append_images=rest)


def make_image(
    params: MosaicParams,
    settings: Optional[Settings] = None,
    frame_recorder: Optional[FrameRecorder] = None,
) -> Image.Image:
    """Grow a mosaic for ``params`` and return it as an RGB image."""
    generator = MosaicGenerator(params, settings=settings, frame_recorder=frame_recorder)
    run = generator.generate()
    return to_image(run.grid)
