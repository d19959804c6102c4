import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import spritesheet_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def solid_tile(color, size=(4, 4)):
    """Create an RGBA tile filled with one colour."""
    return Image.new("RGBA", size, color)


def distinct_color(index):
    """Opaque colour unique per index (for up to 256 tiles)."""
    return ((index * 37) % 256, (index * 91) % 256, index % 256, 255)


# Common test fixtures
@pytest.fixture
def make_tiles():
    """Factory for a list of uniquely coloured tiles of one size."""
    def _make(count, size=(4, 4)):
        return [solid_tile(distinct_color(i), size) for i in range(count)]
    return _make


@pytest.fixture
def patterned_tile():
    """6x5 tile where every pixel has a different colour."""
    img = Image.new("RGBA", (6, 5))
    pixels = img.load()
    for y in range(5):
        for x in range(6):
            pixels[x, y] = (x * 40, y * 50, (x + y) * 10, 255)
    return img


@pytest.fixture
def image_files(tmp_path: Path, make_tiles):
    """Write six 8x8 PNG tiles to disk and return their paths."""
    paths = []
    for i, tile in enumerate(make_tiles(6, size=(8, 8))):
        path = tmp_path / "input" / f"tile_{i:02d}.png"
        path.parent.mkdir(exist_ok=True)
        tile.save(path)
        paths.append(path)
    return paths
