import pytest

from oklab import RGBA

GRID_STEPS = 17


def rgba_grid(num: int = GRID_STEPS) -> list:
    """Opaque 8-bit colors on a num x num x num lattice, truncated like byte()."""
    colors = []
    for i in range(num):
        for j in range(num):
            for k in range(num):
                colors.append(RGBA((
                    int(0xff * i / (num - 1)),
                    int(0xff * j / (num - 1)),
                    int(0xff * k / (num - 1)),
                    0xff,
                )))
    return colors


@pytest.fixture(scope="session")
def opaque_grid():
    return rgba_grid()


@pytest.fixture
def primaries():
    return {
        "red": RGBA((255, 0, 0, 255)),
        "green": RGBA((0, 255, 0, 255)),
        "blue": RGBA((0, 0, 255, 255)),
        "yellow": RGBA((255, 255, 0, 255)),
        "magenta": RGBA((255, 0, 255, 255)),
        "cyan": RGBA((0, 255, 255, 255)),
        "white": RGBA((255, 255, 255, 255)),
        "black": RGBA((0, 0, 0, 255)),
    }
