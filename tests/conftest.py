from pathlib import Path

import pytest
from PIL import Image


def make_image(path: Path, size, fmt: str = None, mode: str = "RGB", color=(200, 80, 40)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if mode in ("L", "P"):
        color = 128
    elif mode == "RGBA":
        color = (200, 80, 40, 128)
    Image.new(mode, size, color).save(path, format=fmt)
    return path


@pytest.fixture
def input_dir(tmp_path) -> Path:
    d = tmp_path / "input"
    d.mkdir()
    return d


@pytest.fixture
def output_dir(tmp_path) -> Path:
    return tmp_path / "output"
