import base64

import pytest

from icon_config import IconSetConfig, TRANSPARENT_PNG_BASE64


@pytest.fixture
def placeholder_png():
    return base64.b64decode(TRANSPARENT_PNG_BASE64)


@pytest.fixture
def icons_dir(tmp_path):
    """Nonexistent nested directory, so the generator has to create it"""
    return tmp_path / "src" / "assets" / "icons"


@pytest.fixture
def config(icons_dir):
    return IconSetConfig(icons_dir=icons_dir)
