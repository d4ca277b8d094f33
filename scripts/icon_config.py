"""
Icon set configuration for the extension's icons folder
Defaults write the placeholder set into src/assets/icons
"""

import base64
import binascii
from pathlib import Path
from typing import List, Tuple

from pydantic import BaseModel, Field, StrictInt, field_validator

# Project root (parent of scripts/)
ROOT = Path(__file__).resolve().parents[1]

# Minimal 1x1 transparent PNG (base64 encoded)
TRANSPARENT_PNG_BASE64 = 'iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChAI9jU77zgAAAABJRU5ErkJggg=='

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'

# Icon sizes referenced by the extension manifest
DEFAULT_SIZES = [16, 32, 48, 64, 96, 128]

DEFAULT_ICONS_DIR = ROOT / 'src' / 'assets' / 'icons'

# Theme color (dark green) used by render mode
DEFAULT_COLOR = (44, 85, 48)  # #2C5530


class IconSetConfig(BaseModel):
    """
    Everything one generator run needs.
    Build with no arguments for the real icons folder, or pass icons_dir
    (and sizes) to write somewhere else.
    """
    sizes: List[StrictInt] = Field(default_factory=lambda: list(DEFAULT_SIZES))
    icons_dir: Path = DEFAULT_ICONS_DIR
    placeholder_base64: str = TRANSPARENT_PNG_BASE64
    render: bool = False  # draw real per-size icons with Pillow
    color: Tuple[int, int, int] = DEFAULT_COLOR
    label: str = "B"

    @field_validator('sizes')
    @classmethod
    def check_sizes(cls, sizes: List[int]) -> List[int]:
        if not sizes:
            raise ValueError("at least one icon size is required")
        for size in sizes:
            if size <= 0:
                raise ValueError(f"icon size must be positive, got {size}")
        # One file per size
        if len(set(sizes)) != len(sizes):
            raise ValueError(f"icon sizes must be unique, got {sizes}")
        return sizes

    @field_validator('placeholder_base64')
    @classmethod
    def check_placeholder(cls, value: str) -> str:
        try:
            data = base64.b64decode(value, validate=True)
        except binascii.Error as e:
            raise ValueError(f"placeholder is not valid base64: {e}")
        if not data.startswith(PNG_SIGNATURE):
            raise ValueError("placeholder does not decode to a PNG")
        return value

    @field_validator('color')
    @classmethod
    def check_color(cls, color: Tuple[int, int, int]) -> Tuple[int, int, int]:
        if any(channel < 0 or channel > 255 for channel in color):
            raise ValueError(f"color channels must be 0-255, got {color}")
        return color

    def placeholder_bytes(self) -> bytes:
        """Decoded placeholder PNG"""
        return base64.b64decode(self.placeholder_base64)

    @staticmethod
    def icon_filename(size: int) -> str:
        return f'icon_{size}.png'

    def icon_path(self, size: int) -> Path:
        return self.icons_dir / self.icon_filename(size)

    def expected_files(self) -> List[str]:
        return [self.icon_filename(size) for size in self.sizes]
