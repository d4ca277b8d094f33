"""Draw real per-size icons with Pillow (render mode)"""

from io import BytesIO
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

# Below this size the label is unreadable, so only the background is drawn
MIN_LABEL_SIZE = 48

FONT_CANDIDATES = [
    "arial.ttf",
    "C:/Windows/Fonts/arial.ttf",
    "DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
]


def load_font(font_size: int):
    """Try common system fonts, fall back to Pillow's built-in font"""
    for candidate in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(candidate, font_size)
        except OSError:
            continue
    return ImageFont.load_default(size=font_size)


def render_icon(size: int, color: Tuple[int, int, int], label: str = "B") -> bytes:
    """Return PNG bytes for a size x size icon"""
    img = Image.new('RGBA', (size, size), color=tuple(color) + (255,))

    if label and size >= MIN_LABEL_SIZE:
        draw = ImageDraw.Draw(img)
        font = load_font(size // 2)
        bbox = draw.textbbox((0, 0), label, font=font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        # Center the text (bbox offsets account for font bearing)
        position = ((size - text_width) // 2 - bbox[0], (size - text_height) // 2 - bbox[1])
        draw.text(position, label, fill=(255, 255, 255, 255), font=font)

    buffer = BytesIO()
    img.save(buffer, format='PNG')
    return buffer.getvalue()


def read_icon_size(path) -> Tuple[int, int]:
    """Open a PNG and return its (width, height) from the IHDR header"""
    with Image.open(path) as img:
        if img.format != 'PNG':
            raise ValueError(f"{path} is {img.format}, not PNG")
        return img.size


def check_png_integrity(path) -> Optional[str]:
    """Return a description of the first chunk problem, or None if the PNG checks out"""
    try:
        with Image.open(path) as img:
            img.verify()
    except (OSError, SyntaxError) as e:
        return str(e)
    return None
