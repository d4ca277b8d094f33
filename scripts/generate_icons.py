#!/usr/bin/env python
"""
Generate placeholder PNG icons for the extension
Writes icon_<size>.png for every configured size into src/assets/icons
"""

import os
from typing import List, Optional

from icon_config import IconSetConfig
from icon_renderer import render_icon


def create_simple_icon(size: int, config: IconSetConfig) -> bytes:
    """Return the PNG bytes for one icon"""
    if config.render:
        return render_icon(size, config.color, config.label)
    # Placeholder mode: size is ignored, every icon is the same 1x1 transparent PNG
    return config.placeholder_bytes()


def generate_icons(config: Optional[IconSetConfig] = None) -> List[str]:
    """Write one icon per size, in order. Returns the written paths."""
    if config is None:
        config = IconSetConfig()

    # Ensure icons directory exists
    os.makedirs(config.icons_dir, exist_ok=True)

    written = []
    for size in config.sizes:
        filename = config.icon_filename(size)
        filepath = os.path.join(config.icons_dir, filename)

        with open(filepath, 'wb') as f:
            f.write(create_simple_icon(size, config))

        print(f"Generated {filename}")
        written.append(filepath)

    print("Icon generation complete!")
    if config.render:
        print("Note: Rendered icons use a plain background and label. Replace with final artwork before release.")
    else:
        print("Note: These are placeholder icons. For production, use proper image generation tools.")
    return written


if __name__ == '__main__':
    generate_icons()
