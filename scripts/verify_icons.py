"""
Check the generated icon set against the configured sizes
Reports missing files, unreadable PNGs and icons whose pixel size
doesn't match the size in their filename
"""

import sys
from typing import List, Optional

from pydantic import BaseModel

from icon_config import IconSetConfig
from icon_renderer import check_png_integrity, read_icon_size


class IconReport(BaseModel):
    filename: str
    size: int  # size encoded in the filename
    exists: bool = False
    width: Optional[int] = None
    height: Optional[int] = None
    error: Optional[str] = None
    warning: Optional[str] = None  # chunk problems that don't stop the header from parsing

    @property
    def readable(self) -> bool:
        return self.exists and self.error is None

    @property
    def matches(self) -> bool:
        return self.readable and self.width == self.size and self.height == self.size


def verify_icons(config: Optional[IconSetConfig] = None) -> List[IconReport]:
    """Inspect every expected icon file and print what was found"""
    if config is None:
        config = IconSetConfig()

    print(f"Checking icons in {config.icons_dir}")
    reports = []
    for size in config.sizes:
        report = IconReport(filename=config.icon_filename(size), size=size)
        path = config.icon_path(size)

        if not path.is_file():
            print(f"  ❌ {report.filename} missing")
            reports.append(report)
            continue

        report.exists = True
        try:
            report.width, report.height = read_icon_size(path)
        except (OSError, ValueError, SyntaxError) as e:
            report.error = str(e)
            print(f"  ❌ {report.filename} unreadable: {e}")
            reports.append(report)
            continue

        if report.matches:
            print(f"  ✓ {report.filename} ({report.width}x{report.height})")
        else:
            print(f"  ⚠️ {report.filename} is {report.width}x{report.height}, expected {size}x{size}")

        report.warning = check_png_integrity(path)
        if report.warning:
            print(f"     note: {report.warning}")
        reports.append(report)

    readable = sum(1 for r in reports if r.readable)
    matching = sum(1 for r in reports if r.matches)
    print(f"\n{readable}/{len(reports)} icons readable, {matching}/{len(reports)} match their size")
    return reports


def main(config: Optional[IconSetConfig] = None) -> int:
    """Exit status for the script: 1 if any icon is missing or unreadable"""
    results = verify_icons(config)
    if not all(r.readable for r in results):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
