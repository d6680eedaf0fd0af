from pathlib import Path
from typing import List, Optional

from PIL import Image, ImageDraw, ImageFont


def annotate_failure(
    screenshot_path: Path,
    lines: List[str],
    out_path: Optional[Path] = None,
    line_height: int = 14,
) -> Path:
    """Stamp a red banner with the failure lines across the top of a screenshot."""
    img = Image.open(screenshot_path).convert("RGB")
    draw = ImageDraw.Draw(img)

    try:
        font = ImageFont.load_default()
    except Exception:
        font = None

    banner_h = line_height * len(lines) + 8
    draw.rectangle([0, 0, img.width, banner_h], fill=(160, 0, 0))
    for i, line in enumerate(lines):
        draw.text((4, 4 + i * line_height), line, fill=(255, 255, 255), font=font)

    if out_path is None:
        out_path = Path(screenshot_path).with_name(
            Path(screenshot_path).stem + "_annotated.png")
    img.save(out_path)
    return Path(out_path)
