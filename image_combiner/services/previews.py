from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image

from image_combiner import settings


def generate_preview(path: Path, preview_dir: Path, max_width: Optional[int] = None) -> str:
	max_w = max_width if max_width is not None else settings.PREVIEW_MAX_WIDTH
	preview_dir.mkdir(parents=True, exist_ok=True)
	with Image.open(path) as img:
		if img.mode != "RGB":
			img = img.convert("RGB")
		if img.width > max_w:
			r = max_w / float(img.width)
			img = img.resize((max_w, max(1, int(img.height * r))), Image.LANCZOS)
		out_path = preview_dir / (path.stem + ".jpg")
		img.save(out_path, format="JPEG", quality=85, optimize=True)
	return str(out_path)
