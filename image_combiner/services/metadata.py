from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from PIL import Image

from image_combiner.services.codec import normalize_format


def _mean_brightness(img: Image.Image) -> float:
	g = img.convert("L")
	if g.width * g.height == 0:
		return 0.0
	hist = g.histogram()
	return sum(i * n for i, n in enumerate(hist)) / (g.width * g.height)


def _file_size(p: Path) -> Optional[int]:
	try:
		return p.stat().st_size
	except OSError:
		return None


def extract_metadata(saved_paths: List[Path]) -> Dict[str, Any]:
	records: List[Dict[str, Any]] = []
	for p in saved_paths:
		with Image.open(p) as img:
			info: Dict[str, Any] = {
				"filename": p.name,
				"format": normalize_format(img.format),
				"width": img.width,
				"height": img.height,
				"pixels": img.width * img.height,
				"mode": img.mode,
				"size_bytes": _file_size(p),
				"mean_brightness": _mean_brightness(img),
			}
		records.append(info)
	return {"images": records}


def write_metadata_json(metadata: Dict[str, Any], out_path: Path) -> str:
	out_path.parent.mkdir(parents=True, exist_ok=True)
	with out_path.open("w", encoding="utf-8") as f:
		json.dump(metadata, f, indent=2)
	return str(out_path)
