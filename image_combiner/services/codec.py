from __future__ import annotations

from pathlib import Path
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from image_combiner.services.errors import UnsupportedImage
from image_combiner.services.interleave import PIXEL_BYTES

# Containers Pillow cannot write with an alpha channel
RGB_ONLY_FORMATS = {"JPEG", "PPM"}
# Multi-picture JPEGs are still JPEG containers
FORMAT_ALIASES = {"MPO": "JPEG"}


def normalize_format(image_format: str | None) -> str | None:
	return FORMAT_ALIASES.get(image_format, image_format)


def find_image_from_path(path: str | Path) -> Tuple[Image.Image, str]:
	"""Decode an image file and report its container format.

	Raises:
		FileNotFoundError: path does not point to a file.
		UnsupportedImage: Pillow cannot identify the file.
	"""
	path = Path(path)
	if not path.is_file():
		raise FileNotFoundError(f"Image not found: {path}")
	try:
		img = Image.open(path)
	except UnidentifiedImageError as exc:
		raise UnsupportedImage(f"Not a supported image: {path}") from exc
	image_format = normalize_format(img.format)
	img.load()
	return img, image_format


def save_buffer_with_format(path: str | Path, data: bytes, width: int, height: int, image_format: str) -> str:
	expected = width * height * PIXEL_BYTES
	if len(data) < expected:
		# Pillow needs a complete frame
		data = bytes(data) + bytes(expected - len(data))
	img = Image.frombytes("RGBA", (width, height), bytes(data))
	if image_format in RGB_ONLY_FORMATS:
		img = img.convert("RGB")
	path = Path(path)
	path.parent.mkdir(parents=True, exist_ok=True)
	img.save(path, format=image_format)
	return str(path)
