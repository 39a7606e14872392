"""Block interleaving of raw RGBA buffers.

Pixels are taken alternately from two buffers: for every byte offset ``i``
stepping one pixel at a time, the pixel comes from the first buffer when
``i % group_bytes == 0`` and from the second buffer otherwise. With the
default group of 8 bytes this yields A, B, A, B, ...
"""
from __future__ import annotations

import numpy as np
from PIL import Image

from image_combiner.services.errors import PixelBoundsError
from image_combiner.services.image_utils import to_rgba

PIXEL_BYTES = 4
GROUP_BYTES = 8


def alternate_pixels(buf_a: bytes, buf_b: bytes, group_bytes: int = GROUP_BYTES) -> bytes:
	if group_bytes <= 0 or group_bytes % PIXEL_BYTES:
		raise ValueError(f"group_bytes must be a positive multiple of {PIXEL_BYTES}, got {group_bytes}")

	size = min(len(buf_a), len(buf_b))
	if size % PIXEL_BYTES:
		# The last pixel would need bytes past the end of the shorter buffer
		last = size - size % PIXEL_BYTES
		raise PixelBoundsError(
			f"Index is out of bound: pixel at {last}..{last + PIXEL_BYTES - 1} exceeds buffer of {size} bytes"
		)
	if size == 0:
		return b""

	a = np.frombuffer(buf_a, dtype=np.uint8, count=size).reshape(-1, PIXEL_BYTES)
	b = np.frombuffer(buf_b, dtype=np.uint8, count=size).reshape(-1, PIXEL_BYTES)
	from_a = (np.arange(0, size, PIXEL_BYTES) % group_bytes) == 0
	out = np.where(from_a[:, None], a, b)
	return out.astype(np.uint8).tobytes()


def combine_images(image_1: Image.Image, image_2: Image.Image, group_bytes: int = GROUP_BYTES) -> bytes:
	vec1 = to_rgba(image_1).tobytes()
	vec2 = to_rgba(image_2).tobytes()
	return alternate_pixels(vec1, vec2, group_bytes=group_bytes)
