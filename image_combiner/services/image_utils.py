from __future__ import annotations
from typing import Tuple
from PIL import Image


def get_smallest_dimension(dim1: Tuple[int, int], dim2: Tuple[int, int]) -> Tuple[int, int]:
	# Fewer total pixels wins, ties keep the first
	pix1 = dim1[0] * dim1[1]
	pix2 = dim2[0] * dim2[1]
	return dim2 if pix1 > pix2 else dim1


def to_rgba(img: Image.Image) -> Image.Image:
	if img.mode != "RGBA":
		img = img.convert("RGBA")
	return img
