from __future__ import annotations

import logging
from typing import Tuple

from PIL import Image

from image_combiner.services.image_utils import get_smallest_dimension, to_rgba

logger = logging.getLogger(__name__)

# Triangle filter: linear interpolation between neighbouring samples
RESAMPLE_FILTER = Image.BILINEAR
# Pillow falls back to nearest-neighbour for these modes
PALETTE_MODES = {"1", "P", "PA"}


def resize(img: Image.Image, width: int, height: int) -> Image.Image:
	if img.size == (width, height):
		return img
	logger.debug("Resizing %sx%s -> %sx%s", img.width, img.height, width, height)
	if img.mode in PALETTE_MODES:
		img = to_rgba(img)
	return img.resize((width, height), RESAMPLE_FILTER)


def standardize_size(image_1: Image.Image, image_2: Image.Image) -> Tuple[Image.Image, Image.Image]:
	"""Bring both images to the dimensions of the one with fewer pixels.

	Only one image is ever resampled; the other is returned as is.
	"""
	dim = get_smallest_dimension(image_1.size, image_2.size)
	logger.info("Dimension is : %s", dim)

	if dim == image_1.size:
		return image_1, resize(image_2, dim[0], dim[1])
	return resize(image_1, dim[0], dim[1]), image_2
