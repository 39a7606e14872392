from __future__ import annotations

import logging
from dataclasses import dataclass, field

from image_combiner.services.codec import save_buffer_with_format
from image_combiner.services.errors import BufferTooSmall
from image_combiner.services.interleave import PIXEL_BYTES

logger = logging.getLogger(__name__)


@dataclass
class FloatingImage:
	"""Output accumulator with a fixed RGBA capacity of width*height*4 bytes."""
	width: int
	height: int
	name: str
	data: bytes = field(default=b"", repr=False)

	@property
	def capacity(self) -> int:
		return self.width * self.height * PIXEL_BYTES

	def set_data(self, data: bytes) -> None:
		if len(data) > self.capacity:
			raise BufferTooSmall(len(data), self.capacity)
		if len(data) < self.capacity:
			logger.warning("Output buffer under-filled: %d of %d bytes", len(data), self.capacity)
		self.data = data

	def save(self, image_format: str) -> str:
		return save_buffer_with_format(self.name, self.data, self.width, self.height, image_format)


def assemble(width: int, height: int, data: bytes, name: str) -> FloatingImage:
	output = FloatingImage(width, height, name)
	output.set_data(data)
	return output
