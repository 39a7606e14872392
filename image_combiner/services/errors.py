from __future__ import annotations


class ImageDataError(Exception):
	"""Base for failures the caller can branch on."""


class DifferentImageFormats(ImageDataError):
	def __init__(self, format_1: str | None, format_2: str | None) -> None:
		super().__init__(f"Images have different formats: {format_1} != {format_2}")
		self.format_1 = format_1
		self.format_2 = format_2


class BufferTooSmall(ImageDataError):
	def __init__(self, size: int, capacity: int) -> None:
		super().__init__(f"Combined data ({size} bytes) does not fit output buffer ({capacity} bytes)")
		self.size = size
		self.capacity = capacity


class PixelBoundsError(IndexError):
	"""Raised when the interleaver would read past the end of a source buffer."""


class UnsupportedImage(ValueError):
	pass
