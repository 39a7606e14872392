from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from PIL import Image

from image_combiner import settings
from image_combiner.services.codec import find_image_from_path
from image_combiner.services.errors import DifferentImageFormats
from image_combiner.services.floating_image import FloatingImage, assemble
from image_combiner.services.interleave import GROUP_BYTES, combine_images
from image_combiner.services.metadata import extract_metadata, write_metadata_json
from image_combiner.services.previews import generate_preview
from image_combiner.services.resampling import standardize_size
from image_combiner.services.status_store import write_status

logger = logging.getLogger(__name__)

FORMAT_EXTENSIONS = {"JPEG": ".jpg", "PNG": ".png", "GIF": ".gif", "BMP": ".bmp", "TIFF": ".tif", "WEBP": ".webp"}


def combine(
	image_1: Image.Image,
	format_1: str,
	image_2: Image.Image,
	format_2: str,
	output: str | Path,
	group_bytes: int = GROUP_BYTES,
) -> FloatingImage:
	"""Run the in-memory part of the pipeline and return the filled output image.

	Raises:
		DifferentImageFormats: before any pixel work when the containers differ.
		BufferTooSmall: the interleaved data exceeds the output capacity.
		PixelBoundsError: a source buffer is not a whole number of RGBA pixels.
	"""
	if format_1 != format_2:
		raise DifferentImageFormats(format_1, format_2)

	image_1, image_2 = standardize_size(image_1, image_2)

	combined_data = combine_images(image_1, image_2, group_bytes=group_bytes)
	return assemble(image_2.width, image_2.height, combined_data, str(output))


def combine_files(path_1: str | Path, path_2: str | Path, output: str | Path, group_bytes: int = GROUP_BYTES) -> FloatingImage:
	image_1, format_1 = find_image_from_path(path_1)
	image_2, format_2 = find_image_from_path(path_2)
	logger.debug("Decoded %s (%s) and %s (%s)", path_1, format_1, path_2, format_2)

	out = combine(image_1, format_1, image_2, format_2, output, group_bytes=group_bytes)
	out.save(format_1)
	logger.info("Saved %sx%s %s image to %s", out.width, out.height, format_1, out.name)
	return out


def run_pipeline(job_id: str, files_meta: List[Dict[str, Any]], group_bytes: int = GROUP_BYTES) -> None:
	try:
		# 1) Save uploads to <work>/input/<job_id>/
		write_status(job_id, {"job_id": job_id, "status": "saving", "step": "Save Images"})
		in_dir = settings.WORK_DIR / "input" / job_id
		in_dir.mkdir(parents=True, exist_ok=True)
		saved = []
		for i, fm in enumerate(files_meta, start=1):
			# prefix keeps two uploads with the same filename apart
			name = f"{i}_{Path(fm['filename']).name}"
			p = in_dir / name
			with p.open("wb") as f:
				f.write(fm["data"])
			saved.append(p)

		# 2) Metadata
		write_status(job_id, {"job_id": job_id, "status": "metadata", "step": "Extract Metadata"})
		metadata = extract_metadata(saved)
		metadata_path = write_metadata_json(metadata, in_dir / "metadata.json")

		# 3) Combine
		write_status(job_id, {
			"job_id": job_id,
			"status": "combining",
			"step": "Combine Images",
			"metadata": metadata_path,
		})
		image_format = metadata["images"][0].get("format")
		ext = FORMAT_EXTENSIONS.get(image_format, ".png")
		out_path = settings.WORK_DIR / "combined" / job_id / f"combined{ext}"
		out = combine_files(saved[0], saved[1], out_path, group_bytes=group_bytes)

		# 4) Preview
		write_status(job_id, {
			"job_id": job_id,
			"status": "previewing",
			"step": "Generate Preview",
			"metadata": metadata_path,
			"combined": out.name,
		})
		preview = generate_preview(Path(out.name), settings.WORK_DIR / "previews" / job_id)

		# 5) Complete
		write_status(job_id, {
			"job_id": job_id,
			"status": "completed",
			"step": "Done",
			"metadata": metadata_path,
			"combined": out.name,
			"format": image_format,
			"width": out.width,
			"height": out.height,
			"preview": preview,
		})
	except Exception as e:
		logger.exception("Job %s failed", job_id)
		write_status(job_id, {"job_id": job_id, "status": "error", "error": str(e), "error_type": type(e).__name__})
