from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from image_combiner.services.combine_pipeline import combine_files
from image_combiner.services.errors import ImageDataError
from image_combiner.services.interleave import GROUP_BYTES


def main(argv=None) -> int:
	parser = argparse.ArgumentParser(description="Combine two images by interleaving their pixels")
	parser.add_argument("image_1", help="First input image")
	parser.add_argument("image_2", help="Second input image (same container format as the first)")
	parser.add_argument("output", help="Output image path, written in the inputs' format")
	parser.add_argument("--group-bytes", type=int, default=GROUP_BYTES, help="Bytes per A/B alternation group (multiple of 4, default: 8)")
	parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
	args = parser.parse_args(argv)

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.INFO,
		format="%(asctime)s - %(levelname)s - %(message)s",
	)

	try:
		out = combine_files(Path(args.image_1), Path(args.image_2), Path(args.output), group_bytes=args.group_bytes)
	except ImageDataError as exc:
		print(f"Error: {exc}", file=sys.stderr)
		return 1
	print(f"Saved: {out.name}")
	return 0


if __name__ == "__main__":
	sys.exit(main())
