from io import BytesIO

import pytest
from PIL import Image

from image_combiner import settings


def make_image(size, color, mode="RGBA"):
	return Image.new(mode, size, color)


def save_image(path, size, color, image_format="PNG", mode="RGBA"):
	make_image(size, color, mode).save(path, format=image_format)
	return path


def image_bytes(size, color, image_format="PNG", mode="RGBA"):
	buf = BytesIO()
	make_image(size, color, mode).save(buf, format=image_format)
	return buf.getvalue()


@pytest.fixture
def workspace(tmp_path, monkeypatch):
	monkeypatch.setattr(settings, "JOBS_DIR", tmp_path / "jobs")
	monkeypatch.setattr(settings, "WORK_DIR", tmp_path / "work")
	return tmp_path
