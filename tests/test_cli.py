from pathlib import Path

from image_combiner.cli import main
from tests.conftest import save_image


def test_cli_combines_images(tmp_path, capsys):
	p1 = save_image(tmp_path / "a.png", (6, 6), (255, 0, 0, 255))
	p2 = save_image(tmp_path / "b.png", (3, 3), (0, 255, 0, 255))
	out = tmp_path / "out.png"

	assert main([str(p1), str(p2), str(out)]) == 0
	assert out.exists()
	assert "Saved:" in capsys.readouterr().out


def test_cli_reports_format_mismatch(tmp_path, capsys):
	p1 = save_image(tmp_path / "a.png", (2, 2), (255, 0, 0, 255))
	p2 = save_image(tmp_path / "b.bmp", (2, 2), (0, 255, 0, 255), image_format="BMP")

	assert main([str(p1), str(p2), str(tmp_path / "out.png")]) == 1
	assert "different formats" in capsys.readouterr().err
	assert not Path(tmp_path / "out.png").exists()
