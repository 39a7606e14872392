from PIL import Image

from image_combiner.services.image_utils import get_smallest_dimension
from image_combiner.services.resampling import resize, standardize_size
from tests.conftest import make_image


def test_smallest_dimension_by_pixel_count():
	assert get_smallest_dimension((10, 10), (3, 3)) == (3, 3)
	assert get_smallest_dimension((1, 5), (5, 5)) == (1, 5)
	# wider but fewer pixels still wins
	assert get_smallest_dimension((100, 1), (10, 20)) == (100, 1)


def test_smallest_dimension_tie_keeps_first():
	assert get_smallest_dimension((4, 4), (2, 8)) == (4, 4)
	assert get_smallest_dimension((2, 8), (4, 4)) == (2, 8)


def test_resize_to_own_size_is_identity():
	img = make_image((5, 3), (10, 20, 30, 40))
	out = resize(img, 5, 3)
	assert out is img
	assert out.tobytes() == img.tobytes()


def test_resize_preserves_mode():
	img = make_image((8, 8), (10, 20, 30), mode="RGB")
	out = resize(img, 4, 2)
	assert out.size == (4, 2)
	assert out.mode == "RGB"


def test_standardize_resizes_larger_second_image():
	img_1 = make_image((4, 2), (1, 2, 3, 4))
	img_2 = make_image((8, 4), (5, 6, 7, 8))
	out_1, out_2 = standardize_size(img_1, img_2)
	assert out_1 is img_1
	assert out_2.size == (4, 2)


def test_standardize_resizes_larger_first_image():
	img_1 = make_image((8, 4), (1, 2, 3, 4))
	img_2 = make_image((3, 3), (5, 6, 7, 8))
	out_1, out_2 = standardize_size(img_1, img_2)
	assert out_1.size == (3, 3)
	assert out_2 is img_2


def _grey_palette_gradient(width):
	img = Image.new("P", (width, 1))
	palette = []
	for i in range(256):
		palette += [i, i, i]
	img.putpalette(palette)
	img.putdata([i * 256 // width for i in range(width)])
	return img


def test_palette_image_resized_with_triangle_filter():
	img = _grey_palette_gradient(8)
	out = resize(img, 4, 1)
	expected = img.convert("RGBA").resize((4, 1), Image.BILINEAR)
	nearest = img.resize((4, 1), Image.NEAREST).convert("RGBA")
	assert out.tobytes() == expected.tobytes()
	assert out.tobytes() != nearest.tobytes()


def test_palette_image_same_size_is_untouched():
	img = _grey_palette_gradient(4)
	assert resize(img, 4, 1) is img
