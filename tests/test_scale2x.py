import pytest

from evilpixie.scale2x import scale2x

SAMPLE = [
    [0, 1, 1, 2, 0],
    [1, 1, 3, 2, 2],
    [0, 3, 3, 0, 1],
    [4, 0, 3, 1, 1],
]


def _transpose(img):
    return [list(col) for col in zip(*img)]


def _rotate180(img):
    return [list(reversed(row)) for row in reversed(img)]


def _nearest_double(img):
    out = []
    for row in img:
        wide = [v for v in row for _ in range(2)]
        out += [wide, list(wide)]
    return out


def test_output_is_double_size():
    out = scale2x(SAMPLE)
    assert len(out) == 2 * len(SAMPLE)
    assert all(len(row) == 2 * len(SAMPLE[0]) for row in out)


def test_single_pixel():
    assert scale2x([[7]]) == [[7, 7], [7, 7]]


def test_uniform_image_stays_uniform():
    img = [[5] * 4 for _ in range(3)]
    assert scale2x(img) == [[5] * 8 for _ in range(6)]


def test_isolated_pixel_is_plain_doubled():
    img = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    assert scale2x(img) == _nearest_double(img)


def test_diagonal_is_smoothed():
    assert scale2x([[1, 0], [0, 1]]) == [
        [1, 1, 0, 0],
        [1, 0, 1, 0],
        [0, 1, 0, 1],
        [0, 0, 1, 1],
    ]


def test_commutes_with_transpose():
    assert scale2x(_transpose(SAMPLE)) == _transpose(scale2x(SAMPLE))


def test_commutes_with_rotation():
    assert scale2x(_rotate180(SAMPLE)) == _rotate180(scale2x(SAMPLE))


def test_output_values_come_from_neighbourhood():
    out = scale2x(SAMPLE)
    h, w = len(SAMPLE), len(SAMPLE[0])
    for y in range(h):
        for x in range(w):
            allowed = {
                SAMPLE[y][x],
                SAMPLE[max(y - 1, 0)][x],
                SAMPLE[min(y + 1, h - 1)][x],
                SAMPLE[y][max(x - 1, 0)],
                SAMPLE[y][min(x + 1, w - 1)],
            }
            block = {out[2 * y][2 * x], out[2 * y][2 * x + 1],
                     out[2 * y + 1][2 * x], out[2 * y + 1][2 * x + 1]}
            assert block <= allowed


def test_accepts_bytes_rows():
    assert scale2x([b"\x01\x02"]) == scale2x([[1, 2]])


@pytest.mark.parametrize("img", [[], [[]]])
def test_empty_image_rejected(img):
    with pytest.raises(ValueError):
        scale2x(img)


def test_ragged_image_rejected():
    with pytest.raises(ValueError):
        scale2x([[1, 2], [3]])