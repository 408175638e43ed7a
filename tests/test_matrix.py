import pytest

from drills.matrix import MatrixFormatError, load_matrix, main, rotate

ROWS = ["".join(chr(ord("!") + 10 * i + j) for j in range(10)) for i in range(10)]


def _lines(rows):
    return [row + "\n" for row in rows]


def test_four_rotations_are_identity():
    result = ROWS
    for _ in range(4):
        result = rotate(result)
    assert result == ROWS


def test_rotation_moves_cells_clockwise():
    rotated = rotate(ROWS)
    for i in range(10):
        for j in range(10):
            assert rotated[j][9 - i] == ROWS[i][j]


def test_rotation_of_uniform_rows():
    rows = [chr(ord("a") + i) * 10 for i in range(10)]
    assert rotate(rows) == ["jihgfedcba"] * 10


def test_rotate_rejects_non_square():
    with pytest.raises(ValueError):
        rotate(["ab", "c"])


def test_load_matrix_valid():
    assert load_matrix(_lines(ROWS)) == ROWS


def test_load_matrix_too_short():
    lines = _lines(ROWS)
    lines[3] = "abc\n"
    with pytest.raises(MatrixFormatError, match="Line 4 is too short"):
        load_matrix(lines)


def test_load_matrix_too_long():
    lines = _lines(ROWS)
    lines[0] = "x" * 11 + "\n"
    with pytest.raises(MatrixFormatError, match="Line 1 is too long"):
        load_matrix(lines)


def test_load_matrix_missing_final_newline():
    lines = _lines(ROWS)
    lines[-1] = ROWS[-1]
    with pytest.raises(MatrixFormatError, match="too long"):
        load_matrix(lines)


def test_load_matrix_too_many_lines():
    with pytest.raises(MatrixFormatError, match="Too many lines"):
        load_matrix(_lines(ROWS) + [ROWS[0] + "\n"])


def test_load_matrix_too_few_lines():
    with pytest.raises(MatrixFormatError, match="Only 5 lines were read"):
        load_matrix(_lines(ROWS[:5]))


def test_main_reports_bad_input(tmp_path, capsys):
    source = tmp_path / "bad.txt"
    source.write_text("".join(_lines(ROWS[:2])))
    assert main([str(source)]) == 1
    assert "Only 2 lines were read!" in capsys.readouterr().err


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err