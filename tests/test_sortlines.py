import io

from drills.sortlines import main, sort_lines, sort_numbers


def test_sort_lines_orders_strings():
    lines = ["pear\n", "apple\n", "fig\n"]
    result = sort_lines(lines)
    assert result == ["apple\n", "fig\n", "pear\n"]
    assert sorted(result) == result


def test_sort_lines_keeps_every_line():
    lines = ["b\n", "a\n", "b\n", "C\n"]
    result = sort_lines(lines)
    assert len(result) == len(lines)
    assert set(result) == set(lines)
    assert result[0] == "C\n"


def test_sort_numbers_bases():
    assert sort_numbers(["10\n", "0x10\n", "010\n", "-3\n", "abc\n"]) == [-3, 0, 8, 10, 16]


def test_sort_numbers_is_sorted_and_complete():
    lines = ["42\n", " 7\n", "+5junk\n", "-100\n", "9\n"]
    result = sort_numbers(lines)
    assert result == sorted(result)
    assert len(result) == len(lines)
    assert 5 in result and 7 in result


def test_main_sorts_each_file(tmp_path, capsys):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("zeta\nalpha\n")
    second.write_text("gamma\nbeta\n")
    assert main([str(first), str(second)]) == 0
    assert capsys.readouterr().out == "alpha\nzeta\nbeta\ngamma\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("c\nb\na\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "a\nb\nc\n"


def test_main_numeric(tmp_path, capsys):
    source = tmp_path / "nums.txt"
    source.write_text("30\n4\n-2\n")
    assert main(["-n", str(source)]) == 0
    assert capsys.readouterr().out == "-2\n4\n30\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Could not open file" in capsys.readouterr().err