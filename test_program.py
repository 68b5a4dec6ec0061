import pytest
import matplotlib

matplotlib.use('Agg')

from geometry import Point, InvalidInput
from program import DEMO_POINTS, format_hull, load_points, main


@pytest.fixture
def points_file(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("5\n0 0\n0 2\n2 0\n2 2\n1 1\n", encoding="utf-8")
    return path


def test_load_points(points_file):
    assert load_points(str(points_file)) == [
        Point(0, 0), Point(0, 2), Point(2, 0), Point(2, 2), Point(1, 1),
    ]


@pytest.mark.parametrize("content", [
    "two\n0 0\n1 1\n",
    "2\n0 0\n1.5 1\n",
    "2\n0 0 0\n1 1\n",
    "3\n0 0\n1 1\n",
])
def test_load_points_rejects_malformed_files(tmp_path, content):
    path = tmp_path / "bad.txt"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(InvalidInput):
        load_points(str(path))


def test_format_hull():
    assert format_hull([Point(0, 0), Point(-3, 7)]) == "Convex Hull:\n0 0\n-3 7\n"


def test_main_demo_points(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["Convex Hull:", "-8 -5", "-1 -8", "3 -6", "17 17", "16 17", "-7 5"]
    assert len(DEMO_POINTS) == 18


def test_main_file_and_output(points_file, tmp_path, capsys):
    output = tmp_path / "hull.txt"
    assert main([str(points_file), "-o", str(output)]) == 0
    expected = "Convex Hull:\n0 0\n2 0\n2 2\n0 2\n"
    assert capsys.readouterr().out == expected
    assert output.read_text(encoding="utf-8") == expected


def test_main_too_few_points(tmp_path, capsys):
    path = tmp_path / "one.txt"
    path.write_text("1\n4 4\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1


def test_main_overflow(tmp_path):
    path = tmp_path / "big.txt"
    path.write_text(f"3\n0 0\n{2**40} 0\n0 {2**40}\n", encoding="utf-8")
    assert main([str(path), "--bits", "64"]) == 1
    assert main([str(path), "--bits", "128"]) == 0


def test_main_rejects_tiny_width():
    with pytest.raises(SystemExit):
        main(["--bits", "1"])


def test_main_save_plot(points_file, tmp_path):
    image = tmp_path / "hull.png"
    assert main([str(points_file), "--save-plot", str(image)]) == 0
    assert image.exists() and image.stat().st_size > 0


def test_load_points_rejects_non_utf8_file(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"2\n0 0\n\xff\xfe 1\n")
    with pytest.raises(InvalidInput):
        load_points(str(path))


def test_load_points_rejects_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    with pytest.raises(InvalidInput):
        load_points(str(path))


def test_main_non_utf8_file(tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"2\n0 0\n\xff\xfe 1\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_main_coordinates_wider_than_bits(tmp_path):
    path = tmp_path / "two.txt"
    path.write_text(f"2\n0 0\n{2**40} 0\n", encoding="utf-8")
    assert main([str(path), "--bits", "32"]) == 1
    assert main([str(path)]) == 0
