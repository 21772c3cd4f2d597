import pytest
from PIL import Image

from mazegen.cli import main
from mazegen.errors import InvalidDimensions
from mazegen.grid import render
from mazegen.mapgen.generator import generate

def test_default_prints_10x10(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 21
    assert all(len(line) == 41 for line in lines)
    assert lines[0] == " ".join(["#"] * 21)

def test_seeded_output_matches_library(capsys):
    assert main(["--width", "4", "--height", "3", "--seed", "9"]) == 0
    assert capsys.readouterr().out == render(generate(4, 3, seed=9))

def test_invalid_size_propagates():
    with pytest.raises(InvalidDimensions):
        main(["--width", "1"])

def test_png_export(tmp_path, capsys):
    out = tmp_path / "mazes" / "m.png"
    assert main(["--width", "3", "--height", "2", "--seed", "1", "--png", str(out), "--cell", "4"]) == 0
    capsys.readouterr()
    with Image.open(out) as img:
        assert img.size == (7 * 4, 5 * 4)
