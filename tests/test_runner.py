import pytest

from aoc25 import day01, day06
from aoc25.runner import main, run

EXAMPLE = "\n".join(
    [
        "123 328  51 64 ",
        " 45 64  387 23 ",
        "  6 98  215 314",
        "*   +   *   +  ",
    ]
).strip()


def test_run_dispatches_to_day_and_part():
    assert run(6, 1, EXAMPLE) == day06.part1(EXAMPLE)
    assert run(6, 2, EXAMPLE) == day06.part2(EXAMPLE)


def test_run_day_one():
    text = "L68\nL30\nR48"
    assert run(1, 2, text) == day01.part2(text)


@pytest.mark.parametrize("day, part", [(0, 1), (99, 1), (1, 0), (1, 3), (7, 2)])
def test_run_rejects_unknown(day, part):
    with pytest.raises(ValueError):
        run(day, part, "")


def test_main_uses_test_input(tmp_path, capsys):
    (tmp_path / "input-6-test.txt").write_text(EXAMPLE + "\n", encoding="utf-8")
    assert main(["6", "1", "test", "--inputs", str(tmp_path)]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == str(day06.part1(EXAMPLE))
    assert "Runtime:" in captured.err


def test_main_uses_real_input_without_test_flag(tmp_path, capsys):
    (tmp_path / "input-6.txt").write_text(EXAMPLE, encoding="utf-8")
    assert main(["6", "2", "--inputs", str(tmp_path)]) == 0
    assert capsys.readouterr().out.strip() == str(day06.part2(EXAMPLE))


def test_main_missing_input_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["6", "1", "--inputs", str(tmp_path)])


def test_main_unknown_day_exits(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["99", "1", "--inputs", str(tmp_path)])
    assert info.value.code == 2