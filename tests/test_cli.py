import pytest

from acotsp import cli


def test_solves_and_reports(matrix_file, capsys):
    rc = cli.main([matrix_file, "--iters", "5", "--ants-factor", "1", "--seed", "1",
                   "--restarts", "2", "--explore", "0"])
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Best tour length: 6.0"
    assert out[1].startswith("Best tour:")
    assert sorted(int(c) for c in out[1].split(":")[1].split()) == [0, 1, 2]
    assert len(out) == 4


def test_bad_file_exits_before_solving(tmp_path, capsys):
    p = tmp_path / "bad.txt"
    p.write_text("0 1\n1\n")
    assert cli.main([str(p), "--restarts", "1"]) == 1
    assert "Error reading graph" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.txt"), "--restarts", "1"]) == 1


def test_missing_argument():
    with pytest.raises(SystemExit) as e:
        cli.main([])
    assert e.value.code == 2


def test_tour_to_string():
    assert cli.tour_to_string([2, 0, 1]) == " 2 0 1"


def test_binary_file_reports_error(tmp_path, capsys):
    p = tmp_path / "bin.txt"
    p.write_bytes(b"0 1\n\xff\xfe 0\n")
    assert cli.main([str(p), "--restarts", "1"]) == 1
    assert "Error reading graph" in capsys.readouterr().err
