from steiner.io.cli import main


def test_count_fano(capsys):
    assert main(["-n", "7", "-k", "3", "-t", "2"]) == 0
    assert capsys.readouterr().out == "30\n"


def test_indices_output(capsys):
    assert main(["-n", "4", "-k", "2", "-t", "1", "--output", "indices"]) == 0
    assert capsys.readouterr().out == "0 5\n1 4\n2 3\n"


def test_limit(capsys):
    assert main(["-n", "7", "-k", "3", "-t", "2", "--limit", "1", "--output", "bits"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "1110000", "1001100", "1000011", "0101010", "0100101", "0011001", "0010110",
    ]


def test_config_file_with_override(tmp_path, capsys):
    path = tmp_path / "run.yaml"
    path.write_text("n: 7\nk: 3\nt: 2\noutput: indices\n", encoding="utf-8")
    assert main([str(path), "--output", "count", "--no-prune"]) == 0
    assert capsys.readouterr().out == "30\n"


def test_invalid_parameters(capsys):
    assert main(["-n", "3", "-k", "3", "-t", "2"]) == 2
    assert capsys.readouterr().err.startswith("error: ")


def test_missing_parameters(capsys):
    assert main([]) == 2
    assert "missing" in capsys.readouterr().err


def test_workers_count_fano(capsys):
    assert main(["-n", "7", "-k", "3", "-t", "2", "--workers", "2"]) == 0
    assert capsys.readouterr().out == "30\n"


def test_zero_limit_emits_nothing(capsys):
    assert main(["-n", "7", "-k", "3", "-t", "2", "--limit", "0"]) == 0
    assert capsys.readouterr().out == "0\n"
    assert main(["-n", "7", "-k", "3", "-t", "2", "--limit", "0", "--workers", "2"]) == 0
    assert capsys.readouterr().out == "0\n"


def test_workers_limit_matches_serial(capsys):
    args = ["-n", "7", "-k", "3", "-t", "2", "--limit", "3", "--output", "indices"]
    assert main(args) == 0
    serial = capsys.readouterr().out
    assert main(args + ["--workers", "2"]) == 0
    assert capsys.readouterr().out == serial
    assert len(serial.splitlines()) == 3


def test_negative_limit(capsys):
    assert main(["-n", "7", "-k", "3", "-t", "2", "--limit", "-1"]) == 2
    assert "limit" in capsys.readouterr().err
