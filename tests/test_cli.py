import pytest

from bbscript.__main__ import main


def test_no_args_prints_usage(capsys):
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().err


def test_version(capsys):
    assert main(["-V"]) == 0
    assert capsys.readouterr().out.strip()


def test_list(db_dir, capsys):
    assert main(["--db-dir", str(db_dir), "-l"]) == 0
    assert capsys.readouterr().out.split() == ["bbcf"]


def test_dump(db_dir, capsys):
    assert main(["-d", "bbcf", f"--db-dir={db_dir}"]) == 0
    out = capsys.readouterr().out
    assert "0x00000012 size=12 NoBlock setState(Int, Int)" in out
    assert "Unknown19(Int, Unknown(12))" in out


@pytest.mark.parametrize("key", ["0x12", "18", "setState"])
def test_find(db_dir, capsys, key):
    assert main(["--db-dir", str(db_dir), "-f", "bbcf", key]) == 0
    out = capsys.readouterr().out
    assert "setState(Int, Int)" in out
    assert "arg0: 3 = kStateIdle" in out


def test_find_unknown(db_dir, capsys):
    assert main(["--db-dir", str(db_dir), "-f", "bbcf", "0x99"]) == 1
    assert "unknown function: 0x99" in capsys.readouterr().err


def test_missing_game_lists_available(db_dir, capsys):
    assert main(["--db-dir", str(db_dir), "-d", "xrd"]) == 1
    err = capsys.readouterr().err
    assert "game database not found" in err
    assert "available games: bbcf" in err


def test_analyze(db_dir, capsys):
    assert main(["--db-dir", str(db_dir), "-a", "bbcf"]) == 0
    out = capsys.readouterr().out
    assert "duplicate id: 0x00000012" in out
    assert "12 untyped trailing bytes" in out


@pytest.mark.parametrize(
    "argv", [["-f", "bbcf"], ["-x"], ["--db-dir"], ["-d", "a", "b"]]
)
def test_usage_errors(argv):
    assert main(argv) == 2


@pytest.mark.parametrize("key", ["-0x5", "-5", "0x100000000"])
def test_find_out_of_range_id_is_a_name(db_dir, capsys, key):
    assert main(["--db-dir", str(db_dir), "-f", "bbcf", key]) == 1
    assert f"unknown function: {key}" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv", [["--db-dir", "-l"], ["--db-dir=", "-l"], ["-l", "--db-dir="]]
)
def test_db_dir_requires_value(argv, capsys):
    assert main(argv) == 2
    assert "--db-dir requires a value" in capsys.readouterr().err
