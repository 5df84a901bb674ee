import io
import json

import pytest

from eisenhower_board import cli


def test_cli_prints_summary(tmp_path, capsys):
    path = tmp_path / "tasks.txt"
    path.write_text("Write report\nCall client\n\nBook flight\n", encoding="utf-8")

    assert cli.main(["--tasks", str(path), "--move", "1=do", "--move", "3=q2"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Important & Urgent:\nWrite report\n\nImportant & Not Urgent:\nBook flight\n")
    assert out.rstrip("\n").endswith("Unimportant & Not Urgent:\nCall client")


def test_cli_json_report(tmp_path, capsys):
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps(["a", "b"]), encoding="utf-8")

    assert cli.main(["--tasks", str(path), "--move", "2=delegate", "--json"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["buckets"]["Unimportant & Urgent"] == [2]
    assert report["buckets"]["Unimportant & Not Urgent"] == [1]
    assert report["stats"]["total_tasks"] == 2


def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\ny\n"))
    assert cli.main(["--tasks", "-"]) == 0
    assert capsys.readouterr().out.rstrip("\n").endswith("Unimportant & Not Urgent:\nx\ny")


def test_cli_unknown_id_is_ignored(tmp_path, capsys):
    path = tmp_path / "tasks.txt"
    path.write_text("a\n", encoding="utf-8")
    assert cli.main(["--tasks", str(path), "--move", "9=do"]) == 0
    assert "Important & Urgent:\n\n" in capsys.readouterr().out


def test_cli_rejects_bad_quadrant(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("a\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--tasks", str(path), "--move", "1=someday"])
    assert excinfo.value.code == 2


def test_cli_copy_failure_exit_code(tmp_path, monkeypatch):
    path = tmp_path / "tasks.txt"
    path.write_text("a\n", encoding="utf-8")
    monkeypatch.setattr(cli.BoardSession, "copy", lambda self: False)
    assert cli.main(["--tasks", str(path), "--copy"]) == 1


def test_cli_log_level_is_validated(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("a\n", encoding="utf-8")
    assert cli.main(["--tasks", str(path), "--log-level", "debug"]) == 0
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--tasks", str(path), "--log-level", "loud"])
    assert excinfo.value.code == 2
