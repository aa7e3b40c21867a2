import dataclasses
import json

import pytest

from bintotxt import cli
from bintotxt.cli import EXIT_FORMAT, EXIT_INTERNAL, EXIT_IO, EXIT_OK, EXIT_VALIDATION, main
from bintotxt.config import RunConfig
from bintotxt.emit import HEADER


def test_usage_without_input(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == EXIT_OK
    assert main(["-i", ""]) == EXIT_OK
    assert "usage: bintotxt" in capsys.readouterr().out
    assert not (tmp_path / "output.txt").exists()


def test_converts_file(graph_file, tmp_path, capsys):
    src = graph_file(2, [(0, 1, 10), (1, 0, -5)])
    dst = tmp_path / "edges.txt"
    assert main(["-i", str(src), "-o", str(dst)]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Graph read: 2 vertices, 2 edges." in out
    assert f"Edges written to {dst}." in out
    assert dst.read_text(encoding="utf-8").splitlines() == [HEADER, "(0, 1, 10)", "(1, 0, -5)"]


def test_default_output_path(graph_file, tmp_path, monkeypatch):
    src = graph_file(1, [(0, 0, 0)])
    monkeypatch.chdir(tmp_path)
    assert main(["-i", str(src)]) == EXIT_OK
    assert (tmp_path / "output.txt").exists()


def test_validation_error(graph_file, tmp_path, capsys):
    src = graph_file(3, [(3, 0, 5)])
    dst = tmp_path / "edges.txt"
    assert main(["-i", str(src), "-o", str(dst)]) == EXIT_VALIDATION
    assert "error: invalid vertex indices in edge 0: from=3, to=0" in capsys.readouterr().out
    assert not dst.exists()


def test_format_error(graph_file, tmp_path, capsys):
    src = graph_file(3, [(0, 1, 2)], extra=b"\x01")
    assert main(["-i", str(src), "-o", str(tmp_path / "x.txt")]) == EXIT_FORMAT
    assert "truncated record 1" in capsys.readouterr().out


def test_missing_input(tmp_path, capsys):
    assert main(["-i", str(tmp_path / "nope.bin"), "-o", str(tmp_path / "x.txt")]) == EXIT_IO
    assert capsys.readouterr().out.startswith("error: cannot open")


def test_json_log(graph_file, tmp_path, capsys):
    src = graph_file(2, [(0, 1, 1)])
    main(["-i", str(src), "-o", str(tmp_path / "x.txt"), "--log-json", "--log-level", "info"])
    events = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
    assert events == [
        {
            "level": "info",
            "event": "run",
            "input": str(src),
            "output": str(tmp_path / "x.txt"),
            "n": 2,
            "m": 1,
            "lines": 2,
        }
    ]


def test_config_is_frozen():
    cfg = RunConfig(input_path="a.bin")
    assert cfg.output_path == "output.txt"
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.output_path = "b.txt"


def test_failure_is_logged_as_warning(graph_file, tmp_path, capsys):
    src = graph_file(3, [(3, 0, 5)])
    main(["-i", str(src), "-o", str(tmp_path / "x.txt")])
    err = capsys.readouterr().err
    assert f"warning failed input={src} error=VertexRangeError exit=64" in err


def test_unencodable_header_exits_with_io_error(graph_file, tmp_path, capsys):
    src = graph_file(1, [(0, 0, 1)])
    dst = tmp_path / "x.txt"
    assert main(["-i", str(src), "-o", str(dst), "--header", "\udcff"]) == EXIT_IO
    assert "error: failed to write line 1" in capsys.readouterr().out


def test_unexpected_error_exits_internal(graph_file, tmp_path, monkeypatch, capsys):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "write_edges", boom)
    src = graph_file(1, [(0, 0, 1)])
    assert main(["-i", str(src), "-o", str(tmp_path / "x.txt")]) == EXIT_INTERNAL
    captured = capsys.readouterr()
    assert "internal error: boom" in captured.out
    assert "error=RuntimeError exit=70" in captured.err
