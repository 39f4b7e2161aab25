"""Testy uruchamiania ILASP; subprocess jest zawsze podstawiany."""

import subprocess

import pytest

from data_model import ErrorCode, IlaspError
from ilnlp.ilasp import check_args, parse_total_time, run_ilasp
from ilnlp.stat import Stat


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestCheckArgs:
    def test_known_args_with_version(self):
        assert check_args(["--version=4", "-na", "-ml=3"]) == []

    def test_short_version_flag(self):
        assert check_args(["-v"]) == []

    def test_missing_version(self):
        warnings = check_args(["-na"])
        assert len(warnings) == 1
        assert "--version" in warnings[0]

    def test_unknown_flag(self):
        warnings = check_args(["--version=4", "--bogus"])
        assert len(warnings) == 1
        assert "'--bogus'" in warnings[0]

    def test_unknown_version_still_counts_as_version(self):
        warnings = check_args(["--version=9"])
        assert len(warnings) == 1
        assert "'--version=9'" in warnings[0]


class TestParseTotalTime:
    def test_total_line(self):
        stderr = "Pre-processing : 0.01s\nTotal                    : 0.123s\n"
        assert parse_total_time(stderr) == pytest.approx(0.123)

    def test_missing_line(self):
        assert parse_total_time("nothing here\n") is None

    def test_malformed_total(self):
        assert parse_total_time("Total: n/a\n") is None


class TestRunIlasp:
    def test_success(self, monkeypatch, tmp_path):
        calls = []

        def _run(cmd, **kwargs):
            calls.append(cmd)
            return _completed(stdout="p :- q.\n", stderr="Total : 1.5s\n")

        monkeypatch.setattr(subprocess, "run", _run)
        program = tmp_path / "task.las"
        out = tmp_path / "hyp.txt"
        stat = Stat()

        result = run_ilasp("ILASP", [" --version=4 "], program, stat, out)

        assert result == "p :- q.\n"
        assert calls == [["ILASP", "--version=4", str(program)]]
        assert out.read_text(encoding="utf-8") == "p :- q.\n"
        assert stat.ilasp_cpu_time == pytest.approx(1.5)

    def test_falls_back_to_wall_time(self, monkeypatch, tmp_path):
        monkeypatch.setattr(subprocess, "run", lambda cmd, **kw: _completed(stdout="ok"))
        stat = Stat()
        run_ilasp("ILASP", [], tmp_path / "t.las", stat)
        assert stat.ilasp_cpu_time is not None
        assert stat.ilasp_cpu_time >= 0

    def test_nonzero_exit(self, monkeypatch, tmp_path):
        monkeypatch.setattr(
            subprocess, "run",
            lambda cmd, **kw: _completed(returncode=2, stderr="syntax error"),
        )
        out = tmp_path / "hyp.txt"
        with pytest.raises(IlaspError) as exc:
            run_ilasp("ILASP", [], tmp_path / "t.las", Stat(), out)
        assert exc.value.code == ErrorCode.ILASP
        assert exc.value.returncode == 2
        assert exc.value.stderr == "syntax error"
        assert not out.exists()

    def test_missing_binary(self, monkeypatch, tmp_path):
        def _run(cmd, **kwargs):
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(subprocess, "run", _run)
        with pytest.raises(IlaspError):
            run_ilasp("no-such-ilasp", [], tmp_path / "t.las", Stat())
