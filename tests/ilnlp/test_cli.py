"""
Testy komend ilnlp od końca do końca, przez main(argv).

clingo działa naprawdę; ILASP zastępuje podstawiony subprocess.run.
"""

import os
import subprocess

import pytest

from ilnlp._config import get_settings
from ilnlp.cli import build_parser, main


COMPATIBLE = """\
q(X) :- p(X).
I: p(1)
O: {p(1) q(1)}
"""

INCOMPATIBLE = """\
I: a
O: {a b}
I: a
O: {a}
"""


@pytest.fixture
def task_file(tmp_path):
    def _write(text):
        path = tmp_path / "task.txt"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


class TestParser:
    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_ilasp_args_accumulate(self):
        args = build_parser().parse_args(
            ["convert", "--run", "--ilasp-arg=--version=4", "--ilasp-arg=-na"]
        )
        assert args.ilasp_arg == ["--version=4", "-na"]
        assert args.input is None


class TestCheck:
    def test_compatible(self, task_file, capsys):
        main(["check", task_file(COMPATIBLE)])
        assert "Zgodne" in capsys.readouterr().err

    def test_incompatible(self, task_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["check", task_file(INCOMPATIBLE)])
        assert exc.value.code == 1
        assert "NIEZGODNE" in capsys.readouterr().err

    def test_parse_error(self, task_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["check", task_file("p :- .\n")])
        assert exc.value.code == 1
        assert "E_PARSE" in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["check", str(tmp_path / "brak.txt")])
        assert exc.value.code == 1


class TestUniverse:
    def test_prints_literals(self, task_file, capsys):
        main(["universe", task_file(COMPATIBLE)])
        err = capsys.readouterr().err
        assert "q(1)" in err
        assert "2 literałów w 2 predykatach" in err


class TestConvert:
    def test_program_to_stdout(self, task_file, capsys):
        main(["convert", task_file(COMPATIBLE)])
        out = capsys.readouterr().out
        assert "#pos({p(1), q(1)}, {}, { p(1). })." in out
        assert "#modeh(q(1))." in out
        assert "q(X) :- p(X)." in out

    def test_program_to_file(self, task_file, tmp_path, capsys):
        out_path = tmp_path / "task.las"
        main(["convert", task_file(COMPATIBLE), "-o", str(out_path)])
        assert "#modeb(p(1), (positive))." in out_path.read_text(encoding="utf-8")
        assert capsys.readouterr().out == ""

    def test_custom_template(self, task_file, tmp_path, capsys):
        template = tmp_path / "t.las"
        template.write_text("{{ pos_examples | length }}/{{ neg_examples | length }}", encoding="utf-8")
        main(["convert", task_file(COMPATIBLE), "--template", str(template)])
        assert capsys.readouterr().out == "1/0"

    def test_template_from_environment(self, task_file, tmp_path, monkeypatch, capsys):
        template = tmp_path / "t.las"
        template.write_text("{{ search_space.head | join(',') }}", encoding="utf-8")
        monkeypatch.setenv("ILNLP_TEMPLATE", str(template))
        main(["convert", task_file(COMPATIBLE)])
        assert capsys.readouterr().out == "q(1)"

    def test_missing_template(self, task_file, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["convert", task_file(COMPATIBLE), "--template", str(tmp_path / "brak.las")])
        assert exc.value.code == 1

    def test_incompatible(self, task_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["convert", task_file(INCOMPATIBLE)])
        assert exc.value.code == 1
        assert "E_INCOMPATIBLE_I" in capsys.readouterr().err

    def test_stats(self, task_file, capsys):
        main(["convert", task_file(COMPATIBLE), "--stats"])
        err = capsys.readouterr().err
        assert "Statystyki" in err
        assert "2 literałów" in err

    def test_ctrl_c_prints_stats(self, task_file, monkeypatch, capsys):
        def _interrupt(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr("induction.build_induction_task", _interrupt)
        with pytest.raises(SystemExit) as exc:
            main(["convert", task_file(COMPATIBLE)])
        assert exc.value.code == 130
        assert "Statystyki" in capsys.readouterr().err


class TestConvertRun:
    def test_runs_ilasp_on_temp_file(self, task_file, monkeypatch, capsys):
        seen = {}

        def _run(cmd, **kwargs):
            program = cmd[-1]
            with open(program, encoding="utf-8") as f:
                seen["program"] = f.read()
            seen["cmd"] = cmd
            return subprocess.CompletedProcess(cmd, 0, stdout="q(X) :- p(X).\n", stderr="Total : 0.5s\n")

        monkeypatch.setattr(subprocess, "run", _run)
        main(["convert", task_file(COMPATIBLE), "--run", "--ilasp", "my-ilasp",
              "--ilasp-arg=--version=4", "--stats"])

        captured = capsys.readouterr()
        assert seen["cmd"][:2] == ["my-ilasp", "--version=4"]
        assert "#pos(" in seen["program"]
        assert captured.out == "q(X) :- p(X).\n"
        assert "0.500s" in captured.err
        assert not os.path.exists(seen["cmd"][-1])

    def test_settings_from_environment(self, task_file, monkeypatch, capsys):
        seen = {}

        def _run(cmd, **kwargs):
            seen["cmd"] = cmd
            return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

        monkeypatch.setattr(subprocess, "run", _run)
        monkeypatch.setenv("ILNLP_ILASP", "/opt/ILASP")
        monkeypatch.setenv("ILNLP_ILASP_ARGS", "--version=2i -na")
        main(["convert", task_file(COMPATIBLE), "--run"])
        assert seen["cmd"][:3] == ["/opt/ILASP", "--version=2i", "-na"]
        assert "Ostrzeżenie" not in capsys.readouterr().err

    def test_warns_without_version(self, task_file, monkeypatch, capsys):
        monkeypatch.setattr(
            subprocess, "run",
            lambda cmd, **kw: subprocess.CompletedProcess(cmd, 0, stdout="", stderr=""),
        )
        main(["convert", task_file(COMPATIBLE), "--run"])
        assert "--version" in capsys.readouterr().err

    def test_ilasp_failure(self, task_file, monkeypatch, capsys):
        monkeypatch.setattr(
            subprocess, "run",
            lambda cmd, **kw: subprocess.CompletedProcess(cmd, 1, stdout="", stderr="boom"),
        )
        with pytest.raises(SystemExit) as exc:
            main(["convert", task_file(COMPATIBLE), "--run", "--ilasp-arg=--version=4"])
        assert exc.value.code == 1
        err = capsys.readouterr().err
        assert "E_ILASP" in err
        assert "boom" in err


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ILNLP_ILASP", "ILNLP_ILASP_ARGS", "ILNLP_TEMPLATE"):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.ilasp == "ILASP"
        assert settings.ilasp_args == []
        assert settings.template is None

    def test_args_are_shell_split(self, monkeypatch):
        monkeypatch.setenv("ILNLP_ILASP_ARGS", "--version=4 '-ml=2'")
        assert get_settings().ilasp_args == ["--version=4", "-ml=2"]
