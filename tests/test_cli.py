import json
import logging

from puml2model.cli import _LEVELS, build_parser, main

SAMPLE = "class A {\n x : int\n}\nA \"1\" -- \"*\" B : has\nnot a rule\n"


def test_dump_to_stdout(tmp_path, capsys):
    src = tmp_path / "sample.puml"
    src.write_text(SAMPLE, encoding="utf-8")
    assert main([str(src), "--reporting", "0"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Entities:\n - A\n    attr x : int\n")
    assert ' - A "1" -- "*" B : has' in out


def test_json_to_outdir(tmp_path):
    src = tmp_path / "my model.puml"
    src.write_text(SAMPLE, encoding="utf-8")
    outdir = tmp_path / "out"
    assert main([str(src), "-o", str(outdir), "--format", "json", "--reporting", "0"]) == 0
    data = json.loads((outdir / "my_model.json").read_text(encoding="utf-8"))
    assert data["relationships"][0]["to"] == "B"


def test_puml_output(tmp_path, capsys):
    src = tmp_path / "sample.puml"
    src.write_text(SAMPLE, encoding="utf-8")
    assert main([str(src), "--format", "puml", "--reporting", "0"]) == 0
    out = capsys.readouterr().out
    assert out.startswith('@startuml\ntitle "sample"\nclass A {\n')


def test_strict_and_reference_warnings(tmp_path, caplog):
    src = tmp_path / "sample.puml"
    src.write_text(SAMPLE, encoding="utf-8")
    assert main([str(src), "--strict", "--check-references", "--reporting", "0"]) == 0
    assert "not a rule" in caplog.text
    assert "'B' is referenced but never declared" in caplog.text


def test_missing_input_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.puml"), "--reporting", "0"]) == 1
    assert capsys.readouterr().err.startswith("ERROR: Cannot open")


def test_reporting_zero_keeps_warnings():
    assert _LEVELS[0] == logging.WARNING
    help_text = [a.help for a in build_parser()._actions if a.dest == "reporting"][0]
    assert "0 warnings and errors only" in help_text
