import contextlib
import logging

import pytest
from lxml import etree

from UdtConverter import main as cli

SAMPLE = """TYPE "Valve"
TITLE = Valve status
VERSION : 0.1
   STRUCT
      open : Bool;   // open feedback
      closed : Bool;
      position : Real;
   END_STRUCT;

END_TYPE
"""


@pytest.fixture(autouse=True)
def _quiet_root_logger():
    # main() only configures logging when the root logger has no handlers
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    yield
    root.removeHandler(handler)


@contextlib.contextmanager
def _unconfigured_root_logger():
    """Let main() run its own logging.basicConfig, then put the root logger back."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    for h in saved_handlers:
        root.removeHandler(h)
    try:
        yield root
    finally:
        for h in root.handlers[:]:
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)


def test_convert_writes_l5x(tmp_path):
    src = tmp_path / "Valve.udt"
    src.write_text(SAMPLE, encoding="utf-8")
    out = tmp_path / "out" / "Valve.L5X"
    out.parent.mkdir()

    assert cli.main(["-i", str(src), "-o", str(out), "--controller-name", "Line1"]) == 0

    data = out.read_bytes()
    assert data.startswith(b'<?xml version="1.0" ?>')
    root = etree.fromstring(data)
    assert root.get("TargetName") == "Valve"
    assert root.find("Controller").get("Name") == "Line1"
    names = [m.get("Name") for m in root.iter("Member")]
    assert names == ["ZZZZZZZZZZValve0", "open", "closed", "position"]


def test_default_output_path(tmp_path):
    src = tmp_path / "Valve.udt"
    src.write_text(SAMPLE, encoding="utf-8")
    assert cli.main(["--input", str(src)]) == 0
    assert (tmp_path / "Valve.L5X").exists()


def test_parse_error_exits_nonzero_without_output(tmp_path, capsys):
    src = tmp_path / "Broken.udt"
    src.write_text('TYPE "Broken"\n   STRUCT\n      x : Int;\n   END_STRUCT;\nEND_TYPE\n', encoding="utf-8")
    out = tmp_path / "Broken.L5X"

    assert cli.main(["-i", str(src), "-o", str(out)]) == 1
    assert not out.exists()
    assert "VERSION" in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    assert cli.main(["-i", str(tmp_path / "nope.udt")]) == 1
    assert "error:" in capsys.readouterr().err


def test_input_is_required(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 2


def test_log_file_verbose_and_software_revision(tmp_path, capsys):
    src = tmp_path / "Valve.udt"
    src.write_text(SAMPLE, encoding="utf-8")
    out = tmp_path / "Valve.L5X"
    log = tmp_path / "convert.log"

    with _unconfigured_root_logger():
        rc = cli.main([
            "-i", str(src), "-o", str(out),
            "--log-file", str(log), "-v", "--software-revision", "33.0",
        ])

    assert rc == 0
    text = log.read_text(encoding="utf-8")
    assert "Parsed UDT Valve" in text
    assert "Converted" in text
    assert etree.fromstring(out.read_bytes()).get("SoftwareRevision") == "33.0"
    assert capsys.readouterr().err == ""


def test_debug_records_need_verbose(tmp_path):
    src = tmp_path / "Valve.udt"
    src.write_text(SAMPLE, encoding="utf-8")
    log = tmp_path / "convert.log"

    with _unconfigured_root_logger():
        assert cli.main(["-i", str(src), "--log-file", str(log)]) == 0

    text = log.read_text(encoding="utf-8")
    assert "Parsed UDT" not in text
    assert "Converted" in text


def test_error_printed_once_without_log_file(tmp_path, capsys):
    src = tmp_path / "Broken.udt"
    src.write_text('TYPE "Broken"\n   STRUCT\n      x : Int;\n   END_STRUCT;\nEND_TYPE\n', encoding="utf-8")

    with _unconfigured_root_logger():
        assert cli.main(["-i", str(src)]) == 1

    err = capsys.readouterr().err
    assert err.count("VERSION") == 1
    assert err.startswith("error: ")


def test_error_also_logged_with_log_file(tmp_path, capsys):
    src = tmp_path / "Broken.udt"
    src.write_text('TYPE "Broken"\n   STRUCT\n      x : Int;\n   END_STRUCT;\nEND_TYPE\n', encoding="utf-8")
    log = tmp_path / "convert.log"

    with _unconfigured_root_logger():
        assert cli.main(["-i", str(src), "--log-file", str(log)]) == 1

    assert "VERSION" in log.read_text(encoding="utf-8")
    assert capsys.readouterr().err.count("VERSION") == 1
