import io
from pathlib import Path

from apngspec.output.logger import SimpleLogger


def test_levels_and_streams():
    out, err = io.StringIO(), io.StringIO()
    logger = SimpleLogger(stream=out, error_stream=err)

    logger.info("hello")
    logger.warning("careful")
    logger.error("broken")
    logger.debug("hidden")

    assert "[INFO] hello" in out.getvalue()
    assert "[WARNING] careful" in out.getvalue()
    assert "broken" not in out.getvalue()
    assert "[ERROR] broken" in err.getvalue()
    assert "hidden" not in out.getvalue()
    assert logger.warnings == 1


def test_verbose_emits_debug():
    out = io.StringIO()
    SimpleLogger(verbose=True, stream=out).debug("details")
    assert "[DEBUG] details" in out.getvalue()


def test_log_file_gets_session_header_and_lines(tmp_path: Path):
    log_file = tmp_path / "logs" / "apngspec.log"
    logger = SimpleLogger(log_file, stream=io.StringIO())

    logger.success("done")

    content = log_file.read_text()
    assert "Session started:" in content
    assert "[SUCCESS] done" in content


def test_table_layout():
    out = io.StringIO()
    logger = SimpleLogger(stream=out)

    logger.table(["#", "File"], [["1", "long_name.png"]])

    lines = [line.split("] ", 1)[1] for line in out.getvalue().splitlines()]
    separator = "+" + "-" * 3 + "+" + "-" * 15 + "+"
    assert lines[0] == separator
    assert lines[1] == "| # | " + "File".ljust(13) + " |"
    assert lines[2] == separator
    assert lines[3] == "| 1 | long_name.png |"
