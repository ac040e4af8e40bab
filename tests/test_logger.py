import json

import pytest

from gosight_shared.utils import logger


@pytest.fixture
def files(tmp_path):
    paths = {name: tmp_path / f"{name}.log" for name in ("app", "error", "access", "debug")}
    yield paths
    logger.init_logger("", "", "", "", "info")


def _init(paths, level="info"):
    logger.init_logger(
        str(paths["app"]), str(paths["error"]), str(paths["access"]), str(paths["debug"]), level
    )


def _records(path):
    if not path.exists():
        return []
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_info_goes_to_app_log(files, capsys):
    _init(files, "debug")
    logger.info("server up on %s", "0.0.0.0:4317")
    assert "server up on 0.0.0.0:4317" in capsys.readouterr().out
    records = _records(files["app"])
    assert len(records) == 1
    assert records[0]["level"] == "info"
    assert records[0]["message"] == "server up on 0.0.0.0:4317"
    assert "time" in records[0]
    assert _records(files["error"]) == []


def test_go_style_verb_is_formatted(files, capsys):
    _init(files, "debug")
    logger.error("Could not create default config: %v", "disk full")
    assert "Could not create default config: disk full" in capsys.readouterr().out
    records = _records(files["error"])
    assert records[0]["message"] == "Could not create default config: disk full"
    assert records[0]["level"] == "error"


def test_warn_goes_to_error_log(files, capsys):
    _init(files, "debug")
    logger.warn("careful")
    assert "careful" in capsys.readouterr().out
    records = _records(files["error"])
    assert [r["level"] for r in records] == ["warn"]
    assert _records(files["app"]) == []


def test_debug_suppressed_at_info_level(files, capsys):
    _init(files)
    logger.debug("hidden")
    assert capsys.readouterr().out == ""
    assert _records(files["debug"]) == []


def test_debug_mode_writes_debug_and_console(files, capsys):
    _init(files, "DEBUG")
    logger.debug("visible %d", 3)
    records = _records(files["debug"])
    assert records[0]["level"] == "debug"
    assert records[0]["message"] == "visible 3"
    assert "visible 3" in capsys.readouterr().out


def test_console_silent_outside_debug(files, capsys):
    _init(files)
    logger.info("quiet")
    assert capsys.readouterr().out == ""


def test_access_level(files, capsys):
    _init(files, "debug")
    logger.access("GET /api")
    assert "GET /api" in capsys.readouterr().out
    records = _records(files["access"])
    assert records[0]["level"] == "access"
    assert records[0]["message"] == "GET /api"


def test_fatal_logs_and_exits(files):
    _init(files)
    with pytest.raises(SystemExit) as excinfo:
        logger.fatal("boom")
    assert excinfo.value.code == 1
    assert _records(files["error"])[0]["message"] == "boom"


def test_must_without_error_does_nothing(files, capsys):
    _init(files, "debug")
    logger.must("db", None)
    assert capsys.readouterr().out == ""
    assert _records(files["error"]) == []


def test_must_with_error_exits(files):
    _init(files)
    with pytest.raises(SystemExit) as excinfo:
        logger.must("db", RuntimeError("refused"))
    assert excinfo.value.code == 1
    record = _records(files["error"])[0]
    assert record["level"] == "fatal"
    assert record["message"] == "db init failed"
    assert record["error"] == "refused"


def test_unopenable_file_raises(tmp_path, files):
    with pytest.raises(OSError):
        logger.init_logger(str(tmp_path / "missing" / "app.log"), "", "", "", "info")


def test_empty_paths_discard(files, capsys):
    logger.init_logger("", "", "", "", "debug")
    logger.info("nowhere")
    assert "nowhere" in capsys.readouterr().out
    assert not files["app"].exists()