import logging

from connect4_engine.debug import DebugLevel, DebugManager, TRACE, debug
from connect4_engine.game.rules import GameEngine


def messages(caplog):
    return [record.getMessage() for record in caplog.records]


def test_engine_logs_rejections_at_debug(caplog):
    caplog.set_level(TRACE)
    debug.configure(level=DebugLevel.DEBUG)
    GameEngine().drop_piece(-1)
    assert "[engine] Rejected drop into column -1: INVALID_COLUMN" in messages(caplog)


def test_level_filters_messages(caplog):
    caplog.set_level(TRACE)
    debug.configure(level=DebugLevel.INFO)
    debug.debug("hidden", "test")
    debug.info("shown", "test")
    assert messages(caplog) == ["[test] shown"]


def test_trace_includes_debug(caplog):
    caplog.set_level(TRACE)
    debug.configure(level=DebugLevel.TRACE)
    debug.debug("debug line")
    debug.trace("trace line")
    assert [r.levelno for r in caplog.records] == [logging.DEBUG, TRACE]


def test_component_filter(caplog):
    caplog.set_level(TRACE)
    debug.configure(level=DebugLevel.DEBUG, components=["engine"])
    debug.debug("kept", "engine")
    debug.debug("dropped", "board")
    assert messages(caplog) == ["[engine] kept"]


def test_disabled(caplog):
    caplog.set_level(TRACE)
    debug.configure(level=DebugLevel.DEBUG, enabled=False)
    debug.error("nothing")
    assert caplog.records == []


def test_log_file(tmp_path):
    path = tmp_path / "engine.log"
    debug.configure(level=DebugLevel.INFO, log_file=str(path))
    debug.info("to file", "test")
    debug.configure(log_file="")
    assert "[test] to file" in path.read_text()


def test_set_from_string():
    assert debug.set_from_string("trace")
    assert debug.level == DebugLevel.TRACE
    assert not debug.set_from_string("loud")
    assert debug.level == DebugLevel.TRACE


def test_timer():
    manager = DebugManager()
    manager.start_timer("t")
    assert manager.end_timer("t") >= 0
    assert manager.end_timer("t") is None


def test_single_console_handler():
    DebugManager()
    DebugManager()
    console = [h for h in logging.getLogger("connect4_engine").handlers
               if getattr(h, "_connect4_console", False)]
    assert len(console) == 1
