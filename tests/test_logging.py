import json
import sys
import logging

from torrentmeta.common.logging import JSONLogFormatter, config_logging


def test_json_formatter_maps_keys_and_extras():
    formatter = JSONLogFormatter(fmt_keys={"level": "levelname", "logger": "name", "message": "message"})
    record = logging.makeLogRecord(
        {"name": "torrentmeta.test", "levelname": "INFO", "levelno": logging.INFO,
         "msg": "decoded %s", "args": ("a.txt",), "info_name": "a.txt"}
    )
    entry = json.loads(formatter.format(record))
    assert entry["level"] == "INFO"
    assert entry["logger"] == "torrentmeta.test"
    assert entry["message"] == "decoded a.txt"
    assert entry["info_name"] == "a.txt"
    assert "timestamp" in entry


def test_json_formatter_includes_exception():
    formatter = JSONLogFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.getLogger("t").makeRecord(
            "t", logging.ERROR, __file__, 1, "failed", None, exc_info=sys.exc_info()
        )
    entry = json.loads(formatter.format(record))
    assert "ValueError: boom" in entry["exc_info"]


def test_config_logging_writes_json_lines(tmp_path, restore_logging):
    log_path = config_logging("test.jsonl", tmp_path)
    logging.getLogger("torrentmeta.test").info("hello")
    logging.getHandlerByName("queue_handler").listener.stop()

    lines = log_path.read_text().splitlines()
    entries = [json.loads(line) for line in lines]
    assert any(e["message"] == "hello" and e["level"] == "INFO" for e in entries)
