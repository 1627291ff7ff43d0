"""logging_setup 模块测试"""

import io

from loguru import logger

from minigrep.logging_setup import setup_logger


def test_level_filters_console():
    sink = io.StringIO()
    setup_logger(level="warning", sink=sink)
    logger.info("hidden")
    logger.warning("shown")
    logger.remove()
    output = sink.getvalue()
    assert "shown" in output
    assert "hidden" not in output


def test_file_sink_records_debug(tmp_path):
    sink = io.StringIO()
    log_file = tmp_path / "logs" / "run.log"
    setup_logger(level="ERROR", log_file=str(log_file), sink=sink)
    logger.debug("detail")
    logger.remove()
    assert "detail" in log_file.read_text(encoding="utf-8")
    assert "detail" not in sink.getvalue()
