from datetime import datetime

from cmadness.webserver.logger import AccessLogger


def _fixed():
    return datetime(2024, 1, 2, 3, 4, 5)


def test_log_line_format(tmp_path):
    path = tmp_path / "access.log"
    with AccessLogger(str(path), clock=_fixed) as logger:
        logger.log("10.0.0.1", "/index.html", 200)
    assert path.read_text() == '[2024-01-02 03:04:05] 10.0.0.1 "/index.html" 200\n'


def test_appends(tmp_path):
    path = tmp_path / "access.log"
    path.write_text("old\n")
    with AccessLogger(str(path), clock=_fixed) as logger:
        logger.log("a", "/x", 404)
        logger.log("b", "/y", 200)
    lines = path.read_text().splitlines()
    assert lines[0] == "old"
    assert len(lines) == 3
    assert lines[2].endswith('b "/y" 200')


def test_log_after_close_is_dropped(tmp_path):
    path = tmp_path / "access.log"
    logger = AccessLogger(str(path), clock=_fixed)
    logger.close()
    logger.log("a", "/x", 200)
    assert path.read_text() == ""


def test_unopenable_file_disables_logging(tmp_path):
    logger = AccessLogger(str(tmp_path / "missing" / "access.log"))
    logger.log("a", "/x", 200)
    logger.close()
    assert not (tmp_path / "missing").exists()