import logging
from datagatekit.logging_setup import setup_logging


def test_setup_logging_adds_file_handler(tmp_path):
    log_file = tmp_path / "datagate.log"
    root = setup_logging("debug", str(log_file))
    try:
        assert root.level == logging.DEBUG
        logging.getLogger("datagatekit.test").info("hello from the gate")
        for handler in root.handlers:
            handler.flush()
        assert "INFO - hello from the gate" in log_file.read_text()
    finally:
        for handler in list(root.handlers):
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == str(log_file):
                root.removeHandler(handler)
                handler.close()
        root.setLevel(logging.WARNING)
