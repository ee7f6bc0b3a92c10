import logging

from apiservice._utils import setup_logging


class TestSetupLogging:
    def test_levels(self):
        logger = setup_logging(debug=True)

        assert logger.name == "apiservice"
        assert logger.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING

        setup_logging(debug=False)
        assert logger.level == logging.INFO

    def test_single_handler(self):
        logger = setup_logging()
        setup_logging()

        names = [h.get_name() for h in logger.handlers]
        assert names.count("apiservice-stderr") == 1
