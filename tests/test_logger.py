import logging
import unittest

from selfdesc.utils.logger import LOG_FORMAT, configure_logging, get_logger, parse_level


class LoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(logging.WARNING)

    def test_parse_level_names(self) -> None:
        self.assertEqual(parse_level("DEBUG"), logging.DEBUG)
        self.assertEqual(parse_level(" info "), logging.INFO)
        self.assertEqual(parse_level("error"), logging.ERROR)

    def test_parse_level_unknown_falls_back(self) -> None:
        self.assertEqual(parse_level("chatty"), logging.WARNING)
        self.assertEqual(parse_level("chatty", default=logging.INFO), logging.INFO)

    def test_configure_logging_replaces_handlers(self) -> None:
        configure_logging(logging.DEBUG)
        configure_logging(logging.ERROR)
        root = logging.getLogger()
        self.assertEqual(len(root.handlers), 1)
        self.assertEqual(root.level, logging.ERROR)
        self.assertEqual(root.handlers[0].formatter._fmt, LOG_FORMAT)

    def test_get_logger_namespace(self) -> None:
        self.assertEqual(get_logger().name, "selfdesc")
        self.assertEqual(get_logger("selfdesc.engine.heuristic").name, "selfdesc.engine.heuristic")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
