import logging
import unittest

from calcudoku.utils.logger import PACKAGE_LOGGER, configure_logging, get_logger


class LoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        package = logging.getLogger(PACKAGE_LOGGER)
        self._saved = (list(package.handlers), package.level, package.propagate)
        self._root_handlers = list(logging.getLogger().handlers)

    def tearDown(self) -> None:
        package = logging.getLogger(PACKAGE_LOGGER)
        handlers, level, propagate = self._saved
        package.handlers[:] = handlers
        package.setLevel(level)
        package.propagate = propagate
        logging.getLogger().handlers[:] = self._root_handlers

    def test_configure_scopes_to_package_logger(self) -> None:
        root_before = list(logging.getLogger().handlers)
        logger = configure_logging(logging.DEBUG)
        self.assertEqual(logger.name, PACKAGE_LOGGER)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertFalse(logger.propagate)
        self.assertEqual(logging.getLogger().handlers, root_before)

    def test_reconfiguring_does_not_stack_handlers(self) -> None:
        configure_logging(logging.INFO)
        logger = configure_logging(logging.WARNING)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.WARNING)

    def test_names_are_nested_under_package(self) -> None:
        self.assertEqual(get_logger().name, PACKAGE_LOGGER)
        self.assertEqual(get_logger("calcudoku.engine.borders").name, "calcudoku.engine.borders")
        self.assertEqual(get_logger("host").name, "calcudoku.host")

    def test_defaults_installed_only_without_handlers(self) -> None:
        package = logging.getLogger(PACKAGE_LOGGER)
        package.handlers.clear()
        logging.getLogger().handlers.clear()
        get_logger("calcudoku.engine.solution")
        self.assertEqual(len(package.handlers), 1)

        package.handlers.clear()
        logging.getLogger().addHandler(logging.NullHandler())
        get_logger("calcudoku.engine.solution")
        self.assertEqual(package.handlers, [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
