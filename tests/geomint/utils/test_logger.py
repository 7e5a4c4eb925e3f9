########################################################################################
##
##                                  TESTS FOR
##                               'utils/logger.py'
##
########################################################################################

# IMPORTS ==============================================================================

import io
import logging
import unittest

from geomint.utils.logger import get_logger, configure_logging, LOGGER_NAME


# TESTS ================================================================================

class TestLogger(unittest.TestCase):
    """Test the logging helpers"""

    def tearDown(self):
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            if getattr(handler, "_geomint_handler", False):
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


    def test_namespace(self):

        self.assertEqual(get_logger().name, "geomint")
        self.assertEqual(get_logger("geomint").name, "geomint")
        self.assertEqual(get_logger("geomint.optim").name, "geomint.optim")
        self.assertEqual(get_logger("solver").name, "geomint.solver")


    def test_configure(self):

        stream = io.StringIO()
        configure_logging(logging.INFO, stream=stream, fmt="%(name)s:%(message)s")

        get_logger("test").info("hello")

        self.assertIn("geomint.test:hello", stream.getvalue())


    def test_configure_replaces_handler(self):

        configure_logging(stream=io.StringIO())
        configure_logging(stream=io.StringIO())

        tagged = [h for h in get_logger().handlers if getattr(h, "_geomint_handler", False)]
        self.assertEqual(len(tagged), 1)


    def test_level(self):

        stream = io.StringIO()
        configure_logging(logging.WARNING, stream=stream)

        get_logger("test").info("hidden")
        get_logger("test").warning("shown")

        self.assertNotIn("hidden", stream.getvalue())
        self.assertIn("shown", stream.getvalue())


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
