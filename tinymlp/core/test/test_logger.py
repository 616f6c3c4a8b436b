import logging
import os
import shutil
import tempfile
import unittest

from tinymlp.core.logger import PACKAGE_LOGGER_NAME, progress, setup_logging


class TestLogger(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        shutil.rmtree(self.tmp_dir)

    def test_progress(self):
        self.assertEqual(progress("Epoch", 1, 3), "(1 / 3) Epoch")
        self.assertEqual(progress("Epoch", 7, 100), "(007 / 100) Epoch")

    def test_setup_logging_writes_file(self):
        filename = os.path.join(self.tmp_dir, 'log.txt')
        setup_logging(filename=filename, stdout=False)

        logging.getLogger('tinymlp.core.network').info("hello there")

        with open(filename) as f:
            contents = f.read()

        self.assertIn("INFO", contents)
        self.assertIn("hello there", contents)

    def test_setup_logging_replaces_handlers(self):
        setup_logging(stdout=True)
        logger = setup_logging(stdout=True)

        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.INFO)


if __name__ == '__main__':
    unittest.main()
