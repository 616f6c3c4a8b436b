import os
import re
import unittest

import tinymlp


SETUP_PY = os.path.join(os.path.dirname(__file__), os.pardir, 'setup.py')


class TestPackaging(unittest.TestCase):

    def setUp(self):
        with open(SETUP_PY) as f:
            self.setup_source = f.read()

    def test_version_matches_setup(self):
        parts = [re.search(r"VERSION_%s = (\d+)" % name,
                           self.setup_source).group(1)
                 for name in ('MAJOR', 'MINOR', 'MICRO')]
        self.assertEqual(tinymlp.__version__, ".".join(parts))

    def test_author_is_project_maintainer(self):
        author = re.search(r"author='([^']*)'", self.setup_source).group(1)
        self.assertEqual(author, 'tinymlp developers')
        self.assertNotIn('author_email', self.setup_source)


if __name__ == '__main__':
    unittest.main()
