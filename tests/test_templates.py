"""
# jsubst: test_templates.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `templates.py`.
"""

import re
import unittest

from jsubst.templates import expand_template, extract_group


class TestTemplates(unittest.TestCase):
    def test_expand_template(self):
        name_match = re.search(r'(\w+)\s(\w+)', 'John Smith')
        self.assertEqual(expand_template('$2, $1', name_match), 'Smith, John')
        self.assertEqual(expand_template('$0', name_match), 'John Smith')
        self.assertEqual(expand_template('[$0] [$1] [$2] [$3]', name_match), '[John Smith] [John] [Smith] []')
        self.assertEqual(expand_template('no references', name_match), 'no references')

        currency_match = re.search('([0-9]+)USD', '265USD')
        self.assertEqual(expand_template('$$$1', currency_match), '$265')
        self.assertEqual(expand_template('$$1', currency_match), '$1')
        self.assertEqual(expand_template('$$$$', currency_match), '$$')

    def test_expand_template_literal_dollars(self):
        match = re.search('(b)', 'abc')
        self.assertEqual(expand_template('$', match), '$')
        self.assertEqual(expand_template('US$ 5', match), 'US$ 5')
        self.assertEqual(expand_template('$x$', match), '$x$')

    def test_expand_template_without_groups(self):
        match = re.search('b', 'abc')
        self.assertEqual(expand_template('$0', match), 'b')
        self.assertEqual(expand_template('$1', match), '')
        self.assertEqual(expand_template('$9', match), '')

    def test_expand_template_multi_digit_references(self):
        single_group_match = re.search('(a)', 'a')
        self.assertEqual(expand_template('$10', single_group_match), 'a0')
        self.assertEqual(expand_template('$01', single_group_match), 'a1')

        twelve_group_match = re.search('(a)(b)(c)(d)(e)(f)(g)(h)(i)(j)(k)(l)', 'abcdefghijkl')
        self.assertEqual(expand_template('$12', twelve_group_match), 'l')
        self.assertEqual(expand_template('$10', twelve_group_match), 'j')
        self.assertEqual(expand_template('$13', twelve_group_match), 'a3')
        self.assertEqual(expand_template('$123', twelve_group_match), 'l3')
        self.assertEqual(expand_template('$2', twelve_group_match), 'b')

    def test_extract_group(self):
        match = re.search('(a)|(b)', 'b')
        self.assertEqual(extract_group(match, 0), 'b')
        self.assertEqual(extract_group(match, 1), '')
        self.assertEqual(extract_group(match, 2), 'b')
        self.assertEqual(extract_group(match, 3), '')


if __name__ == '__main__':
    unittest.main()
