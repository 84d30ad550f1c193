"""
# jsubst: test_functions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `functions.py`.
"""

import unittest

from jsubst.exceptions import (
    ArityException,
    BadLimitTypeException,
    BadPatternTypeException,
    BadReplacementTypeException,
    BadSubjectTypeException,
    EmptyPatternException,
    MissingReplacementException,
)
from jsubst.functions import ReplaceFunction


class TestFunctions(unittest.TestCase):
    def setUp(self):
        self.replace_function = ReplaceFunction()

    def test_replace_function_properties(self):
        self.assertEqual(self.replace_function.name, '$replace')
        self.assertEqual(self.replace_function.signature, '<s-(sf)(sf)n?:s>')
        self.assertEqual(self.replace_function.parsed_signature.maximum_parameter_count, 4)

    def test_replace_function_invoke(self):
        invoke = self.replace_function.invoke
        self.assertEqual(invoke(['John Smith and John Jones', 'John', 'Mr']), 'Mr Smith and Mr Jones')
        self.assertEqual(invoke(['John Smith and John Jones', 'John', 'Mr', 1]), 'Mr Smith and John Jones')
        self.assertEqual(invoke(['abracadabra', 'a.*?a', '*']), '*c*bra')
        self.assertEqual(invoke(['John Smith', r'(\w+)\s(\w+)', '$2, $1']), 'Smith, John')
        self.assertEqual(invoke(['265USD', '([0-9]+)USD', '$$$1']), '$265')
        self.assertEqual(invoke(['aaa', 'a', 'b', 2]), 'bba')

    def test_replace_function_invoke_callback(self):
        self.assertEqual(
            self.replace_function.invoke(['abc', 'b', lambda match_record: match_record.to_dict()['match'] * 2]),
            'abbc',
        )
        self.assertRaises(
            BadReplacementTypeException,
            self.replace_function.invoke, ['abc', 'b', lambda match_record: match_record.to_dict()],
        )

    def test_replace_function_invoke_context(self):
        invoke = self.replace_function.invoke
        self.assertEqual(invoke(['John', 'Mr'], context_value='John Smith'), 'Mr Smith')
        self.assertEqual(invoke(['John Smith', 'John', 'Mr'], context_value='ignored'), 'Mr Smith')
        self.assertRaises(BadSubjectTypeException, invoke, ['John', 'Mr'], context_value=5)
        self.assertRaises(BadSubjectTypeException, invoke, ['John', 'Mr'], context_value=None)
        self.assertRaises(BadPatternTypeException, invoke, [], context_value='abc')
        self.assertRaises(MissingReplacementException, invoke, ['b'], context_value='abc')

    def test_replace_function_invoke_arity(self):
        invoke = self.replace_function.invoke
        self.assertRaises(BadSubjectTypeException, invoke, [])
        self.assertRaises(BadPatternTypeException, invoke, ['abc'])
        self.assertRaises(MissingReplacementException, invoke, ['abc', 'b'])
        self.assertRaises(EmptyPatternException, invoke, ['abc', ''])
        self.assertRaises(BadPatternTypeException, invoke, ['abc', 5])
        self.assertRaises(ArityException, invoke, ['abc', 'b', 'c', 1, 2])

    def test_replace_function_invoke_bad_types(self):
        invoke = self.replace_function.invoke
        self.assertRaises(BadSubjectTypeException, invoke, [5, 'b', 'c'])
        self.assertRaises(BadSubjectTypeException, invoke, [None, 'b', 'c'])
        self.assertRaises(EmptyPatternException, invoke, ['abc', '', 'c'])
        self.assertRaises(BadReplacementTypeException, invoke, ['abc', 'b', 5])
        self.assertRaises(BadLimitTypeException, invoke, ['abc', 'b', 'c', -1])
        self.assertRaises(BadLimitTypeException, invoke, ['abc', 'b', 'c', '2'])

    def test_replace_function_invoke_null_limit(self):
        invoke = self.replace_function.invoke
        self.assertRaises(BadLimitTypeException, invoke, ['aaa', 'a', 'b', None])
        self.assertRaises(BadReplacementTypeException, invoke, ['aaa', 'a', 5, None])
        self.assertEqual(invoke(['aaa', 'a', 'b']), 'bbb')

    def test_replace_function_error_kind(self):
        with self.assertRaises(MissingReplacementException) as context_manager:
            self.replace_function.invoke(['abc', 'b'])
        self.assertEqual(context_manager.exception.kind, 'MissingReplacement')
        self.assertIn('$replace', context_manager.exception.message)


if __name__ == '__main__':
    unittest.main()
