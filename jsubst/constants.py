"""
# jsubst: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

FUNCTION_REPLACE = '$replace'
REPLACE_SIGNATURE = '<s-(sf)(sf)n?:s>'

ERR_MSG_BAD_CONTEXT = 'Context value of function "{}" is not a string'
ERR_MSG_ARG1_BAD_TYPE = 'Argument 1 of function "{}" does not match function signature'
ERR_MSG_ARG2_BAD_TYPE = 'Argument 2 of function "{}" does not match function signature'
ERR_MSG_ARG3_BAD_TYPE = 'Argument 3 of function "{}" does not match function signature'
ERR_MSG_ARG4_BAD_TYPE = 'Argument 4 of function "{}" does not match function signature'
ERR_MSG_ARG2_EMPTY_STR = 'Argument 2 of function "{}" cannot be an empty string'
ERR_MSG_ARG2_INVALID_REGEX = 'Argument 2 of function "{}" is not a valid regular expression: {}'
ERR_MSG_MISSING_REPLACEMENT = 'Function "{}" requires a replacement argument after the pattern'
ERR_MSG_CALLBACK_BAD_RETURN = 'Replacement function of "{}" must return a string, not {}'
ERR_MSG_TOO_MANY_ARGUMENTS = 'Function "{}" takes at most {} arguments but {} were given'
ERR_MSG_BAD_SIGNATURE = 'Malformed function signature `{}`'

ERROR_CODE_BAD_ARGUMENT = 'T0410'
ERROR_CODE_EMPTY_PATTERN = 'D3010'
ERROR_CODE_INVALID_PATTERN = 'S0302'
ERROR_CODE_CALLBACK_BAD_RETURN = 'D3012'
ERROR_CODE_BAD_LIMIT = 'D3011'
