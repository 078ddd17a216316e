# Copyright 2024 The apitest Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

"""
Assertion functions reporting failures through a TestingT.

Every function returns whether the assertion passed. Failures are recorded with
``t.errorf`` and never abort the running test.
"""

import difflib
import inspect
import json
import logging
import os
import pprint
import traceback

from apitest.reporter import TestingT

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

DIFF_TYPES = (dict, list, tuple, set, frozenset, str)


def objects_are_equal(expected, actual) -> bool:
    if expected is None or actual is None:
        return expected is actual

    if isinstance(expected, (bytes, bytearray)) and isinstance(actual, (bytes, bytearray)):
        return bytes(expected) == bytes(actual)

    # bool is an int subclass, True must not equal 1
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(expected) is type(actual) and expected == actual

    if isinstance(expected, dict) and isinstance(actual, dict):
        return expected.keys() == actual.keys() and \
            all(objects_are_equal(v, actual[k]) for k, v in expected.items())

    if isinstance(expected, (list, tuple)) and isinstance(actual, (list, tuple)):
        return type(expected) is type(actual) and len(expected) == len(actual) and \
            all(objects_are_equal(e, a) for e, a in zip(expected, actual))

    return expected == actual


def message_from_msg_and_args(*msg_and_args) -> str:
    if not msg_and_args:
        return ''
    if len(msg_and_args) == 1:
        msg = msg_and_args[0]
        return msg if isinstance(msg, str) else str(msg)
    try:
        return str(msg_and_args[0]) % tuple(msg_and_args[1:])
    except (TypeError, ValueError):
        # not a format string, keep every value
        return ' '.join(str(m) for m in msg_and_args)


def caller_info():
    callers = []
    for frame in traceback.extract_stack():
        filename = os.path.abspath(frame.filename)
        if os.path.commonpath([filename, PACKAGE_DIR]) == PACKAGE_DIR:
            continue
        callers.append(f'{frame.filename}:{frame.lineno}')
    # innermost first
    return list(reversed(callers))[:1]


def indent_message_lines(message: str, longest_label_len: int) -> str:
    indent = '\n\t' + ' ' * (longest_label_len + 1) + '\t'
    return indent.join(message.split('\n'))


def labeled_output(*content) -> str:
    """
    Render (label, text) pairs as an aligned block::

        \tError Trace:\ttest_api.py:12
        \tError:      \tNot equal
    """
    longest_label = max(len(label) for label, _ in content)
    output = ''
    for label, text in content:
        output += '\t' + label + ':' + ' ' * (longest_label - len(label)) + '\t' + \
            indent_message_lines(text, longest_label) + '\n'
    return output


def diff(expected, actual) -> str:
    if expected is None or actual is None:
        return ''
    if type(expected) is not type(actual) or not isinstance(expected, DIFF_TYPES):
        return ''

    if isinstance(expected, str):
        e, a = expected, actual
    else:
        e, a = pprint.pformat(expected), pprint.pformat(actual)

    lines = difflib.unified_diff(
        e.splitlines(), a.splitlines(), fromfile='Expected', tofile='Actual', n=1, lineterm=''
    )
    return '\n\nDiff:\n' + '\n'.join(lines)


def fail(t: TestingT, failure_message: str, *msg_and_args) -> bool:
    content = [
        ('Error Trace', '\n'.join(caller_info())),
        ('Error', failure_message),
    ]
    message = message_from_msg_and_args(*msg_and_args)
    if message:
        content.append(('Messages', message))

    logging.debug(f'assertion failed: {failure_message}')
    t.errorf('\n%s', labeled_output(*content))
    return False


def equal(t: TestingT, expected, actual, *msg_and_args) -> bool:
    if inspect.isfunction(expected) or inspect.isfunction(actual):
        return fail(
            t, f'Invalid operation: {expected!r} == {actual!r} (cannot take func type as argument)', *msg_and_args
        )

    if not objects_are_equal(expected, actual):
        return fail(
            t, f'Not equal: \nexpected: {expected!r}\nactual  : {actual!r}{diff(expected, actual)}', *msg_and_args
        )

    return True


def json_eq(t: TestingT, expected: str, actual: str, *msg_and_args) -> bool:
    try:
        expected_value = json.loads(expected)
    except ValueError as e:
        return fail(t, f"Expected value ('{expected}') is not valid json.\nJSON parsing error: '{e}'", *msg_and_args)

    try:
        actual_value = json.loads(actual)
    except ValueError as e:
        return fail(t, f"Input ('{actual}') needs to be valid json.\nJSON parsing error: '{e}'", *msg_and_args)

    return equal(t, expected_value, actual_value, *msg_and_args)


def no_error(t: TestingT, err, *msg_and_args) -> bool:
    if err is not None:
        return fail(t, f'Received unexpected error:\n{err}', *msg_and_args)

    return True
