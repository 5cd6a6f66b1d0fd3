# Copyright 2015 Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"). You
# may not use this file except in compliance with the License. A copy of
# the License is located at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF
# ANY KIND, either express or implied. See the License for the specific
# language governing permissions and limitations under the License.
"""Character classes used by the matcher.

A character of ``None`` stands for "no character", e.g. the position
before the start of a string.

"""

WORD_SEPARATORS = frozenset([' ', '-', '_', ':', '.', '/', '\\'])


def is_separator(char):
    return char in WORD_SEPARATORS


def is_word(char):
    """Return True if ``char`` is present and not a word separator."""
    return char is not None and char not in WORD_SEPARATORS


def is_capital(char):
    """Return True if ``char`` is an uppercase word character.

    Only the first character of the case mapping is considered, so
    ``'ß'`` (which uppercases to ``'SS'``) is not capital.  Characters
    without a case distinction, such as digits, are never capital.

    """
    if not is_word(char):
        return False
    return char == char.upper()[:1] and char != char.lower()[:1]


def is_boundary(last_char, char):
    """Return True if ``char`` starts a new word after ``last_char``.

    This is camel case aware: ``('o', 'B')`` is a boundary, as is any
    separator followed by a word character.  The start of the string
    (``last_char`` of None) is always a boundary.

    """
    if last_char is None:
        return True
    if not is_capital(last_char) and is_capital(char):
        return True
    if not is_word(last_char) and is_word(char):
        return True
    return False
