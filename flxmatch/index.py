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
"""Per character position lookup for a target string.

The index maps a character to the ascending list of positions where
it can be matched.  Every character is filed under its lowercase form.
Capital characters are additionally filed under themselves, so a
lowercase query character matches either case while an uppercase
query character only matches an uppercase target character.

"""
import bisect
from collections import deque

from flxmatch.classify import is_capital


def build_position_index(target):
    """Return a dict of character -> ascending list of positions."""
    index = {}
    # Walk right to left and push onto the front so every list comes
    # out in ascending order.
    for position in range(len(target) - 1, -1, -1):
        char = target[position]
        if is_capital(char):
            index.setdefault(char, deque()).appendleft(position)
            down_char = char.lower()[:1]
        else:
            down_char = char
        index.setdefault(down_char, deque()).appendleft(position)
    return dict((key, list(positions)) for key, positions in index.items())


def positions_after(position_index, char, greater_than=None):
    """Return the positions of ``char`` that are bigger than ``greater_than``.

    If ``greater_than`` is None, every position of ``char`` is returned.

    """
    positions = position_index.get(char)
    if not positions:
        return []
    if greater_than is None:
        return positions
    return positions[bisect.bisect_right(positions, greater_than):]
