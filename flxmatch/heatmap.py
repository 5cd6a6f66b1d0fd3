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
"""Heatmap generation.

The heatmap assigns every position of a target string a score that
says how good a place it is to match the next query character.  It
only depends on the target, so it can be computed once and reused for
any number of queries.

The target is split into groups on an optional group separator (think
path segments), and each group into words using
:func:`flxmatch.classify.is_boundary`.  Scores start out negative and
positions earn points back for:

* being the first character of a word (the biggest bonus),
* being in the basepath group, which is the last group that has any
  words in it (for a path, the file name),
* being early in their word and their word being early in its group.

Positions pay for being after a ``.`` (file extensions) and for every
group separator in the target.

"""
from flxmatch.classify import is_boundary, is_word


DEFAULT_SCORE = -35
LAST_CHAR_BONUS = 1
EXTENSION_PENALTY = -45
EXTENSION_LEAD = '.'
GROUP_COUNT_PENALTY = -2
BASEPATH_SCORE = 35
FIRST_GROUP_SCORE = -3
GROUP_SCORE = -5
WORD_START_BONUS = 85
WORD_ORDER_PENALTY = -3


class _Group(object):
    def __init__(self, start):
        # Position of the group separator that opened the group, -1 for
        # the first group.
        self.start = start
        self.word_count = 0
        # Word boundaries, most recently found first.
        self.words = []


def _increment(scores, amount, begin, end):
    for i in range(begin, end):
        scores[i] += amount


def _find_groups(target, group_separator, scores):
    # Returns the groups, last found first.  Applies the extension
    # penalty to ``scores`` along the way.
    groups = [_Group(-1)]
    last_char = None
    word_count = 0
    last_index = len(target) - 1
    for i, char in enumerate(target):
        # Until the first word of a group is found, separators count as
        # words of their own, so "foo/__ab" scores worse than "foo/ab".
        if word_count == 0:
            effective_last_char = None
        else:
            effective_last_char = last_char
        if is_boundary(effective_last_char, char):
            groups[0].words.insert(0, i)
        if not is_word(last_char) and is_word(char):
            word_count += 1
        if last_char == EXTENSION_LEAD:
            scores[i] += EXTENSION_PENALTY
        if group_separator is not None and char == group_separator:
            groups[0].word_count = word_count
            word_count = 0
            groups.insert(0, _Group(i))
        if i == last_index:
            groups[0].word_count = word_count
        else:
            last_char = char
    return groups


def heatmap(target, group_separator=None):
    """Return a list with one integer score per position of ``target``.

    :type target: str
    :param target: The string to score.

    :type group_separator: str
    :param group_separator: (Optional) A character that splits
        ``target`` into groups, e.g. ``'/'`` for file paths.

    :rtype: list of int
    :return: The heatmap, ``len(target)`` entries long.

    """
    length = len(target)
    if not length:
        return []
    scores = [DEFAULT_SCORE] * length
    scores[-1] += LAST_CHAR_BONUS
    groups = _find_groups(target, group_separator, scores)
    group_count = len(groups)
    separator_count = group_count - 1
    if separator_count:
        _increment(scores, GROUP_COUNT_PENALTY * group_count, 0, length)

    index_from_end = separator_count
    last_group_limit = None
    basepath_found = False
    for group in groups:
        basepath = False
        if group.words and not basepath_found:
            basepath_found = True
            basepath = True
        if basepath:
            boosts = max(0, separator_count - 1)
            group_score = BASEPATH_SCORE + boosts - group.word_count
        elif index_from_end == 0:
            group_score = FIRST_GROUP_SCORE
        else:
            group_score = GROUP_SCORE + (index_from_end - 1)
        if last_group_limit is None:
            group_end = length
        else:
            group_end = last_group_limit
        _increment(scores, group_score, group.start + 1, group_end)

        word_index = len(group.words) - 1
        last_word = group_end
        for word in group.words:
            scores[word] += WORD_START_BONUS
            for char_offset, i in enumerate(range(word, last_word)):
                scores[i] += WORD_ORDER_PENALTY * word_index - char_offset
            last_word = word
            word_index -= 1

        last_group_limit = group.start + 1
        index_from_end -= 1
    return scores
