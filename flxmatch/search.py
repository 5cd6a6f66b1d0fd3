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
"""Best match search.

Given the position index and heatmap of a target, find the strictly
increasing positions that match every query character and score the
highest.  Consecutive matched positions earn an adjacency bonus that
grows with the length of the run.

Each state ``(query index, greater than)`` only keeps its single best
match, and every state is cached for the duration of one search, so
there are at most ``len(query) * len(target)`` states to compute.

"""
import bisect
from collections import namedtuple

from flxmatch.heatmap import heatmap as build_heatmap
from flxmatch.index import build_position_index, positions_after


ADJACENT_BONUS = 60
CONTIGUOUS_BONUS = 15
CONTIGUOUS_CAP = 3
FULL_MATCH_BONUS = 10000
# Query lengths that qualify for the full match bonus.
FULL_MATCH_MIN = 2
FULL_MATCH_MAX = 4


#: ``indices`` are the matched target positions in ascending order,
#: ``score`` is higher for better matches and ``tail`` counts the
#: trailing run of consecutive positions.
Result = namedtuple('Result', ['indices', 'score', 'tail'])


def _candidates(position_index, heatmap, query, query_index, greater_than):
    # Positions after ``greater_than`` that still leave room for the
    # rest of the query.
    positions = positions_after(position_index, query[query_index],
                                greater_than)
    limit = len(heatmap) - (len(query) - query_index)
    return positions[:bisect.bisect_right(positions, limit)]


def _solve(position_index, heatmap, query, query_index, greater_than,
           match_cache):
    # Every state for ``query_index + 1`` this one depends on must
    # already be in ``match_cache``.
    key = (query_index, greater_than)
    if key in match_cache:
        return
    indexes = _candidates(position_index, heatmap, query, query_index,
                          greater_than)
    matches = []
    if query_index >= len(query) - 1:
        for index in indexes:
            matches.append(Result([index], heatmap[index], 0))
    else:
        best_score = float('-inf')
        for index in indexes:
            for sub in match_cache[(query_index + 1, index)]:
                adjacent = sub.indices[0] - 1 == index
                if adjacent:
                    score = (sub.score + heatmap[index] +
                             min(sub.tail, CONTIGUOUS_CAP) * CONTIGUOUS_BONUS +
                             ADJACENT_BONUS)
                    tail = sub.tail + 1
                else:
                    score = sub.score + heatmap[index]
                    tail = 0
                # Only the optimal match is forwarded to the caller.
                if score > best_score:
                    best_score = score
                    matches = [Result([index] + sub.indices, score, tail)]
    match_cache[key] = matches


def best_match(position_index, heatmap, query, query_index=0,
               greater_than=None, match_cache=None):
    """Return the best matches for ``query[query_index:]``.

    Only positions bigger than ``greater_than`` are considered.  For
    the last query character every candidate position is returned, in
    ascending order, otherwise the list holds at most one result.  An
    empty list means there is no match.

    ``position_index`` and ``heatmap`` can be reused for any number of
    queries against the same target, but ``match_cache`` must not be:
    its keys do not know about the target or the query.  The returned
    list is a copy, but the results in it are shared with
    ``match_cache`` and their ``indices`` must not be modified.

    """
    if match_cache is None:
        match_cache = {}
    key = (query_index, greater_than)
    if key not in match_cache:
        # Thresholds reachable for each query index, in ascending order.
        # A lower threshold allows a superset of positions, so the next
        # level only depends on the lowest threshold of this one.
        levels = [[greater_than]]
        for i in range(query_index, len(query) - 1):
            positions = _candidates(position_index, heatmap, query, i,
                                    levels[-1][0])
            if not positions:
                break
            levels.append(positions)
        # Fill the table from the last query character backwards so
        # every state finds the states it builds on in the cache.
        for offset in range(len(levels) - 1, -1, -1):
            for threshold in levels[offset]:
                _solve(position_index, heatmap, query, query_index + offset,
                       threshold, match_cache)
    return list(match_cache[key])


def score(target, query, group_separator=None):
    """Score how well ``query`` matches ``target``.

    :type target: str
    :param target: The candidate, e.g. a file name or a command.

    :type query: str
    :param query: What the user typed.

    :type group_separator: str
    :param group_separator: (Optional) Passed on to the heatmap.

    :rtype: :class:`Result`
    :return: The best match, or None if ``query`` is not a
        subsequence of ``target``.

    """
    if not target or not query:
        return None
    if len(query) > len(target):
        return None
    position_index = build_position_index(target)
    target_heatmap = build_heatmap(target, group_separator)
    matches = best_match(position_index, target_heatmap, query,
                         match_cache={})
    if not matches:
        return None
    result = matches[0]
    if (FULL_MATCH_MIN <= len(query) <= FULL_MATCH_MAX and
            len(result.indices) == len(target)):
        result = result._replace(score=result.score + FULL_MATCH_BONUS)
    return result
