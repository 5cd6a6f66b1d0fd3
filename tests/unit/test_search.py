import pytest

from flxmatch.heatmap import heatmap
from flxmatch.index import build_position_index
from flxmatch.search import Result, best_match, score


@pytest.mark.parametrize('target,query', [
    ('', ''),
    ('', 'a'),
    ('abc', ''),
])
def test_empty_input_has_no_match(target, query):
    assert score(target, query) is None


@pytest.mark.parametrize('target,query', [
    ('abc', 'ad'),
    ('abc', 'cba'),
    ('abc', 'abcd'),
    ('foobar', 'FB'),
])
def test_no_match(target, query):
    assert score(target, query) is None


def test_word_boundaries_are_preferred():
    assert score('hello_world', 'hw') == Result([0, 6], 163, 0)


def test_full_match_bonus():
    assert score('ab', 'ab') == Result([0, 1], 10143, 1)


def test_no_full_match_bonus_for_single_char_query():
    assert score('ab', 'a') == Result([0], 84, 0)


def test_no_full_match_bonus_for_partial_match():
    assert score('abxx', 'ab') == Result([0, 1], 142, 1)


def test_contiguous_match_beats_scattered_match():
    contiguous = score('abxx', 'ab')
    scattered = score('axbx', 'ab')
    assert scattered == Result([0, 2], 81, 0)
    assert contiguous.score > scattered.score


def test_contiguous_bonus_grows_with_the_run():
    assert score('abcd', 'abcd') == Result([0, 1, 2, 3], 10301, 3)


def test_no_full_match_bonus_for_long_query():
    assert score('abcde', 'abcde') == Result([0, 1, 2, 3, 4], 401, 4)


def test_single_character_query_uses_first_occurrence():
    # The last 'a' starts a word and has the better heatmap score, but
    # single character queries keep the first candidate position.
    assert heatmap('ba_a') == [83, -3, -4, 81]
    assert score('ba_a', 'a') == Result([1], -3, 0)


def test_lowercase_query_matches_capitals():
    assert score('FooBar', 'fb') == Result([0, 3], 165, 0)


def test_uppercase_query_only_matches_capitals():
    assert score('FooBar', 'FB') == Result([0, 3], 165, 0)
    assert score('Foobar', 'FB') is None


def test_basepath_is_preferred():
    final_segment = score('foo/bar/baz', 'az', group_separator='/')
    middle_segment = score('foo/bar/baz', 'ar', group_separator='/')
    assert final_segment == Result([9, 10], 46, 1)
    assert middle_segment == Result([5, 6], -35, 1)


def test_unicode_positions_are_code_points():
    result = score(u'caf\xe9_cr\xe8me', u'\xe9c')
    assert result.indices == [3, 5]


def test_score_is_idempotent():
    first = score('src/flxmatch/search.py', 'srch', '/')
    second = score('src/flxmatch/search.py', 'srch', '/')
    assert first == second


@pytest.mark.parametrize('target,query', [
    ('hello_world', 'hw'),
    ('hello_world', 'lowo'),
    ('FooBarBaz', 'fbb'),
    ('FooBarBaz', 'FoB'),
    ('describe-reserved-instances', 'drin'),
    ('src/flxmatch/search.py', 'srch'),
    ('aaaaaaaa', 'aaa'),
])
def test_matched_positions(target, query):
    result = score(target, query)
    assert len(result.indices) == len(query)
    assert result.indices == sorted(set(result.indices))
    for position, char in zip(result.indices, query):
        matched = target[position]
        assert matched == char or matched.lower() == char


def test_best_match_can_reuse_index_and_heatmap():
    index = build_position_index('hello_world')
    scores = heatmap('hello_world')
    assert best_match(index, scores, 'hw') == [Result([0, 6], 163, 0)]
    assert best_match(index, scores, 'ld') == [Result([9, 10], 44, 1)]


def test_best_match_returns_every_position_for_last_char():
    index = build_position_index('hello_world')
    scores = heatmap('hello_world')
    assert best_match(index, scores, 'o') == [
        Result([4], -6, 0),
        Result([7], -6, 0),
    ]


def test_best_match_with_threshold():
    index = build_position_index('hello_world')
    scores = heatmap('hello_world')
    assert best_match(index, scores, 'l', greater_than=4) == [
        Result([9], -8, 0),
    ]
    assert best_match(index, scores, 'wo', greater_than=0) == [
        Result([6, 7], 134, 1),
    ]
    assert best_match(index, scores, 'lo', greater_than=4) == []
    assert best_match(index, scores, 'o', greater_than=7) == []


def test_best_match_caches_states():
    index = build_position_index('hello_world')
    scores = heatmap('hello_world')
    cache = {}
    matches = best_match(index, scores, 'hw', match_cache=cache)
    assert cache[(0, None)] == matches
    assert cache[(1, 0)] == [Result([6], 80, 0)]


def test_best_match_uses_cached_states():
    index = build_position_index('hello_world')
    scores = heatmap('hello_world')
    cached = [Result([1, 2], 1, 1)]
    cache = {(0, None): cached}
    matches = best_match(index, scores, 'hw', match_cache=cache)
    assert matches == cached
    assert matches is not cached


def test_returned_list_does_not_alias_cache():
    index = build_position_index('hello_world')
    scores = heatmap('hello_world')
    cache = {}
    matches = best_match(index, scores, 'o', match_cache=cache)
    matches.clear()
    assert best_match(index, scores, 'o', match_cache=cache) == [
        Result([4], -6, 0),
        Result([7], -6, 0),
    ]


def test_long_query_full_match():
    result = score('a' * 1200, 'a' * 1200)
    assert result.indices == list(range(1200))
    assert result.tail == 1199


def test_long_query_with_gaps():
    target = 'ab' * 610
    query = 'ab' * 600
    result = score(target, query)
    assert len(result.indices) == len(query)
    assert result.indices == sorted(set(result.indices))
    assert ''.join(target[i] for i in result.indices) == query


def test_long_query_without_match():
    assert score('a' * 1200, 'a' * 1199 + 'b') is None
    assert score('a' * 1200, 'a' * 1201) is None
