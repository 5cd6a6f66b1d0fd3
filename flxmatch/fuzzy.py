"""Rank a corpus of words against what the user typed.

Every word is scored on its own with :func:`flxmatch.search.score`,
words that don't match are dropped and the rest are sorted so the
best match comes first.  The things the scoring cares about:

* Characters on a word boundary are the best anchors, so "hw"
  ranks "hello_world" above "show_window".
* Consecutive characters beat scattered ones, so "ab" ranks "abxx"
  above "axbx".
* A short query that matches a whole word gets a large bonus, so
  "pre" ranks "pre" above "prefix".

Words with the same score keep the order they had in the corpus.

"""
from flxmatch.search import score


def fuzzy_matches(user_input, corpus, group_separator=None):
    """Return ``(word, result)`` pairs for every matching word, best first."""
    candidates = []
    for word in corpus:
        result = score(word, user_input, group_separator)
        if result is not None:
            candidates.append((word, result))
    return sorted(candidates, key=lambda x: x[1].score, reverse=True)


def fuzzy_search(user_input, corpus, group_separator=None):
    return [c[0] for c in fuzzy_matches(user_input, corpus, group_separator)]
