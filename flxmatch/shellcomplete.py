"""Autocompletion integration with python prompt toolkit.

This module plugs the ranking in flxmatch.fuzzy into the interface
prompt toolkit expects from a completer, and uses the matched
positions of each result to highlight the completion menu.

If you're interested in the heavy lifting of the matching logic,
see flxmatch.search.

"""
import logging

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.formatted_text import FormattedText

from flxmatch import fuzzy


LOG = logging.getLogger(__name__)

MATCH_STYLE = 'class:fuzzymatch.inside.character'
OUTSIDE_STYLE = 'class:fuzzymatch.outside'


def highlight(word, indices):
    """Return formatted text for ``word`` with ``indices`` highlighted."""
    matched = set(indices)
    fragments = []
    for i, char in enumerate(word):
        if i in matched:
            fragments.append((MATCH_STYLE, char))
        else:
            fragments.append((OUTSIDE_STYLE, char))
    return FormattedText(fragments)


class FuzzyCompleter(Completer):
    """Complete the word before the cursor from a fixed set of words.

    :type words: list of str
    :param words: The words to complete from.

    :type group_separator: str
    :param group_separator: (Optional) Splits words into groups when
        scoring, e.g. ``'/'`` for file paths.

    :type max_completions: int
    :param max_completions: (Optional) Only yield this many of the
        best completions.

    :type highlight: bool
    :param highlight: Display completions with the matched characters
        highlighted and their score as meta text.
    """
    def __init__(self, words, group_separator=None, max_completions=None,
                 highlight=True):
        self._words = list(words)
        self.group_separator = group_separator
        self.max_completions = max_completions
        self.highlight = highlight

    @property
    def words(self):
        return self._words

    @words.setter
    def words(self, value):
        self._words = list(value)

    def get_completions(self, document, complete_event):
        word_before_cursor = document.get_word_before_cursor(WORD=True)
        if not word_before_cursor:
            for word in self._words:
                yield Completion(word, 0, display=word)
            return
        matches = fuzzy.fuzzy_matches(word_before_cursor, self._words,
                                      self.group_separator)
        LOG.debug("%s matches for %r out of %s words",
                  len(matches), word_before_cursor, len(self._words))
        if self.max_completions:
            matches = matches[:self.max_completions]
        location = -len(word_before_cursor)
        for word, result in matches:
            if self.highlight:
                display = highlight(word, result.indices)
                display_meta = str(result.score)
            else:
                display = word
                display_meta = ''
            yield Completion(word, location, display=display,
                             display_meta=display_meta)
