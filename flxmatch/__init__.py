import sys
import logging
import argparse

from flxmatch.fuzzy import fuzzy_matches, fuzzy_search
from flxmatch import utils
from flxmatch.config import Config, SECTION_NAME, settings_from_config
from flxmatch.heatmap import heatmap
from flxmatch.search import Result, best_match, score


__version__ = '0.1.0'

LOG = logging.getLogger(__name__)


def load_settings():
    config_obj = Config().load('flxmatchrc')
    return settings_from_config(config_obj[SECTION_NAME])


def create_parser(settings):
    parser = argparse.ArgumentParser(
        prog='flx-rank',
        description='Rank candidate lines by how well they fuzzy match '
                    'a query.')
    parser.add_argument('query', nargs='?', default='',
                        help='The text to match against each candidate.')
    parser.add_argument('-f', '--file',
                        help='Read candidates from this file instead of '
                             'stdin, one per line.')
    parser.add_argument('-s', '--group-separator',
                        default=settings['group_separator'],
                        help='Character that splits candidates into '
                             'groups, e.g. "/" for paths.')
    parser.add_argument('-n', '--limit', type=int,
                        default=settings['max_completions'],
                        help='Print at most this many candidates.')
    parser.add_argument('--scores', action='store_true',
                        default=settings['show_scores'],
                        help='Print the score before each candidate.')
    parser.add_argument('-i', '--interactive', action='store_true',
                        help='Pick a candidate with an interactive '
                             'fuzzy completion prompt.')
    parser.add_argument('--debug', action='store_true',
                        help='Turn on debug logging.')
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + __version__)
    return parser


def run_interactive(candidates, settings, group_separator, limit):
    from prompt_toolkit import prompt
    from flxmatch.shellcomplete import FuzzyCompleter
    completer = FuzzyCompleter(candidates, group_separator=group_separator,
                               max_completions=limit,
                               highlight=settings['highlight_matches'])
    return prompt('> ', completer=completer, complete_while_typing=True)


def main(args=None, stdin=None, stdout=None, stderr=None):
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr
    settings = load_settings()
    parsed = create_parser(settings).parse_args(args)
    if parsed.debug:
        logging.basicConfig(level=logging.DEBUG)
    group_separator = parsed.group_separator or None

    if parsed.file is not None:
        try:
            candidates = utils.read_candidates_file(parsed.file)
        except utils.FileReadError as e:
            stderr.write("Unable to read candidates: %s\n" % e)
            return 2
    else:
        candidates = utils.read_candidates(stdin)

    if parsed.interactive:
        try:
            selected = run_interactive(candidates, settings,
                                       group_separator, parsed.limit)
        except (KeyboardInterrupt, EOFError):
            LOG.debug("Interactive prompt aborted")
            return 1
        stdout.write(selected + '\n')
        return 0

    matches = fuzzy_matches(parsed.query, candidates, group_separator)
    LOG.debug("%s of %s candidates matched %r",
              len(matches), len(candidates), parsed.query)
    if parsed.limit:
        matches = matches[:parsed.limit]
    for word, result in matches:
        if parsed.scores:
            stdout.write('%s\t%s\n' % (result.score, word))
        else:
            stdout.write(word + '\n')
    if not matches:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
