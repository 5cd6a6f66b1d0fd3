"""Utility module for misc flxmatch functions."""
import os
import logging


LOG = logging.getLogger(__name__)


class FileReadError(Exception):
    pass


def build_config_file_path(file_name):
    return os.path.join(os.path.expanduser('~'), '.flxmatch', file_name)


def read_candidates(stream):
    """Return the non blank lines of ``stream`` without line endings."""
    candidates = []
    for line in stream:
        line = line.rstrip('\r\n')
        if line.strip():
            candidates.append(line)
    return candidates


def read_candidates_file(filename):
    """Read candidates from ``filename``, one per line.

    :raises: :class:`FileReadError` if the file can't be read.
    """
    try:
        with open(filename, 'r') as f:
            candidates = read_candidates(f)
    except (OSError, IOError) as e:
        raise FileReadError(str(e))
    LOG.debug("Read %s candidates from %s", len(candidates), filename)
    return candidates
