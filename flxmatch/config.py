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
"""User settings for the flxmatch command line and completer.

The scoring functions never look at these settings; they only supply
defaults for the callers in this package.

"""
import os
import shutil
import logging

from configobj import ConfigObj

from flxmatch.utils import build_config_file_path


LOG = logging.getLogger(__name__)
SECTION_NAME = 'flxmatch'


class Config(object):
    """Merges the packaged ``flxmatchrc`` template with the user's copy."""

    def load(self, config_template, config_file=None):
        """Return the merged config, creating the user's copy if needed.

        :type config_template: str
        :param config_template: Name of the template shipped in the
            flxmatch package.

        :type config_file: str
        :param config_file: (Optional) Name of the user's file in
            ``~/.flxmatch``.  Defaults to ``config_template``.

        :rtype: :class:`configobj.ConfigObj`
        :return: Template values overridden by the user's values.
            Writing it saves to the user's file.
        """
        if config_file is None:
            config_file = config_template
        user_path = os.path.expanduser(build_config_file_path(config_file))
        template_path = os.path.join(os.path.dirname(__file__),
                                     config_template)
        if not os.path.isfile(user_path):
            self._write_user_copy(template_path, user_path)
        merged = ConfigObj()
        merged.filename = user_path
        for path in (template_path, user_path):
            merged.merge(ConfigObj(path, interpolation=False))
        return merged

    def _write_user_copy(self, template_path, user_path):
        # OSError propagates unless the directory is already there.
        user_dir = os.path.dirname(user_path)
        try:
            os.makedirs(user_dir)
        except OSError:
            if not os.path.isdir(user_dir):
                raise
        LOG.debug("Creating %s from %s", user_path, template_path)
        shutil.copyfile(template_path, user_path)


def settings_from_config(section):
    """Convert the ``[flxmatch]`` config section to plain values.

    :type section: :class:`configobj.Section`
    :param section: The section loaded by :meth:`Config.load`.

    :rtype: dict
    :return: ``group_separator`` (None when empty), ``max_completions``
        (None when 0), ``highlight_matches`` and ``show_scores``.
    """
    return {
        'group_separator': section.get('group_separator') or None,
        'max_completions': section.as_int('max_completions') or None,
        'highlight_matches': section.as_bool('highlight_matches'),
        'show_scores': section.as_bool('show_scores'),
    }
