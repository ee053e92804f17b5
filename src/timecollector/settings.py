"""
Settings for timecollector
"""

import os
from configparser import RawConfigParser

from timecollector.core.period import SignedDuration


default_config_home = os.path.normpath('~/.config')

SECTION = 'timecollector'

FORMATS = ('canonical', 'short', 'long', 'decimal')


class Settings(object):
    """Configurable settings for timecollector."""

    seed = SignedDuration.ZERO
    format = 'canonical'

    # http://standards.freedesktop.org/basedir-spec/basedir-spec-latest.html

    def get_config_dir(self):
        envar_home = os.environ.get('TIMECOLLECTOR_HOME')
        if envar_home is not None:
            return os.path.expanduser(envar_home)
        xdg = os.environ.get('XDG_CONFIG_HOME') or default_config_home
        return os.path.join(os.path.expanduser(xdg), 'timecollector')

    def get_config_file(self):
        return os.path.join(self.get_config_dir(), 'timecollectorrc')

    def _config(self):
        config = RawConfigParser()
        config.add_section(SECTION)
        config.set(SECTION, 'seed', str(self.seed))
        config.set(SECTION, 'format', self.format)
        return config

    def load(self, filename=None):
        """Read settings from ``filename`` (default: get_config_file()).

        A missing file leaves the defaults in place.  A bad seed or an
        unknown format raises ValueError.
        """
        if filename is None:
            filename = self.get_config_file()
        config = self._config()
        config.read([filename])
        self.seed = SignedDuration.from_string(config.get(SECTION, 'seed'))
        fmt = config.get(SECTION, 'format')
        if fmt not in FORMATS:
            raise ValueError('bad format in %s: %r' % (filename, fmt))
        self.format = fmt

    def save(self, filename):
        config = self._config()
        with open(filename, 'w') as f:
            config.write(f)
