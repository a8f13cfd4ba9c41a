import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Bool, HasTraits, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import warning


CONFIG_FILENAME = 'myersdiff_config.json'


class MyersDiff(HasTraits):
    """Settings of the myersdiff command.

    Values are read from the "MyersDiff" section of myersdiff_config.json
    files, and serve as defaults for the command line options.
    """

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)

    use_color = Bool(
        True,
        help="Use ANSI color code escapes for text output.",
    ).tag(config=True)

    show_trace = Bool(
        False,
        help="Print the edit graph search trace before the diff.",
    ).tag(config=True)


def config_search_path():
    """Directories searched for config files, highest priority first.

    The current directory comes first, then the Jupyter config path.
    """
    return [os.getcwd()] + jupyter_config_path()


def load_config_section(section, path=None):
    """Merge the `section` of every config file found on `path`.

    Files earlier in `path` take precedence.
    """
    if path is None:
        path = config_search_path()
    merged = {}
    for directory in reversed(path):
        loader = JSONFileConfigLoader(CONFIG_FILENAME, path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        if section in config:
            merged.update(config[section])
    return merged


def build_config(cls=MyersDiff, path=None):
    """Return the effective settings of `cls` as a dict.

    Values from config files are validated by the traits of `cls`, an
    invalid one raises a TraitError. Unknown keys are ignored with a warning.
    """
    names = cls.class_trait_names(config=True)
    settings = {}
    for key, value in load_config_section(cls.__name__, path).items():
        if key in names:
            settings[key] = value
        else:
            warning("Ignoring unknown config key %s.%s", cls.__name__, key)
    try:
        instance = cls(**settings)
    except TraitError as e:
        raise TraitError("Invalid value in %s: %s" % (CONFIG_FILENAME, e))
    return {name: getattr(instance, name) for name in sorted(names)}
