import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


CONFIG_BASENAME = 'vledits_config'


class VleditsConfigurable(HasTraits):
    """Base for the option groups that can be set from a config file.

    Values are looked up in the config file under the class name.
    """

    @classmethod
    def own_defaults(cls):
        return {name: trait.default() for name, trait
                in cls.class_own_traits(config=True).items()}


def config_search_path():
    "Directories searched for config files, highest priority first."
    return [os.getcwd()] + jupyter_config_path()


def load_disk_config(path=None):
    """Merge all config files found on path into one dict.

    Files earlier on the path take precedence.
    """
    if path is None:
        path = config_search_path()
    merged = {}
    for directory in reversed(path):
        loader = JSONFileConfigLoader(CONFIG_BASENAME + '.json', path=directory)
        try:
            merge_config(merged, loader.load_config(), include_none=False)
        except ConfigFileNotFound:
            continue
    return merged


def merge_config(target, new, include_none):
    """Merge nested dict `new` into `target` in place.

    Unless include_none is set, a None value removes the key and
    groups left empty are dropped.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            sub = target.setdefault(key, {})
            merge_config(sub, value, include_none)
            if not sub and not include_none:
                del target[key]
        elif value is None and not include_none:
            target.pop(key, None)
        else:
            target[key] = value
    return target


def build_config(entrypoint, include_none=False):
    """Collect the effective config values for an entrypoint.

    Trait defaults are overridden by any `vledits_config.json` found in
    the current directory or the jupyter config path, where values are
    keyed by configurable class name, e.g.

        {"Applying": {"add_y_field": "count"}}
    """
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('No config defined for entrypoint %r, expected one of %s' % (
            entrypoint, ', '.join(sorted(entrypoint_configurables))))

    disk_config = load_disk_config()
    config = {}
    for cls in reversed(configurable.mro()):
        if not issubclass(cls, VleditsConfigurable) or cls is VleditsConfigurable:
            continue
        merge_config(config, cls.own_defaults(), include_none)
        merge_config(config, disk_config.get(cls.__name__, {}), include_none)
    return config


class Global(VleditsConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Printing(VleditsConfigurable):

    use_color = Bool(
        True,
        help="whether to use ANSI color code escapes for text output.",
    ).tag(config=True)


class Applying(VleditsConfigurable):

    add_y_field = Unicode(
        'b',
        help="the field of the y channel added by an ADD_Y modification.",
    ).tag(config=True)

    add_y_type = Enum(
        ('quantitative', 'ordinal', 'nominal', 'temporal'),
        'quantitative',
        help="the type of the y channel added by an ADD_Y modification.",
    ).tag(config=True)


class VlDiff(Global, Printing):
    pass

class VlApply(Global, Printing, Applying):
    pass

class VlDemo(Global, Printing, Applying):
    pass


entrypoint_configurables = {
    'vldiff': VlDiff,
    'vlapply': VlApply,
    'vldemo': VlDemo,
}
