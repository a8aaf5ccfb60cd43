"""
Correlate jails with their plugins.

merge() is pure: it builds a fresh dict of ViewRecord on every call and never
looks at earlier results, so jails that disappear upstream disappear here too.
"""

from typing import Dict, Iterable, Optional

from jaildash.models import Jail, Plugin, ViewRecord

DEFAULT_ICON_URL = "/static/icons/beastie.png"

# Plugin names whose icon (and usual jail name) is a shorter alias
NAME_ALIASES = {
    "plexmediaserver": "plex",
}

GIT_SUFFIX = ".git"
GIT_HOST = "github.com"
RAW_CONTENT_HOST = "raw.githubusercontent.com"
ICON_PATH = "/master/icons/{name}.png"


def normalize_plugin_name(name: str) -> str:
    for long_name, alias in NAME_ALIASES.items():
        name = name.replace(long_name, alias)
    return name


def icon_url_for(plugin: Plugin) -> Optional[str]:
    """
    Build the raw-content URL of a plugin's icon from its repository URL.

    https://github.com/org/plex.git + plexmediaserver
        -> https://raw.githubusercontent.com/org/plex/master/icons/plex.png

    Returns None when the plugin has no name or no repository URL.
    """
    repository = plugin.plugin_repository.strip()
    if not plugin.name or not repository:
        return None
    while repository.endswith(GIT_SUFFIX):
        repository = repository[: -len(GIT_SUFFIX)]
    repository = repository.replace(GIT_HOST, RAW_CONTENT_HOST)
    return repository + ICON_PATH.format(name=normalize_plugin_name(plugin.name))


def merge(jails: Iterable[Jail], plugins: Iterable[Plugin]) -> Dict[str, ViewRecord]:
    """
    Build one ViewRecord per jail id.

    A plugin is attached to the jail named like the plugin, or else to the jail
    named like the plugin's alias. A by-name match wins over an alias match, so
    the outcome does not depend on the order of differently named plugins.
    Among plugins sharing a name, the first one listed is used. Nameless
    plugins, plugins without admin portals and plugins without a matching jail
    are ignored.
    """
    records: Dict[str, ViewRecord] = {}
    for jail in jails:
        records[jail.id] = ViewRecord(address=jail.address)

    exact: Dict[str, Plugin] = {}
    aliased: Dict[str, Plugin] = {}
    for plugin in plugins:
        if not plugin.name or not plugin.admin_portals:
            continue
        # Same-named plugins: the first one listed wins
        if plugin.name in records:
            exact.setdefault(plugin.name, plugin)
            continue
        alias = normalize_plugin_name(plugin.name)
        if alias in records:
            aliased.setdefault(alias, plugin)

    matched = {**aliased, **exact}
    for jail_id, plugin in matched.items():
        records[jail_id] = records[jail_id].model_copy(
            update={
                "admin_url": plugin.admin_portals[0],
                "icon_url": icon_url_for(plugin),
            }
        )

    return {
        jail_id: record if record.icon_url else record.model_copy(update={"icon_url": DEFAULT_ICON_URL})
        for jail_id, record in records.items()
    }
