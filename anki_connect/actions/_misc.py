"""Miscellaneous actions: permissions, versioning, sync, profiles and packages."""

from anki_connect import api
from anki_connect._utils import acknowledge, maybe_add_field, require_params


def request_permission():
    """Ask AnkiConnect whether this origin may use the API.

    This is the only action accepted from any origin. The result always has
    ``permission`` ("granted" or "denied"); trusted origins also get
    ``requireApiKey`` and ``version``.
    """
    return api.invoke("requestPermission")


def version():
    """Return the API version exposed by AnkiConnect (currently 6)."""
    return api.invoke("version")


def api_reflect(params):
    """Describe the available API.

    Param: ``{"scopes": ["actions"], "actions": ["apiReflect"]}``. ``actions``
    is optional; without it every supported action is listed.
    """
    (scopes,) = require_params(params, "api_reflect", "scopes")
    request = maybe_add_field({"scopes": scopes}, "actions", params.get("actions"))
    return api.invoke("apiReflect", request)


def sync():
    """Synchronize the local collection with AnkiWeb."""
    return api.invoke("sync")


def get_profiles():
    return api.invoke("getProfiles")


def load_profile(params):
    (name,) = require_params(params, "load_profile", "name")
    return api.invoke("loadProfile", {"name": name})


def multi(params):
    """Run several actions in one request; results come back in order.

    Param: ``{"actions": [{"action": "deckNames"}, {"action": "version", "version": 6}]}``.
    Each entry's raw ``{result, error}`` envelope is returned as-is, so the
    per-action Failure mapping done by the other functions does not apply.
    """
    (actions,) = require_params(params, "multi", "actions")
    return api.invoke("multi", {"actions": actions})


def export_package(params):
    """Export a deck to an ``.apkg`` file at ``path``.

    ``include_sched`` (default False) keeps the cards' scheduling data.
    """
    deck, path = require_params(params, "export_package", "deck", "path")
    include_sched = params.get("include_sched", False)
    return acknowledge(
        api.invoke(
            "exportPackage",
            {"deck": deck, "path": path, "include_sched": include_sched},
        ),
        "Export package failed",
    )


def import_package(params):
    """Import an ``.apkg`` file. ``path`` is relative to Anki's collection.media folder."""
    (path,) = require_params(params, "import_package", "path")
    return acknowledge(api.invoke("importPackage", {"path": path}), "Import package failed")


def reload_collection():
    return api.invoke("reloadCollection")
