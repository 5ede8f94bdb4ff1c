"""Media actions: files in the collection's media folder."""

from anki_connect import api
from anki_connect._utils import check_for_file_data, reject_value, require_params


def store_media_file(params):
    """Store a file in the media folder; returns the stored file name.

    Param: a FileSpec, e.g. ``{"filename": "_hello.txt", "data": "SGVsbG8="}``.
    One of ``data``, ``path`` or ``url`` is required and checked before sending.
    Names starting with ``_`` are left alone by Anki's unused-media check.
    """
    checked = check_for_file_data(params)
    if not checked.ok:
        return checked
    return api.invoke("storeMediaFile", checked.value)


def retrieve_media_file(params):
    """Return the base64 content of a media file, or Failure("File not found")."""
    (filename,) = require_params(params, "retrieve_media_file", "filename")
    return reject_value(
        api.invoke("retrieveMediaFile", {"filename": filename}),
        False,
        "File not found",
    )


def get_media_files_names(params):
    """List media file names matching a glob ``pattern`` such as ``_hell*.txt``."""
    (pattern,) = require_params(params, "get_media_files_names", "pattern")
    return api.invoke("getMediaFilesNames", {"pattern": pattern})


def get_media_dir_path():
    return api.invoke("getMediaDirPath")


def delete_media_file(params):
    (filename,) = require_params(params, "delete_media_file", "filename")
    return api.invoke("deleteMediaFile", {"filename": filename})
