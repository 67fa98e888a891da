"""Rewriting filesystem remote URLs without changing their shape."""

import os
from typing import Union

from git_repo_name.core.fs import strip_file_prefix
from git_repo_name.core.types import FILE_PREFIX, UrlFormat, detect_url_format


def format_new_remote_url(
    original_remote_url: str,
    canonical_path: str,
    cwd: Union[str, os.PathLike],
) -> str:
    """Build the replacement for ``original_remote_url`` pointing at ``canonical_path``.

    ``canonical_path`` is a ``file://`` URL as returned by
    ``resolve_canonical_path``. The result keeps the form of the original:

    - a relative URL that already points at ``canonical_path`` (joined with
      ``cwd`` and normalized lexically) is returned unchanged;
    - a ``file://`` URL yields ``canonical_path`` itself;
    - anything else yields the bare absolute path.

    The relative check must come first, otherwise a correct relative URL
    would be rewritten to an absolute one.
    """
    url_format = detect_url_format(original_remote_url)

    if url_format is UrlFormat.RELATIVE:
        expanded = os.path.normpath(os.path.join(os.fspath(cwd), original_remote_url))
        if f"{FILE_PREFIX}{expanded}" == canonical_path:
            return original_remote_url

    if url_format is UrlFormat.FILE_PREFIXED_ABSOLUTE:
        return canonical_path
    return strip_file_prefix(canonical_path)
