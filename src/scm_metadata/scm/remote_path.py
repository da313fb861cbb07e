"""Extract the repository path from a remote URL.

Handles fully qualified URLs (``https://host/org/repo.git``), SCP-style
references (``git@host:org/repo.git``) and local paths (``/srv/git/repo``,
``./foo:bar``).
"""

import re
from urllib.parse import urlsplit

_SCHEME_PATTERN = re.compile(r"^(ssh|git|http|https|ftp|ftps|file):.+", re.IGNORECASE | re.DOTALL)

_GIT_SUFFIXES = (".git/", ".git")


def strip_git_suffix(url: str) -> str:
    """Remove one trailing ``.git`` or ``.git/``."""
    for suffix in _GIT_SUFFIXES:
        if url.endswith(suffix):
            return url[: -len(suffix)]
    return url


def has_known_scheme(url: str) -> bool:
    return _SCHEME_PATTERN.match(url) is not None


def is_scp_like(url: str) -> bool:
    """Return True if ``url`` reads as ``[user@]host:path``.

    A colon only starts an SCP path when no slash comes before it, so
    ``./foo:bar`` stays a local path.
    """
    colon = url.find(":")
    if colon < 0:
        return False
    slash = url.find("/")
    return slash < 0 or slash > colon


def extract_path(url: str) -> str:
    """Return the path portion of a provider specific URL.

    The result may be empty, e.g. for ``https://host``.
    """
    url = strip_git_suffix(url)

    if has_known_scheme(url):
        return urlsplit(url).path

    if ":" not in url:
        return url

    if not is_scp_like(url):
        return url

    return url[url.index(":") + 1:]
