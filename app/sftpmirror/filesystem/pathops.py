"""String-level path algorithms.

Paths are plain strings that use a single fixed separator. Functions in
this module never modify their input: they return either the same string
(nothing to change) or a new one.

Several functions accept an optional ``length`` argument. When given, only
``path[:length]`` is considered, which lets callers work on a prefix of a
longer buffer without slicing it first.

Examples:
    >>> join(["./a/", "/b//", "c"])
    'a/b/c'
    >>> split("/srv/data/")
    ['', 'srv', 'data', '']
    >>> replace_grandparent("/old/mid/leaf", "/new")
    '/new/mid/leaf'
"""

from collections.abc import Iterable

from sftpmirror.core.errors import PathTooLongError, SliceRangeError

SEPARATOR = "/"
CURRENT_DIR = "."
PARENT_DIR = ".."

# Capacity limits for a single name and for a whole path (characters).
MAX_NAME_LENGTH = 255
MAX_PATH_LENGTH = 4096

_CURRENT_DIR_PREFIX = CURRENT_DIR + SEPARATOR


def slice_path(path: str, start: int, stop: int) -> str:
    """Return the substring ``[start, stop)`` of ``path``.

    Args:
        path: Path to slice.
        start: Start index (inclusive).
        stop: Stop index (exclusive).

    Returns:
        The sliced path.

    Raises:
        SliceRangeError: Unless ``0 <= start < stop <= len(path)``.
    """
    if not 0 <= start < stop <= len(path):
        raise SliceRangeError(path, start, stop)
    return path[start:stop]


def remove_prefix(path: str, length: int | None = None) -> str:
    """Remove redundant leading characters from a path.

    A single ``./`` is dropped first. Leading separators are then
    collapsed: without a ``./`` prefix one separator is kept because it
    marks the root (``////this`` becomes ``/this``); after a ``./`` prefix
    all of them go (``.//this`` becomes ``this``).

    Args:
        path: Path to clean.
        length: Number of characters of ``path`` to consider.

    Returns:
        The cleaned path, or ``path`` itself when shorter than two
        characters or when nothing needs to be removed.
    """
    if length is None:
        length = len(path)
    if length < 2:
        return path

    cleaned = path[:length]
    keep_root = True
    if cleaned.startswith(_CURRENT_DIR_PREFIX):
        cleaned = cleaned[len(_CURRENT_DIR_PREFIX) :]
        keep_root = False

    num_separators = len(cleaned) - len(cleaned.lstrip(SEPARATOR))
    if num_separators:
        cleaned = cleaned[num_separators - 1 if keep_root else num_separators :]

    return cleaned


def remove_suffix(path: str, length: int | None = None) -> str:
    """Remove every trailing separator, e.g. ``this////`` becomes ``this``.

    Args:
        path: Path to clean.
        length: Number of characters of ``path`` to consider.

    Returns:
        The cleaned path, or ``path`` itself when shorter than two
        characters.
    """
    if length is None:
        length = len(path)
    if length < 2:
        return path
    return path[:length].rstrip(SEPARATOR)


def join(paths: Iterable[str]) -> str:
    """Join paths with exactly one separator between them.

    Every component is cleaned with :func:`remove_prefix` and
    :func:`remove_suffix`. The first component decides whether the result
    is absolute: it is when that component starts with a separator, or
    when it is the empty leading segment :func:`split` produces for an
    absolute path. A leading ``.`` component is dropped when more
    components follow. Empty components are skipped.

    Args:
        paths: Components to join, in order.

    Returns:
        The joined path.

    Raises:
        PathTooLongError: If the result exceeds MAX_PATH_LENGTH characters.
    """
    components = list(paths)
    pieces: list[str] = []
    rooted = False

    for index, component in enumerate(components):
        cleaned = remove_suffix(remove_prefix(component))
        if index == 0:
            rooted = cleaned.startswith(SEPARATOR) or (not component and len(components) > 1)
            if cleaned == CURRENT_DIR and len(components) > 1:
                continue
        cleaned = cleaned.lstrip(SEPARATOR)
        if cleaned:
            pieces.append(cleaned)

    joined = SEPARATOR.join(pieces)
    if rooted:
        joined = SEPARATOR + joined

    if len(joined) > MAX_PATH_LENGTH:
        raise PathTooLongError(joined, MAX_PATH_LENGTH)
    return joined


def split(path: str, length: int | None = None) -> list[str]:
    """Split a path into its segments.

    Every separator ends a segment, even an empty one, and the text after
    the last separator is always appended as the final segment. For
    example ``/this/is/`` gives ``["", "this", "is", ""]``.

    Args:
        path: Absolute or relative path.
        length: Number of characters of ``path`` to consider.

    Returns:
        List of segments.

    Raises:
        PathTooLongError: If a segment exceeds MAX_NAME_LENGTH characters.
    """
    view = path if length is None else path[:length]
    segments = view.split(SEPARATOR)
    for segment in segments:
        if len(segment) > MAX_NAME_LENGTH:
            raise PathTooLongError(segment, MAX_NAME_LENGTH, kind="name")
    return segments


def is_dotted(path: str, length: int | None = None) -> bool:
    """Check if a path is ``.`` or ``..``."""
    if length is None:
        length = len(path)
    if length > 2:
        return False
    return path[:length] in (CURRENT_DIR, PARENT_DIR)


def is_hidden(path: str, length: int | None = None) -> bool:
    """Check if a path is hidden, e.g. ``.hidden`` or ``.hidden/``."""
    if length is None:
        length = len(path)
    if not length:
        return False
    return path[0] == "."


def replace_grandparent(path: str, grandparent: str, length: int | None = None) -> str:
    """Replace the head segment of a path with a new head.

    Separators leading an absolute path mark the root and are not segment
    boundaries, so ``/this/is/a/path`` with ``/new/head`` becomes
    ``/new/head/is/a/path``.

    Args:
        path: Path whose head should be replaced.
        grandparent: New head for the path.
        length: Number of characters of ``path`` to consider.

    Returns:
        The re-rooted path, or ``path`` itself when it is shorter than three
        characters or consists of a single segment.
    """
    if length is None:
        length = len(path)
    if length < 3:
        return path

    head_start = 0
    while head_start < length and path[head_start] == SEPARATOR:
        head_start += 1

    separator_index = path.find(SEPARATOR, head_start, length)
    if separator_index == -1:
        return path

    return join([grandparent, path[separator_index + 1 : length]])


def parent(path: str) -> str:
    """Return everything before the final segment of ``path``.

    ``/a`` gives ``/``; a single relative segment gives an empty string.
    """
    segments = split(remove_suffix(path))
    if len(segments) < 2:
        return ""
    head = segments[:-1]
    if head == [""]:
        return SEPARATOR
    return join(head)
