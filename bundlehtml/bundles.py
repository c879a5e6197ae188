"""Definitions and classification of bundler output files."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, Tuple

if TYPE_CHECKING:
    from collections.abc import Iterable


class OutputKind(Enum):
    """The kind of a file produced by the bundler."""

    #: A chunk of generated code.
    CHUNK = 'chunk'

    #: A plain asset, such as an image or an extracted stylesheet.
    ASSET = 'asset'


@dataclass(frozen=True)
class OutputFile:
    """A file produced by the bundler."""

    #: The name of the file, relative to the output directory.
    #:
    #: This includes the extension and any content hash.
    file_name: str

    #: The kind of file.
    kind: OutputKind = OutputKind.CHUNK

    #: Whether this chunk is a static entry point.
    is_entry: bool = False

    #: Whether this chunk is only reachable through a dynamic import.
    is_dynamic_entry: bool = False

    #: The logical name of the entry point this chunk belongs to.
    #:
    #: Unlike :py:attr:`file_name`, this never contains a hash.
    name: str = ''

    @property
    def is_chunk(self) -> bool:
        """Whether this file is a chunk of code."""
        return self.kind is OutputKind.CHUNK


@dataclass
class BundleIndex:
    """Entry names for the chunks in a bundle, keyed by file name stem.

    A stem is the file name without its directory or extension, so a
    stylesheet extracted for an entry shares the stem of the entry's script.
    """

    #: A mapping of stems to logical names for static entries.
    entries: Dict[str, str] = field(default_factory=dict)

    #: A mapping of stems to logical names for dynamic entries.
    dynamic_entries: Dict[str, str] = field(default_factory=dict)


def split_file_name(
    file_name: str,
) -> Tuple[str, str]:
    """Return the stem and extension of an output file name.

    Only the final extension is removed. A hash in the name is kept as part
    of the stem.

    Args:
        file_name (str):
            The output file name.

    Returns:
        tuple:
        A 2-tuple of the stem and the extension (without the leading
        ``.``).
    """
    stem, ext = posixpath.splitext(posixpath.basename(file_name))

    return stem, ext[1:]


def classify_outputs(
    outputs: Iterable[OutputFile],
) -> BundleIndex:
    """Return the static and dynamic entries of a bundle.

    Only chunks are considered. A chunk marked as both a static and a dynamic
    entry is recorded as a static entry.

    Args:
        outputs (iterable of OutputFile):
            The files produced by the bundler, in bundler order.

    Returns:
        BundleIndex:
        The entries in the bundle.
    """
    index = BundleIndex()

    for output in outputs:
        if not output.is_chunk:
            continue

        stem = split_file_name(output.file_name)[0]

        if output.is_entry:
            index.entries[stem] = output.name
        elif output.is_dynamic_entry:
            index.dynamic_entries[stem] = output.name

    return index
