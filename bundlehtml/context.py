"""Build contexts connecting the plugin to a build orchestrator."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from typing_extensions import Protocol

if TYPE_CHECKING:
    from collections.abc import MutableMapping


logger = logging.getLogger(__name__)


class BuildContext(Protocol):
    """The services a build orchestrator provides to the plugin.

    Attributes:
        cache (dict):
            Storage that persists between lifecycle hooks of a build.
    """

    cache: MutableMapping[str, Any]

    def warn(
        self,
        message: str,
    ) -> None:
        """Report a problem that doesn't stop the build.

        Args:
            message (str):
                The warning message.
        """
        ...

    def add_watch_file(
        self,
        path: str,
    ) -> None:
        """Register a file whose changes should trigger a rebuild.

        Args:
            path (str):
                The path to the file.
        """
        ...

    def emit_file(
        self,
        file_name: str,
        source: Union[str, bytes],
    ) -> None:
        """Emit a file into the build output.

        Args:
            file_name (str):
                The name of the file in the output directory.

            source (str or bytes):
                The contents of the file. Text is written as UTF-8.
        """
        ...


class FileSystemBuildContext:
    """A build context writing emitted files to a directory.

    Emitted files are also kept in memory, which makes this context useful
    for inspecting the output of a build.

    Attributes:
        cache (dict):
            Storage that persists between lifecycle hooks of a build.

        emitted_files (dict):
            A mapping of emitted file names to their contents.

        output_dir (str):
            The directory emitted files are written to, or ``None`` to keep
            them in memory only.

        warnings (list of str):
            The warnings reported during the build.

        watch_files (list of str):
            The files registered for watching.
    """

    def __init__(
        self,
        output_dir: Optional[str] = None,
    ) -> None:
        """Initialize the context.

        Args:
            output_dir (str, optional):
                The directory emitted files are written to.
        """
        self.output_dir = output_dir
        self.cache: Dict[str, Any] = {}
        self.emitted_files: Dict[str, Union[str, bytes]] = {}
        self.warnings: List[str] = []
        self.watch_files: List[str] = []

    def warn(
        self,
        message: str,
    ) -> None:
        """Log a problem that doesn't stop the build.

        Args:
            message (str):
                The warning message.
        """
        logger.warning('%s', message)
        self.warnings.append(message)

    def add_watch_file(
        self,
        path: str,
    ) -> None:
        """Register a file whose changes should trigger a rebuild.

        Args:
            path (str):
                The path to the file.
        """
        if path not in self.watch_files:
            self.watch_files.append(path)

    def emit_file(
        self,
        file_name: str,
        source: Union[str, bytes],
    ) -> None:
        """Emit a file into the build output.

        Args:
            file_name (str):
                The name of the file in the output directory.

            source (str or bytes):
                The contents of the file. Text is written as UTF-8.
        """
        self.emitted_files[file_name] = source

        if self.output_dir:
            path = os.path.join(self.output_dir, file_name)
            os.makedirs(os.path.dirname(path), exist_ok=True)

            if isinstance(source, str):
                source = source.encode('utf-8')

            with open(path, 'wb') as fp:
                fp.write(source)

            logger.debug('Wrote %s', path)
