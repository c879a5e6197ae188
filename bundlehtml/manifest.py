"""Loading of bundle manifests.

A manifest describes the files produced by a bundler, using the bundler's own
field names. It's either a list of records:

.. code-block:: json

   [
       {"fileName": "main.a1b2.js", "type": "chunk", "isEntry": true,
        "name": "main"},
       {"fileName": "main.a1b2.css", "type": "asset"}
   ]

or a mapping of file names to records, as found in a bundle object. Records
in a mapping may leave out ``fileName``.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, List

from bundlehtml.bundles import OutputFile, OutputKind
from bundlehtml.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping


logger = logging.getLogger(__name__)


def parse_output_record(
    record: Mapping[str, Any],
    file_name: str = '',
) -> OutputFile:
    """Return an output file from a manifest record.

    Args:
        record (dict):
            The manifest record.

        file_name (str, optional):
            The file name to use if the record doesn't contain one.

    Returns:
        bundlehtml.bundles.OutputFile:
        The output file.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The record was invalid.
    """
    if not isinstance(record, dict):
        raise ConfigurationError('Invalid manifest record: %r' % (record,))

    file_name = record.get('fileName') or file_name

    if not file_name or not isinstance(file_name, str):
        raise ConfigurationError(
            'Manifest record is missing a fileName: %r' % (record,))

    kind = record.get('type', OutputKind.CHUNK.value)

    try:
        kind = OutputKind(kind)
    except ValueError:
        raise ConfigurationError(
            'Invalid type "%s" for manifest record "%s"'
            % (kind, file_name))

    return OutputFile(file_name=file_name,
                      kind=kind,
                      is_entry=bool(record.get('isEntry')),
                      is_dynamic_entry=bool(record.get('isDynamicEntry')),
                      name=record.get('name') or '')


def parse_manifest(
    data: Any,
) -> List[OutputFile]:
    """Return the output files described by deserialized manifest data.

    Args:
        data (list or dict):
            The deserialized manifest.

    Returns:
        list of bundlehtml.bundles.OutputFile:
        The output files, in manifest order.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The manifest was invalid.
    """
    if isinstance(data, list):
        return [
            parse_output_record(record)
            for record in data
        ]
    elif isinstance(data, dict):
        return [
            parse_output_record(record, file_name)
            for file_name, record in data.items()
        ]
    else:
        raise ConfigurationError(
            'The manifest must be a list or an object of output records.')


def load_manifest(
    path: str,
) -> List[OutputFile]:
    """Return the output files described by a manifest file.

    Args:
        path (str):
            The path to the JSON manifest.

    Returns:
        list of bundlehtml.bundles.OutputFile:
        The output files, in manifest order.

    Raises:
        bundlehtml.errors.ConfigurationError:
            The manifest couldn't be read or was invalid.
    """
    try:
        with open(path, 'r', encoding='utf-8') as fp:
            data = json.load(fp)
    except IOError as e:
        raise ConfigurationError(
            'Unable to read the manifest "%s": %s' % (path, e))
    except ValueError as e:
        raise ConfigurationError(
            'Unable to parse the manifest "%s": %s' % (path, e))

    outputs = parse_manifest(data)
    logger.debug('Loaded %d output files from %s', len(outputs), path)

    return outputs
