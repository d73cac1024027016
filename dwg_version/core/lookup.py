"""Signature to version-label lookup table.

The lookup is built once at start-up, either from the built-in table of
known DWG version codes or from a YAML/JSON file, and is read-only from
then on. It is passed explicitly to the pipeline; nothing in this package
keeps a module-level copy that could change between calls.

Lookup file format (YAML shown, JSON equivalent)::

    versions:
      AC1027: "2013"
      AC1032: "2018"

A bare top-level mapping without the ``versions`` key is accepted too.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional, Union

import yaml

from dwg_version.parsers.signature import SIGNATURE_LENGTH
from dwg_version.utils.exceptions import LookupConfigError

logger = logging.getLogger(__name__)


# Version codes found at offset 0x00 of DWG files and the releases that write them
DEFAULT_VERSIONS: Dict[str, str] = {
    "AC1.40": "AutoCAD R1.40",
    "AC1.50": "AutoCAD R2.05",
    "AC2.10": "AutoCAD R2.10",
    "AC1001": "AutoCAD R2.5",
    "AC1002": "AutoCAD R2.6",
    "AC1003": "AutoCAD R9",
    "AC1004": "AutoCAD R9",
    "AC1006": "AutoCAD R10",
    "AC1009": "AutoCAD R11/R12",
    "AC1012": "AutoCAD R13",
    "AC1014": "AutoCAD R14",
    "AC1015": "AutoCAD 2000/2000i/2002",
    "AC1018": "AutoCAD 2004/2005/2006",
    "AC1021": "AutoCAD 2007/2008/2009",
    "AC1024": "AutoCAD 2010/2011/2012",
    "AC1027": "AutoCAD 2013-2017",
    "AC1032": "AutoCAD 2018+",
}


class VersionLookup(Mapping):
    """Immutable mapping from 6-character signature code to version label.

    Behaves like a read-only dict. Entries are validated on construction:
    every key must be exactly SIGNATURE_LENGTH characters and every label
    must be non-empty. Attributes cannot be reassigned after construction.
    """

    __slots__ = ("source", "_table")

    def __init__(self, entries: Optional[Mapping] = None, source: Optional[str] = None):
        """Initialize the lookup.

        Args:
            entries: Mapping of signature code to label (keys and values are
                converted to str)
            source: Where the entries came from, used in error messages

        Raises:
            LookupConfigError: If a key or label is invalid
        """
        object.__setattr__(self, "source", source)
        table: Dict[str, str] = {}

        for key, value in (entries or {}).items():
            code = str(key)
            label = "" if value is None else str(value)

            if len(code) != SIGNATURE_LENGTH:
                raise LookupConfigError(
                    f"signature {code!r} must be exactly {SIGNATURE_LENGTH} characters",
                    path=source,
                )
            if not label:
                raise LookupConfigError(f"signature {code!r} has an empty label", path=source)

            table[code] = label

        object.__setattr__(self, "_table", MappingProxyType(table))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"VersionLookup is read-only, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"VersionLookup is read-only, cannot delete {name!r}")

    def __getitem__(self, key: str) -> str:
        return self._table[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"VersionLookup({dict(self._table)!r})"

    def merged(self, overrides: Mapping) -> "VersionLookup":
        """Return a new lookup with ``overrides`` laid over this one."""
        combined = dict(self._table)
        combined.update({str(k): v for k, v in overrides.items()})
        source = getattr(overrides, "source", None) or self.source
        return VersionLookup(combined, source=source)


DEFAULT_VERSION_LOOKUP = VersionLookup(DEFAULT_VERSIONS, source="built-in")


def _extract_table(config: Any, path: Path) -> Mapping:
    """Pull the signature table out of a parsed lookup file."""
    if not isinstance(config, dict):
        raise LookupConfigError("file must contain a mapping of signature to version", path=str(path))

    if "versions" in config:
        table = config["versions"]
        if not isinstance(table, dict):
            raise LookupConfigError("'versions' must be a mapping", path=str(path))
        return table

    return config


def load_lookup(
    lookup_path: Optional[Union[str, Path]] = None,
    merge_defaults: bool = False,
) -> VersionLookup:
    """Load the version lookup table.

    Args:
        lookup_path: YAML (.yaml/.yml) or JSON (.json) file; None returns the
            built-in table
        merge_defaults: Lay the file's entries over the built-in table
            instead of replacing it

    Returns:
        VersionLookup

    Raises:
        LookupConfigError: If the file is missing, has an unsupported
            suffix, cannot be parsed, or holds invalid entries
    """
    if lookup_path is None:
        return DEFAULT_VERSION_LOOKUP

    lookup_path = Path(lookup_path)

    if not lookup_path.is_file():
        raise LookupConfigError("file not found", path=str(lookup_path))

    suffix = lookup_path.suffix.lower()

    try:
        with open(lookup_path, "r", encoding="utf-8") as f:
            if suffix in [".yaml", ".yml"]:
                config = yaml.safe_load(f)
            elif suffix == ".json":
                config = json.load(f)
            else:
                raise LookupConfigError(f"unsupported format: {suffix}", path=str(lookup_path))
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise LookupConfigError(f"cannot parse file: {e}", path=str(lookup_path)) from e
    except OSError as e:
        raise LookupConfigError(f"cannot read file: {e}", path=str(lookup_path)) from e

    lookup = VersionLookup(_extract_table(config, lookup_path), source=str(lookup_path))
    logger.info(f"Loaded {len(lookup)} version signatures from {lookup_path}")

    if merge_defaults:
        return DEFAULT_VERSION_LOOKUP.merged(lookup)
    return lookup
