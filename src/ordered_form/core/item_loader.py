"""
Item Document Loader
====================

Reads sibling items and their declared positions from YAML or JSON
documents. Three layouts are accepted:

    # list of records
    - name: email
      position: {after: name}
    - name: name

    # mapping of name -> position, in document order
    email: {after: name}
    name: null

    # either layout under the configured items key
    items:
      - name: email
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .config import LoaderConfig
from .models import Item
from .position import normalize_position

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = [".yaml", ".yml", ".json"]


class ItemFileError(Exception):
    """Exception raised for unreadable or malformed item documents"""

    pass


class ItemLoader:
    """Loader turning item documents into Item lists"""

    def __init__(self, config: LoaderConfig | None = None):
        """
        Initialize item loader.

        Args:
            config: Keys used to read names and positions
        """
        self.config = config or LoaderConfig()

    def load(self, file_path: Path) -> list[Item]:
        """
        Load items from a YAML or JSON file.

        Args:
            file_path: Path to the item document

        Returns:
            Items in document order, positions normalized

        Raises:
            FileNotFoundError: If the file doesn't exist
            ItemFileError: If the document is unreadable or malformed
            InvalidPositionShapeError: If a declared position is malformed
        """
        if not file_path.exists():
            raise FileNotFoundError(f"Item file not found: {file_path}")

        if file_path.suffix not in SUPPORTED_SUFFIXES:
            raise ItemFileError(f"Unsupported item file format: {file_path.suffix}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                if file_path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ItemFileError(f"Error reading item file {file_path}: {e}") from e

        items = self.parse(data)
        logger.info(f"Loaded {len(items)} items from {file_path}")
        return items

    def parse(self, data: Any) -> list[Item]:
        """Build items from an already decoded document"""
        if data is None:
            return []

        if isinstance(data, Mapping) and self.config.items_key in data:
            data = data[self.config.items_key]

        if isinstance(data, Mapping):
            records = [(name, position) for name, position in data.items()]
        elif isinstance(data, list):
            records = [self._read_record(index, record) for index, record in enumerate(data)]
        else:
            raise ItemFileError(
                f"Item document must be a list or a mapping, got {type(data).__name__}"
            )

        items = []
        seen = set()
        for name, position in records:
            if not isinstance(name, str) or not name:
                raise ItemFileError(f"Item names must be non-empty strings, got {name!r}")
            if name in seen:
                raise ItemFileError(f"Duplicate item name: {name!r}")
            seen.add(name)
            items.append(Item(name, normalize_position(name, position)))

        return items

    def _read_record(self, index: int, record: Any) -> tuple[Any, Any]:
        if isinstance(record, str):
            return record, None

        if not isinstance(record, Mapping):
            raise ItemFileError(f"Item #{index} must be a mapping or a name, got {record!r}")

        if self.config.name_key not in record:
            raise ItemFileError(f"Item #{index} has no {self.config.name_key!r} key")

        return record[self.config.name_key], record.get(self.config.position_key)


def load_items(file_path: Path, config: LoaderConfig | None = None) -> list[Item]:
    """Load items from a YAML or JSON file"""
    return ItemLoader(config).load(file_path)


def parse_items(data: Any, config: LoaderConfig | None = None) -> list[Item]:
    """Build items from a decoded YAML/JSON document"""
    return ItemLoader(config).parse(data)
