"""
Order command: load an item document, resolve its order and render it
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from io import StringIO
from pathlib import Path

import yaml
from rich.console import Console
from rich.table import Table

from ..core.config import Config
from ..core.exceptions import OrderedConfigurationError
from ..core.item_loader import ItemFileError, ItemLoader
from ..core.models import Item
from ..core.orderer import Orderer

logger = logging.getLogger(__name__)


class OrderStatus(Enum):
    """Status of an order operation"""

    SUCCESS = "success"
    ERROR = "error"


@dataclass
class OrderResult:
    """Result of ordering one item document"""

    file_path: Path
    status: OrderStatus
    order: list[str] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)
    error_message: str | None = None

    @property
    def is_success(self) -> bool:
        """Check if ordering was successful"""
        return self.status == OrderStatus.SUCCESS

    def __str__(self) -> str:
        if self.is_success:
            return f"✓ {self.file_path.name}: {len(self.order)} items ordered"
        return f"✗ {self.file_path.name}: {self.error_message}"


class OrderCommand:
    """Command handler ordering the items of a document"""

    def __init__(self, config: Config):
        """Initialize order command with configuration"""
        self.config = config
        self.loader = ItemLoader(config.loader)
        self.orderer = Orderer()

    def execute(self, path: Path) -> OrderResult:
        """
        Resolve the order of the items declared in a document

        Args:
            path: YAML or JSON item document

        Returns:
            OrderResult with the resolved names, or the error that prevented
            ordering. No partial order is ever returned.
        """
        try:
            items = self.loader.load(path)
            order = self.orderer.order(items)
        except (OrderedConfigurationError, ItemFileError, FileNotFoundError, ValueError) as e:
            logger.error(f"Cannot order {path}: {e}")
            return OrderResult(file_path=path, status=OrderStatus.ERROR, error_message=str(e))

        logger.info(f"Ordered {len(order)} items from {path}")
        return OrderResult(file_path=path, status=OrderStatus.SUCCESS, order=order, items=items)

    def render(self, result: OrderResult, output_format: str | None = None) -> str:
        """
        Render a successful result

        Args:
            result: Result returned by execute()
            output_format: text, table, json or yaml (defaults to config)

        Returns:
            Rendered order
        """
        output_format = output_format or self.config.output.format
        show_positions = self.config.output.show_positions
        positions = {item.name: item.position for item in result.items}

        if output_format == "json":
            return json.dumps(self._records(result, positions, show_positions), indent=2)

        if output_format == "yaml":
            return yaml.safe_dump(
                self._records(result, positions, show_positions),
                default_flow_style=False,
                sort_keys=False,
            ).rstrip("\n")

        if output_format == "table":
            return self._render_table(result, positions, show_positions)

        if output_format != "text":
            raise ValueError(f"Unsupported output format: {output_format}")

        if show_positions:
            return "\n".join(f"{name} ({positions[name]})" for name in result.order)
        return "\n".join(result.order)

    def _records(self, result, positions, show_positions):
        if not show_positions:
            return list(result.order)
        return [
            {"name": name, "position": positions[name].to_raw()} for name in result.order
        ]

    def _render_table(self, result, positions, show_positions) -> str:
        table = Table(title=result.file_path.name)
        table.add_column("#", justify="right")
        table.add_column("Name")
        if show_positions:
            table.add_column("Position")

        for index, name in enumerate(result.order, start=1):
            row = [str(index), name]
            if show_positions:
                row.append(str(positions[name]))
            table.add_row(*row)

        buffer = StringIO()
        Console(file=buffer, width=100, color_system=None).print(table)
        return buffer.getvalue().rstrip("\n")
