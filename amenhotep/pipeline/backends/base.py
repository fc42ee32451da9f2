"""
Base class for scaffolding backends.

Defines the interface that every indexer backend must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import jinja2

from ..config import GeneratorConfig
from ..scanner.nodes import SourceUnit


@dataclass
class GeneratedFile:
    """A rendered output file, named relative to the output directory."""

    name: str
    content: str


class IndexerBackend(ABC):
    """Abstract base class for indexer scaffolding backends."""

    # Template directory name
    TEMPLATE_DIR: str = ""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_DIR
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )

    @abstractmethod
    def generate(self, units: list[SourceUnit]) -> list[GeneratedFile]:
        """
        Render scaffolding for the scanned units.

        Args:
            units: One SourceUnit per scanned file, in scan order

        Returns:
            Files to write, in output order
        """
