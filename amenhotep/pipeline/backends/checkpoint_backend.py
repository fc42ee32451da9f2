"""
Checkpoint backend.

Renders scanned contracts into scaffolding for the Checkpoint indexer:
a GraphQL schema and a JS data writer per contract, plus one
configuration.json for the whole run.
"""

from __future__ import annotations

import json
from typing import Any

from ..scanner.nodes import SourceUnit
from .base import GeneratedFile, IndexerBackend

CONFIGURATION_FILE = "configuration.json"


class CheckpointBackend(IndexerBackend):
    """Checkpoint scaffolding backend."""

    TEMPLATE_DIR = "checkpoint"

    def __init__(self, config):
        super().__init__(config)
        self.schema_template = self.jinja_env.get_template("schema.gql.jinja2")
        self.writer_template = self.jinja_env.get_template("writer.js.jinja2")

    def generate(self, units: list[SourceUnit]) -> list[GeneratedFile]:
        files = []
        for unit in units:
            # Contracts without events have nothing to index
            if not unit.has_events():
                continue
            files.append(self.generate_schema(unit))
            files.append(self.generate_data_writer(unit))
        files.append(self.generate_configuration(units))
        return files

    def generate_schema(self, unit: SourceUnit) -> GeneratedFile:
        content = self.schema_template.render(name=unit.name, events=unit.events)
        return GeneratedFile(name=f"{unit.name}.gql", content=content)

    def generate_data_writer(self, unit: SourceUnit) -> GeneratedFile:
        content = self.writer_template.render(
            deploy_fn=self.config.checkpoint.deploy_fn,
            events=unit.events,
        )
        return GeneratedFile(name=f"{unit.name}DataWriter.js", content=content)

    def generate_configuration(self, units: list[SourceUnit]) -> GeneratedFile:
        content = json.dumps(self.build_configuration(units), indent=2)
        return GeneratedFile(name=CONFIGURATION_FILE, content=content + "\n")

    def build_configuration(self, units: list[SourceUnit]) -> dict[str, Any]:
        """Build the Checkpoint run configuration for every unit with events."""
        checkpoint = self.config.checkpoint
        return {
            "network_node_url": checkpoint.network_node_url,
            "sources": [
                {
                    "contract": checkpoint.contract,
                    "start": checkpoint.start,
                    "deploy_fn": checkpoint.deploy_fn,
                    "events": [{"name": event.trigger_name, "fn": event.handler_name} for event in unit.events],
                }
                for unit in units
                if unit.has_events()
            ],
        }
