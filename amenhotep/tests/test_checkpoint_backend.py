"""
Tests for the Checkpoint scaffolding backend.
"""

import json
from pathlib import Path

import pytest

from amenhotep.pipeline import CheckpointBackend, CheckpointConfig, GeneratorConfig
from amenhotep.pipeline.scanner import scan_file

TEST_DATA = Path(__file__).parent / "test_data"

EXPECTED_ERC20_SCHEMA = """scalar Text

type Erc20 {
    id: String!
    # Transfer
    from: String!
    to: String!
    value: String!
    # Approval
    owner: String!
    spender: String!
    value: String!
}
"""


@pytest.fixture
def backend():
    return CheckpointBackend(GeneratorConfig())


@pytest.fixture
def units():
    return [scan_file(TEST_DATA / name) for name in ["erc20.cairo", "counter.cairo", "Token.contract"]]


class TestGenerate:
    def test_files_for_units_with_events_only(self, backend, units):
        files = backend.generate(units)
        assert [f.name for f in files] == [
            "Erc20.gql",
            "Erc20DataWriter.js",
            "Token.gql",
            "TokenDataWriter.js",
            "configuration.json",
        ]

    def test_configuration_only_when_no_events(self, backend):
        files = backend.generate([scan_file(TEST_DATA / "counter.cairo")])
        assert [f.name for f in files] == ["configuration.json"]
        assert json.loads(files[0].content)["sources"] == []

    def test_schema(self, backend, units):
        schema = backend.generate_schema(units[0])
        assert schema.name == "Erc20.gql"
        assert schema.content == EXPECTED_ERC20_SCHEMA

    def test_data_writer(self, backend, units):
        writer = backend.generate_data_writer(units[0])
        content = writer.content
        assert writer.name == "Erc20DataWriter.js"
        assert content.startswith("import type { CheckpointWriter } from '@snapshot-labs/checkpoint';\n")
        assert "export async function handleDeploy() {" in content
        assert "export async function handleTransfer({ block, tx, event, mysql }: Parameters<CheckpointWriter>[0]) {" in content
        assert content.index("handleTransfer") < content.index("handleApproval")
        assert content.count("if (!event) return;") == 2

    def test_configuration(self, backend, units):
        configuration = json.loads(backend.generate_configuration(units).content)
        assert configuration == {
            "network_node_url": "<CHANGE_ME>",
            "sources": [
                {
                    "contract": "<CHANGE_ME>",
                    "start": 0,
                    "deploy_fn": "handleDeploy",
                    "events": [
                        {"name": "new_transfer", "fn": "handleTransfer"},
                        {"name": "new_approval", "fn": "handleApproval"},
                    ],
                },
                {
                    "contract": "<CHANGE_ME>",
                    "start": 0,
                    "deploy_fn": "handleDeploy",
                    "events": [{"name": "new_transfer", "fn": "handleTransfer"}],
                },
            ],
        }

    def test_configured_placeholders(self, units):
        config = GeneratorConfig(
            checkpoint=CheckpointConfig(
                network_node_url="https://starknet-goerli.example/rpc",
                contract="0x0123",
                start=4200,
                deploy_fn="onDeploy",
            )
        )
        backend = CheckpointBackend(config)
        configuration = json.loads(backend.generate_configuration(units).content)
        assert configuration["network_node_url"] == "https://starknet-goerli.example/rpc"
        assert {s["contract"] for s in configuration["sources"]} == {"0x0123"}
        assert {s["start"] for s in configuration["sources"]} == {4200}
        assert "export async function onDeploy() {" in backend.generate_data_writer(units[0]).content

    def test_small_int_arguments_render_as_int(self, backend):
        from amenhotep.pipeline.scanner import DeclarationScanner

        unit = DeclarationScanner().scan(["#[event]", "fn Tick(count: u32, at: u64)"], name="Clock")
        content = backend.generate_schema(unit).content
        assert "    count: Int!\n" in content
        assert "    at: String!\n" in content


if __name__ == "__main__":
    pytest.main([__file__])
