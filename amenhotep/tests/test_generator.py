"""
End-to-end tests for the indexer generator pipeline.
"""

from pathlib import Path

import pytest

from amenhotep.exceptions import UnknownTypeError
from amenhotep.pipeline import GeneratedFile, GeneratorConfig, IndexerGenerator, Writer

TEST_DATA = Path(__file__).parent / "test_data"


class CollectingWriter(Writer):
    def __init__(self):
        self.files: list[GeneratedFile] = []

    def write(self, file: GeneratedFile) -> None:
        self.files.append(file)


class TestIndexerGenerator:
    def test_run_hands_every_file_to_the_writer(self):
        writer = CollectingWriter()
        generated = IndexerGenerator().run([TEST_DATA / "erc20.cairo", TEST_DATA / "counter.cairo"], writer)
        assert writer.files == generated
        assert [f.name for f in generated] == ["Erc20.gql", "Erc20DataWriter.js", "configuration.json"]

    def test_custom_extension(self):
        config = GeneratorConfig(source_extension=".contract")
        files = IndexerGenerator(config).generate([TEST_DATA])
        assert [f.name for f in files] == ["Token.gql", "TokenDataWriter.js", "configuration.json"]

    def test_one_bad_file_aborts_everything(self):
        writer = CollectingWriter()
        with pytest.raises(UnknownTypeError):
            IndexerGenerator().run([TEST_DATA / "erc20.cairo", TEST_DATA / "unknown_type.cairo"], writer)
        assert writer.files == []

    def test_scan_keeps_units_separate(self):
        generator = IndexerGenerator()
        units = generator.scan([TEST_DATA / "erc20.cairo", TEST_DATA / "Token.contract"])
        assert [u.name for u in units] == ["Erc20", "Token"]
        assert [e.name for e in units[0].events] == ["Transfer", "Approval"]
        assert [e.name for e in units[1].events] == ["Transfer"]
        assert units[0].events[0] is not units[1].events[0]

    def test_notices_are_logged(self, tmp_path, caplog):
        path = tmp_path / "half.cairo"
        path.write_text("struct Storage {\n    _a: felt252,\n")
        with caplog.at_level("WARNING", logger="amenhotep"):
            units = IndexerGenerator().scan([path])
        assert units[0].storage_fields == []
        assert "storage unterminated" in caplog.text
