"""
Tests for source file discovery.
"""

import logging

import pytest

from amenhotep.exceptions import InvalidFileExtensionError
from amenhotep.pipeline.scanner import check_extension, discover_files


@pytest.fixture
def contracts(tmp_path):
    """A small contracts tree with a few non-Cairo files mixed in."""
    (tmp_path / "token.cairo").write_text("")
    (tmp_path / "README.md").write_text("")
    (tmp_path / "account").mkdir()
    (tmp_path / "account" / "account.cairo").write_text("")
    (tmp_path / "account" / "notes.txt").write_text("")
    (tmp_path / "account" / "deep").mkdir()
    (tmp_path / "account" / "deep" / "vault.cairo").write_text("")
    (tmp_path / "build").mkdir()
    return tmp_path


class TestCheckExtension:
    def test_accepts_matching_extension(self, tmp_path):
        assert check_extension(tmp_path / "a.cairo") == tmp_path / "a.cairo"

    def test_rejects_other_extension(self, tmp_path):
        with pytest.raises(InvalidFileExtensionError, match=r"\.cairo"):
            check_extension(tmp_path / "a.sol")

    def test_custom_extension(self, tmp_path):
        assert check_extension(tmp_path / "Token.contract", ".contract").name == "Token.contract"


class TestDiscoverFiles:
    def test_walks_directories_recursively(self, contracts):
        files = discover_files([contracts])
        assert files == [
            contracts / "account" / "account.cairo",
            contracts / "account" / "deep" / "vault.cairo",
            contracts / "token.cairo",
        ]

    def test_explicit_file(self, contracts):
        assert discover_files([contracts / "token.cairo"]) == [contracts / "token.cairo"]

    def test_explicit_file_with_wrong_extension_is_skipped(self, contracts, caplog):
        with caplog.at_level(logging.WARNING, logger="amenhotep"):
            files = discover_files([contracts / "README.md", contracts / "token.cairo"])
        assert files == [contracts / "token.cairo"]
        assert "README.md" in caplog.text

    def test_duplicates_are_dropped(self, contracts):
        files = discover_files([contracts / "token.cairo", contracts, contracts / "account"])
        assert files[0] == contracts / "token.cairo"
        assert len(files) == 3
        assert len(set(files)) == 3

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            discover_files([tmp_path / "nope"])

    def test_empty_directory(self, contracts):
        assert discover_files([contracts / "build"]) == []

    def test_symlinked_directories_are_not_followed(self, contracts):
        (contracts / "account" / "parent").symlink_to(contracts, target_is_directory=True)
        files = discover_files([contracts])
        assert files == [
            contracts / "account" / "account.cairo",
            contracts / "account" / "deep" / "vault.cairo",
            contracts / "token.cairo",
        ]


if __name__ == "__main__":
    pytest.main([__file__])
