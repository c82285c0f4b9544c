"""Tests for the outline parser facade."""

from pathlib import Path

import pytest

from bcoutline.outline.builder import OutlineStructureError
from bcoutline.outline.parser import OutlineParser


class TestOutlineParser:
    """Tests for OutlineParser."""

    def test_parse_content(self, ledger_doc):
        parser = OutlineParser()
        result = parser.parse_content(ledger_doc)

        assert [root.label for root in result.roots] == ["Options", "Accounts", "Transactions"]
        assert result.total_nodes == 7
        assert result.lines[3] == "* Options"

    def test_parse_file(self, tmp_path: Path, ledger_doc):
        path = tmp_path / "main.beancount"
        path.write_text(ledger_doc, encoding="utf-8")

        result = OutlineParser().parse_file(path)

        assert len(result.roots) == 3

    def test_parse_file_missing(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            OutlineParser().parse_file(tmp_path / "missing.beancount")

    def test_parse_file_with_encoding(self, tmp_path: Path):
        path = tmp_path / "latin1.txt"
        path.write_bytes("* Café\n".encode("latin-1"))

        result = OutlineParser(encoding="latin-1").parse_file(path)

        assert result.roots[0].label == "Café"

    def test_structure_error_propagates(self, skipped_level_doc):
        parser = OutlineParser()

        with pytest.raises(OutlineStructureError):
            parser.parse_content(skipped_level_doc)

        assert parser.roots == []

    def test_no_headings(self, no_headings_doc):
        result = OutlineParser().parse_content(no_headings_doc)

        assert result.roots == []
        assert result.total_nodes == 0

    def test_convenience_before_parse(self):
        parser = OutlineParser()

        assert parser.roots == []
        assert parser.lines == []
        assert parser.get_all_nodes() == []
        assert parser.find_node("anything") is None

    def test_get_all_nodes_in_document_order(self, ledger_doc):
        parser = OutlineParser()
        parser.parse_content(ledger_doc)

        labels = [node.label for node in parser.get_all_nodes()]

        assert labels == [
            "Options",
            "Accounts",
            "Assets",
            "Expenses",
            "Groceries",
            "Rent",
            "Transactions",
        ]

    def test_find_node(self, ledger_doc):
        parser = OutlineParser()
        parser.parse_content(ledger_doc)

        node = parser.find_node("groceries")

        assert node is not None
        assert node.level == 3
        assert parser.find_node("Income") is None

    def test_get_node_content(self, ledger_doc):
        parser = OutlineParser()
        parser.parse_content(ledger_doc)

        node = parser.find_node("Assets")
        assert node is not None

        assert parser.get_node_content(node) == (
            "** Assets\n"
            "2024-01-01 open Assets:Bank:Checking EUR\n"
            "2024-01-01 open Assets:Cash EUR"
        )

    def test_node_content_excludes_children(self, ledger_doc):
        parser = OutlineParser()
        parser.parse_content(ledger_doc)

        node = parser.find_node("Expenses")
        assert node is not None

        assert parser.get_node_content(node) == "** Expenses"
