"""Tests for rule-engine configuration generation."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime
from pathlib import Path

from rulediff.configuration.generator import (
    DOCTYPE_PUBLIC,
    DOCTYPE_SYSTEM,
    config_file_name,
    generate_config,
    generate_config_text,
)
from rulediff.module.models import ModuleExtractInfo, ModuleInfo, PropertyValue


def module(name: str, parent: str, *properties: PropertyValue) -> ModuleInfo:
    info = ModuleExtractInfo(package_name="com.example.checks", name=name, parent=parent)
    return ModuleInfo(extract_info=info, properties=properties)


def parse(text: str) -> ET.Element:
    return ET.fromstring(text.encode("utf-8"))


def child_modules(element: ET.Element) -> list[str]:
    return [child.get("name", "") for child in element.findall("module")]


class TestGenerateConfigText:
    def test_header(self) -> None:
        """Document starts with the XML declaration and the configuration DOCTYPE."""
        lines = generate_config_text([]).splitlines()
        assert lines[0] == '<?xml version="1.0" encoding="UTF-8"?>'
        assert lines[1] == f'<!DOCTYPE module PUBLIC "{DOCTYPE_PUBLIC}" "{DOCTYPE_SYSTEM}">'

    def test_empty_configuration(self) -> None:
        """Without modules the document holds Checker and an empty TreeWalker."""
        root = parse(generate_config_text([]))
        assert root.tag == "module"
        assert root.get("name") == "Checker"
        assert child_modules(root) == ["TreeWalker"]
        (tree_walker,) = root.findall("module")
        assert list(tree_walker) == []

    def test_charset_property(self) -> None:
        root = parse(generate_config_text([]))
        charset = root.find("property")
        assert charset is not None
        assert charset.attrib == {"name": "charset", "value": "UTF-8"}

    def test_modules_attached_to_parent(self) -> None:
        modules = [
            module("EmptyStatementCheck", "TreeWalker"),
            module("NewlineAtEndOfFileCheck", "Checker"),
            module("AvoidStarImportCheck", "TreeWalker"),
        ]
        root = parse(generate_config_text(modules))
        assert child_modules(root) == ["TreeWalker", "NewlineAtEndOfFileCheck"]
        tree_walker = root.find("module[@name='TreeWalker']")
        assert tree_walker is not None
        assert child_modules(tree_walker) == ["EmptyStatementCheck", "AvoidStarImportCheck"]

    def test_unsupported_parent_skipped(self) -> None:
        """Modules nested under other modules are left out."""
        text = generate_config_text([module("JavadocTagCheck", "JavadocCheck")])
        root = parse(text)
        assert "JavadocTagCheck" not in text
        assert child_modules(root) == ["TreeWalker"]

    def test_module_properties(self) -> None:
        check = module(
            "AbstractClassNameCheck",
            "TreeWalker",
            PropertyValue(name="format", value="^Abstract.+$"),
            PropertyValue(name="ignoreModifier", value="true"),
        )
        root = parse(generate_config_text([check]))
        element = root.find("module/module[@name='AbstractClassNameCheck']")
        assert element is not None
        assert [(p.get("name"), p.get("value")) for p in element.findall("property")] == [
            ("format", "^Abstract.+$"),
            ("ignoreModifier", "true"),
        ]

    def test_values_escaped(self) -> None:
        check = module(
            "RegexpCheck", "TreeWalker", PropertyValue(name="format", value='a<b & "c"')
        )
        root = parse(generate_config_text([check]))
        prop = root.find("module/module/property")
        assert prop is not None
        assert prop.get("value") == 'a<b & "c"'

    def test_indented_output(self) -> None:
        text = generate_config_text([module("EmptyStatementCheck", "TreeWalker")])
        assert '\n    <module name="EmptyStatementCheck" />' in text


class TestConfigFileName:
    def test_default_template(self) -> None:
        now = datetime(2024, 3, 5, 14, 7, 9)
        name = config_file_name("feature", "config-{branch}-{timestamp}.xml", now)
        assert name == "config-feature-20240305140709.xml"

    def test_slashes_in_branch(self) -> None:
        now = datetime(2024, 1, 1)
        name = config_file_name("topic/new-check", "config-{branch}-{timestamp}.xml", now)
        assert name == "config-topic-new-check-20240101000000.xml"

    def test_custom_template(self) -> None:
        assert config_file_name("b", "{branch}.xml") == "b.xml"


class TestGenerateConfig:
    def test_writes_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "configs" / "config.xml"
        result = generate_config(path, [module("EmptyStatementCheck", "TreeWalker")])
        assert result == path
        text = path.read_text(encoding="utf-8")
        assert text == generate_config_text([module("EmptyStatementCheck", "TreeWalker")])

    def test_truncates_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.xml"
        path.write_text("x" * 10_000, encoding="utf-8")
        generate_config(path, [])
        assert "x" * 100 not in path.read_text(encoding="utf-8")
