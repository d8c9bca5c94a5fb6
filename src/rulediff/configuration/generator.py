"""Rule-engine XML configuration for the selected modules."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

import structlog

from rulediff.module.models import ModuleInfo

log = structlog.get_logger()

DOCTYPE_PUBLIC = "-//Puppy Crawl//DTD Check Configuration 1.3//EN"
DOCTYPE_SYSTEM = "http://checkstyle.sourceforge.net/dtds/configuration_1_3.dtd"

PARENT_CHECKER = "Checker"
PARENT_TREE_WALKER = "TreeWalker"

ELEMENT_MODULE = "module"
ELEMENT_PROPERTY = "property"
ATTR_NAME = "name"
ATTR_VALUE = "value"

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


def _base_document() -> tuple[ET.Element, ET.Element]:
    """Checker root with an empty TreeWalker child."""
    checker = ET.Element(ELEMENT_MODULE, {ATTR_NAME: PARENT_CHECKER})
    ET.SubElement(checker, ELEMENT_PROPERTY, {ATTR_NAME: "charset", ATTR_VALUE: "UTF-8"})
    tree_walker = ET.SubElement(checker, ELEMENT_MODULE, {ATTR_NAME: PARENT_TREE_WALKER})
    return checker, tree_walker


def _module_element(module: ModuleInfo) -> ET.Element:
    element = ET.Element(ELEMENT_MODULE, {ATTR_NAME: module.name})
    for prop in module.properties:
        ET.SubElement(element, ELEMENT_PROPERTY, {ATTR_NAME: prop.name, ATTR_VALUE: prop.value})
    return element


def generate_config_text(modules: Sequence[ModuleInfo]) -> str:
    """Render the configuration document.

    Modules are attached under their declared parent (Checker or
    TreeWalker) in the given order; modules with any other parent are
    skipped.
    """
    checker, tree_walker = _base_document()
    for module in modules:
        if module.parent == PARENT_CHECKER:
            checker.append(_module_element(module))
        elif module.parent == PARENT_TREE_WALKER:
            tree_walker.append(_module_element(module))
        else:
            log.warning("config.unsupported_parent", module=module.full_name, parent=module.parent)

    ET.indent(checker, space="  ")
    body = ET.tostring(checker, encoding="unicode")
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<!DOCTYPE module PUBLIC "{DOCTYPE_PUBLIC}" "{DOCTYPE_SYSTEM}">\n'
        f"{body}\n"
    )


def config_file_name(branch: str, template: str, now: datetime | None = None) -> str:
    """File name for a generated config; slashes in branch names become dashes."""
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return template.format(branch=branch.replace("/", "-"), timestamp=timestamp)


def generate_config(path: Path, modules: Sequence[ModuleInfo]) -> Path:
    """Write the configuration document to path (UTF-8, truncating)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_config_text(modules), encoding="utf-8")
    log.info("config.written", path=str(path), modules=len(modules))
    return path
