"""Immutable name -> metadata lookup for rule modules."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

import structlog
from pydantic import TypeAdapter, ValidationError

from rulediff.core.errors import ModuleTableError
from rulediff.module.models import ModuleExtractInfo

log = structlog.get_logger()

_INFO_LIST = TypeAdapter(list[ModuleExtractInfo])


class ModuleTable(Mapping[str, ModuleExtractInfo]):
    """Fully-qualified module name -> extract info.

    Built once per run and passed explicitly to the classifier and
    collector; it cannot be modified after construction.
    """

    def __init__(self, infos: Iterable[ModuleExtractInfo] = ()) -> None:
        table: dict[str, ModuleExtractInfo] = {}
        for info in infos:
            table[info.full_name] = info
        self._table = MappingProxyType(table)

    @classmethod
    def from_json(cls, text: str, *, source: str = "<string>") -> ModuleTable:
        """Parse a JSON array of extract infos.

        An object keyed by full name is accepted as well; the keys are
        ignored in favour of each entry's own package and name.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ModuleTableError.invalid(source, str(e)) from e
        if isinstance(data, dict):
            data = list(data.values())
        try:
            infos = _INFO_LIST.validate_python(data)
        except ValidationError as e:
            raise ModuleTableError.invalid(source, str(e.errors()[0]["msg"])) from e
        return cls(infos)

    @classmethod
    def from_json_file(cls, path: Path) -> ModuleTable:
        if not path.is_file():
            raise ModuleTableError.not_found(str(path))
        table = cls.from_json(path.read_text(encoding="utf-8"), source=str(path))
        log.debug("module_table.loaded", path=str(path), modules=len(table))
        return table

    def __getitem__(self, full_name: str) -> ModuleExtractInfo:
        return self._table[full_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ModuleTable({len(self)} modules)"
