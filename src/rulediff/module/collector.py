"""Selection of modules to include in the regression configuration."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from rulediff.git.models import GitChange
from rulediff.module.classifier import classify, module_name
from rulediff.module.models import ModuleInfo, ModuleKind
from rulediff.module.table import ModuleTable

log = structlog.get_logger()


def collect_modules(changes: Iterable[GitChange], table: ModuleTable) -> list[ModuleInfo]:
    """One ModuleInfo per module touched by the changes, in first-seen order.

    Both a module's own source and its test select the module.
    """
    modules: dict[str, ModuleInfo] = {}
    counts = dict.fromkeys(ModuleKind, 0)
    for change in changes:
        kind = classify(change, table)
        counts[kind] += 1
        name = module_name(change.path, kind)
        if name is None or name in modules:
            continue
        modules[name] = ModuleInfo(extract_info=table[name])
    log.info(
        "modules.collected",
        modules=len(modules),
        **{f"{kind.value}_changes": count for kind, count in counts.items()},
    )
    return list(modules.values())
