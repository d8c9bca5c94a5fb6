"""Rule module classification."""

from rulediff.module.classifier import (
    classify,
    full_name,
    module_name,
    source_set,
)
from rulediff.module.collector import collect_modules
from rulediff.module.models import (
    ModuleExtractInfo,
    ModuleInfo,
    ModuleKind,
    ModuleProperty,
    PropertyValue,
)
from rulediff.module.table import ModuleTable

__all__ = [
    "ModuleTable",
    "ModuleKind",
    "ModuleExtractInfo",
    "ModuleProperty",
    "ModuleInfo",
    "PropertyValue",
    "classify",
    "collect_modules",
    "full_name",
    "module_name",
    "source_set",
]
