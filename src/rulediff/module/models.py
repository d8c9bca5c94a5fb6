"""Rule module metadata models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ModuleKind(StrEnum):
    """What a changed path is, from the rule engine's point of view."""

    MODULE = "module"
    MODULE_TEST = "module_test"
    UTILITY = "utility"
    UNRECOGNIZED = "unrecognized"


class ModuleProperty(BaseModel):
    """A configurable property declared by a module."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str


class ModuleExtractInfo(BaseModel):
    """Metadata extracted out-of-band for one rule module."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    package_name: str = Field(alias="packageName")
    name: str
    parent: str
    properties: tuple[ModuleProperty, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.package_name}.{self.name}"


class PropertyValue(BaseModel):
    """A property value set on a module in the generated configuration."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class ModuleInfo(BaseModel):
    """A module selected for the regression configuration."""

    model_config = ConfigDict(frozen=True)

    extract_info: ModuleExtractInfo
    properties: tuple[PropertyValue, ...] = ()

    @property
    def name(self) -> str:
        return self.extract_info.name

    @property
    def full_name(self) -> str:
        return self.extract_info.full_name

    @property
    def parent(self) -> str:
        return self.extract_info.parent
