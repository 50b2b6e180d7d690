"""
Assembly models — what the compilation pipeline hands us, and what we derive.

AssemblyDescriptor is read-only input supplied by the host. ProjectRecord
lives only for the duration of one generation pass: it carries the
(name, guid, path) triple from the project writer to the solution writer.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _solution_safe_name(value: str) -> str:
    # Names are quoted verbatim in .sln Project lines, which have no escape syntax
    if '"' in value:
        raise ValueError("assembly name must not contain a double quote")
    return value


class AssemblyDescriptor(BaseModel):
    """A compiled assembly as reported by the host.

    Attributes:
        name:                          Unique, stable assembly name.
        source_files:                  Absolute source paths, in compile order.
        defines:                       Preprocessor symbols (set semantics).
        assembly_references:           Names of other assemblies depended on.
        compiled_assembly_references:  Absolute paths of prebuilt DLLs.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str = Field(min_length=1)
    source_files: list[str] = Field(default_factory=list)
    defines: list[str] = Field(default_factory=list)
    assembly_references: list[str] = Field(default_factory=list)
    compiled_assembly_references: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return _solution_safe_name(value)

    @field_validator("defines", "assembly_references", "compiled_assembly_references")
    @classmethod
    def _dedupe(cls, values: list[str]) -> list[str]:
        # Sets on the host side; keep first-seen order so output is stable.
        return list(dict.fromkeys(values))


class ProjectRecord(BaseModel):
    """A generated project file, as the solution writer needs to see it."""

    name: str
    guid: str
    path: str

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return _solution_safe_name(value)
