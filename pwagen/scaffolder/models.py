"""Pydantic v2 models for the project emitter.

Defines the value objects produced during a generation run: derived pages,
emitted files and the run result.  Every model is frozen; a run builds them
once and never mutates them.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pwagen.utils import component_name, page_path


class FileKind(str, Enum):
    """Category of an emitted file."""
    MARKUP = "markup"
    STYLESHEET = "stylesheet"
    CONFIG = "config"


class PageDescriptor(BaseModel):
    """A derived page: its tag, React component name and router path."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Page tag, e.g. 'contact'")
    component: str = Field(..., description="Component name, e.g. 'Contact'")
    path: str = Field(..., description="Router path, e.g. '/contact'")

    @classmethod
    def for_page(cls, name: str) -> "PageDescriptor":
        return cls(name=name, component=component_name(name), path=page_path(name))


class OutputFile(BaseModel):
    """One emitted file, addressed by a POSIX path relative to the project root."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str
    kind: FileKind

    @field_validator("path")
    @classmethod
    def _relative_path(cls, value: str) -> str:
        pure = PurePosixPath(value)
        if not value or pure.is_absolute() or ".." in pure.parts:
            raise ValueError(f"Output path must be relative and inside the project: {value!r}")
        return str(pure)


class GenerationResult(BaseModel):
    """Summary of a completed generation run."""

    root: Path
    pages: list[PageDescriptor] = Field(default_factory=list)
    files: list[OutputFile] = Field(default_factory=list)
    ignored_features: list[str] = Field(default_factory=list)
    industry_matched: bool = True

    def paths(self) -> list[Path]:
        """Absolute paths of every written file, in emission order."""
        return [self.root / f.path for f in self.files]

    def files_of_kind(self, kind: FileKind) -> list[OutputFile]:
        return [f for f in self.files if f.kind == kind]
