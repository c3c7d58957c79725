"""Shared pytest fixtures for the PWA generator test suite.

Provides reusable fixtures for:
- Temporary output directories
- Sample generator configurations
- A quiet emitter factory
- Hand-written markup/stylesheet files for the coverage checker
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from pwagen.config import GeneratorConfig
from pwagen.scaffolder.emitter import ProjectEmitter
from pwagen.scaffolder.models import FileKind, OutputFile


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary directory for generated projects (auto-cleanup)."""
    project_dir = tmp_path / "generated-pwa"
    project_dir.mkdir()
    yield project_dir


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def minimal_config() -> GeneratorConfig:
    """Base pages only, default-ish industry."""
    return GeneratorConfig(
        project_name="Test Project",
        business_name="Test Co",
        description="A test business.",
        industry="small-business",
    )


@pytest.fixture
def contact_gallery_config() -> GeneratorConfig:
    """The contact-form + gallery scenario."""
    return GeneratorConfig(
        project_name="acme-site",
        business_name="Acme Secure",
        description="Security for small teams.",
        industry="cyber-security",
        features=["contact-form", "gallery"],
    )


@pytest.fixture
def all_features_config() -> GeneratorConfig:
    """Every recognised feature flag."""
    return GeneratorConfig(
        project_name="everything",
        business_name="Everything Inc",
        industry="technology",
        features=[
            "contact-form", "gallery", "testimonials", "auth", "reviews",
            "chat", "search", "payments", "booking", "analytics",
            "geolocation", "profile", "notifications", "social",
        ],
    )


@pytest.fixture
def make_emitter() -> Callable[..., ProjectEmitter]:
    """Factory building a quiet emitter from config keyword arguments."""

    def _make(**kwargs) -> ProjectEmitter:
        return ProjectEmitter(GeneratorConfig(**kwargs), quiet=True)

    return _make


# ---------------------------------------------------------------------------
# Coverage-check inputs
# ---------------------------------------------------------------------------


@pytest.fixture
def covered_files() -> list[OutputFile]:
    """A markup file whose classes are all defined by its imported sheets."""
    markup = (
        "import React from 'react';\n"
        "import './shared.css';\n"
        "import './Card.css';\n"
        "\n"
        "export const Card = ({ on }: { on: boolean }) => (\n"
        "  <div className=\"card wide\">\n"
        "    <span className={on ? 'badge active' : 'badge'}>x</span>\n"
        "  </div>\n"
        ");\n"
    )
    return [
        OutputFile(path="src/pages/Card.tsx", content=markup, kind=FileKind.MARKUP),
        OutputFile(
            path="src/pages/shared.css",
            content=".wide { width: 100%; }\n",
            kind=FileKind.STYLESHEET,
        ),
        OutputFile(
            path="src/pages/Card.css",
            content="/* card */\n.card { padding: 1rem; }\n.badge.active { color: red; }\n",
            kind=FileKind.STYLESHEET,
        ),
    ]
