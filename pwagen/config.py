"""PWA generator configuration.

Typed configuration record consumed by the project emitter.  Settings use a
frozen Pydantic v2 model so a config is validated at construction time, is
passed by value into a generation run, and can be serialised to/from JSON or
built from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import slugify

DEFAULT_OUTPUT_DIR = Path("./generated-pwa")

# Markup flavors.  Only React + TypeScript components are emitted.
Flavor = Literal["react-tsx"]

_FALSE_VALUES = {"0", "false", "no", "off"}


class GeneratorConfig(BaseModel):
    """Everything a single generation run needs.

    ``features`` holds raw feature tags.  Unknown tags are kept here and
    ignored later by page derivation, so the config never rejects a typo.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(default="my-pwa-app", description="npm package / project name")
    business_name: str = Field(default="My Business", description="Displayed business name")
    description: str = Field(default="", description="Business description")
    industry: str = Field(default="small-business", description="Industry tag for content lookup")
    features: frozenset[str] = Field(
        default_factory=frozenset,
        description="Selected feature flags (membership only)",
    )
    output_dir: Path = Field(default=DEFAULT_OUTPUT_DIR)
    flavor: Flavor = Field(default="react-tsx")
    verify_styles: bool = Field(
        default=True,
        description="Check class/rule coverage before writing any file",
    )

    @field_validator("features", mode="before")
    @classmethod
    def _normalise_features(cls, value: Any) -> frozenset[str]:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = value.split(",")
        elif isinstance(value, Enum):
            value = [value]
        elif not isinstance(value, Iterable):
            raise ValueError(
                "features must be a comma separated string or a collection of tags, "
                f"got {type(value).__name__}"
            )
        tags = (
            str(item.value if isinstance(item, Enum) else item).strip().lower()
            for item in value
        )
        return frozenset(tag for tag in tags if tag)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def project_slug(self) -> str:
        """npm-safe version of ``project_name``."""
        return slugify(self.project_name) or "my-pwa-app"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            PWAGEN_PROJECT_NAME, PWAGEN_BUSINESS_NAME, PWAGEN_DESCRIPTION,
            PWAGEN_INDUSTRY, PWAGEN_FEATURES (comma separated),
            PWAGEN_OUTPUT_DIR, PWAGEN_VERIFY_STYLES.
        """
        kwargs: dict[str, Any] = {}
        env_fields = {
            "PWAGEN_PROJECT_NAME": "project_name",
            "PWAGEN_BUSINESS_NAME": "business_name",
            "PWAGEN_DESCRIPTION": "description",
            "PWAGEN_INDUSTRY": "industry",
            "PWAGEN_FEATURES": "features",
            "PWAGEN_OUTPUT_DIR": "output_dir",
        }
        for env_name, field_name in env_fields.items():
            if os.environ.get(env_name):
                kwargs[field_name] = os.environ[env_name]

        if os.environ.get("PWAGEN_VERIFY_STYLES"):
            kwargs["verify_styles"] = (
                os.environ["PWAGEN_VERIFY_STYLES"].strip().lower() not in _FALSE_VALUES
            )

        return cls(**kwargs)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeneratorConfig":
        """Build a config from a loosely-shaped dict.

        Accepts snake_case keys as well as the camelCase payload produced by
        the web front-end (``projectName``, ``businessName``,
        ``selectedFeatures``, ``businessData.description`` ...).
        """
        business_data = data.get("businessData") or data.get("business_data") or {}

        kwargs: dict[str, Any] = {}
        name = data.get("project_name", data.get("projectName"))
        if name:
            kwargs["project_name"] = name

        business_name = (
            data.get("business_name")
            or data.get("businessName")
            or business_data.get("name")
        )
        if business_name:
            kwargs["business_name"] = business_name

        description = data.get("description") or business_data.get("description")
        if description:
            kwargs["description"] = description

        if data.get("industry"):
            kwargs["industry"] = data["industry"]

        features = (
            data.get("features")
            or data.get("selected_features")
            or data.get("selectedFeatures")
        )
        if features:
            kwargs["features"] = features

        output_dir = data.get("output_dir", data.get("outputDir"))
        if output_dir:
            kwargs["output_dir"] = Path(output_dir)

        # "framework" comes from the web payload; react is the only flavor.
        framework = data.get("flavor", data.get("framework"))
        if framework and framework != "react":
            kwargs["flavor"] = framework

        if "verify_styles" in data:
            kwargs["verify_styles"] = data["verify_styles"]

        return cls(**kwargs)
