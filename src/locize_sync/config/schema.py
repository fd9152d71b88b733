"""Configuration schema for locize-sync using nested Pydantic models."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator


DEFAULT_INCLUDE = [".js", ".jsx", ".ts", ".tsx", ".vue", ".py"]

DEFAULT_EXCLUDE_DIRS = [
    "__pycache__",
    ".git",
    ".pytest_cache",
    ".venv",
    "venv",
    "env",
    "node_modules",
    "dist",
    "build",
    "coverage",
]

DEFAULT_FUNCTIONS = ["t", "_", "translate"]


class LocizeConfig(BaseModel):
    """Translation store (locize) configuration."""

    project_id: str = Field(
        ...,
        description="locize project id",
        min_length=1,
    )
    api_key: str | None = Field(
        default=None,
        description="locize API key, required for writes and private downloads "
        + "(the LOCIZE_API_KEY environment variable takes precedence)",
    )
    version: str = Field(
        default="latest",
        description="Project version to read from and write to",
        min_length=1,
    )
    namespace: str = Field(
        default="translation",
        description="Namespace holding the translations",
        min_length=1,
    )
    base_url: str = Field(
        default="https://api.locize.app",
        description="Base URL of the locize API",
    )
    private: bool = Field(
        default=False,
        description="Download resources through the authenticated private endpoint",
    )
    write_mode: Literal["missing", "update"] = Field(
        default="missing",
        description="'missing' only adds new keys, 'update' also overwrites existing ones",
    )
    timeout: Annotated[float, Field(gt=0, le=300)] = Field(
        default=30.0,
        description="HTTP timeout in seconds",
    )
    max_retries: Annotated[int, Field(ge=0, le=10)] = Field(
        default=2,
        description="Retries for timed out read requests (writes are never retried)",
    )
    include_reference_language: bool = Field(
        default=True,
        description="Whether the reference language takes part in reconciliation",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate and normalize the API base URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("locize base_url must start with http:// or https://")
        return v.rstrip("/")


class FindKeysConfig(BaseModel):
    """Source-tree key discovery configuration."""

    include: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INCLUDE),
        description="File suffixes to scan for translation keys",
    )
    exclude_dirs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS),
        description="Directory names skipped while scanning",
    )
    functions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FUNCTIONS),
        description="Names of translation functions whose first argument is a key",
        min_length=1,
    )
    unique: bool = Field(
        default=True,
        description="Keep only the first occurrence of each discovered key",
    )

    @field_validator("include")
    @classmethod
    def normalize_suffixes(cls, v: list[str]) -> list[str]:
        """Accept suffixes with or without the leading dot."""
        return [s if s.startswith(".") else f".{s}" for s in v]


class ResolverConfig(BaseModel):
    """Resolver configuration."""

    separator_escape: str = Field(
        default="*",
        description="Character standing in for '.' in keys handed to the resolver",
        min_length=1,
        max_length=1,
    )

    @field_validator("separator_escape")
    @classmethod
    def validate_escape(cls, v: str) -> str:
        """The escape must differ from the key separator."""
        if v == ".":
            raise ValueError("separator_escape cannot be '.'")
        return v


class LocizeSyncConfig(BaseModel):
    """Top-level locize-sync configuration."""

    locize: LocizeConfig
    find_keys: FindKeysConfig = Field(default_factory=FindKeysConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
