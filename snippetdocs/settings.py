from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SNIPPETDOCS_", extra="ignore")

    # None means the process working directory at the time of use
    working_dir: Path | None = None
    output_dir: Path = Field(default_factory=lambda: Path("src/docbkx/snippets"))

    # Source lookup: <module_name>/<source_root>/<identity as path><source_extension>
    project_name: str = "spring-data-neo4j"
    module_name: str = "spring-data-neo4j"
    source_root: Path = Field(default_factory=lambda: Path("src/test/java"))
    source_extension: str = ".java"

    # Snippet markers and rendering
    comment_token: str = "//"
    listing_language: str = "java"
    document_extension: str = ".xml"

    @property
    def resolved_working_dir(self) -> Path:
        return self.working_dir or Path.cwd()

    @property
    def resolved_output_dir(self) -> Path:
        if self.output_dir.is_absolute():
            return self.output_dir
        return self.resolved_working_dir / self.output_dir


# Singleton instance - components fall back to this when no Settings is passed
settings = Settings()
