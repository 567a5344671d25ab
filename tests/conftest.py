"""
Pytest configuration for snippetdocs tests.

Shared fixtures: settings rooted in a temporary working directory and
sample source files laid out the way the locator expects them.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from snippetdocs.settings import Settings

# --- Test Constants ---
MODULE_NAME = "spring-data-neo4j"
DEMO_IDENTITY = "org.example.DemoTests"
DEMO_SOURCE = """package org.example;

public class DemoTests {
    @Test
    public void createsNode() {
        // SNIPPET demo
        Node node = graph.createNode();
        if (a < b && c > d) node.setProperty("name", "<x>");
        // SNIPPET demo
    }
}
"""
DEMO_SNIPPET = (
    "        Node node = graph.createNode();\n"
    '        if (a < b && c > d) node.setProperty("name", "<x>");\n'
)


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Working directory standing in for the project root."""
    root = tmp_path / "projects" / MODULE_NAME
    root.mkdir(parents=True)
    return root


@pytest.fixture
def settings(work_dir: Path) -> Settings:
    """Default settings with the working directory pinned to ``work_dir``."""
    return Settings(working_dir=work_dir)


@pytest.fixture
def write_source():
    """Write a Java source file for a dotted identity below ``root``."""

    def _write(root: Path, identity: str, text: str) -> Path:
        path = root / "src" / "test" / "java" / Path(*identity.split("."))
        path = path.with_name(path.name + ".java")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def demo_source(work_dir: Path, write_source) -> Path:
    """DemoTests.java inside the module directory of ``work_dir``."""
    return write_source(work_dir / MODULE_NAME, DEMO_IDENTITY, DEMO_SOURCE)


@pytest.fixture
def demo_snippet() -> str:
    """Text expected between the ``SNIPPET demo`` markers of ``demo_source``."""
    return DEMO_SNIPPET
