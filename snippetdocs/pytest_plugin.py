"""pytest integration: write snippet documentation after marked tests.

Enable it from the root ``conftest.py``::

    pytest_plugins = ["snippetdocs.pytest_plugin"]

and mark a test (or a test class)::

    @pytest.mark.snippet_doc(
        title="Creating nodes",
        snippet_id="create",
        snippet_title="Creating a node",
        paragraphs=["Nodes are created inside a transaction."],
        identity="tests.test_nodes",
        name="NodeCreationTests",
    )
    def test_create_node(): ...

After the test finishes the document is written to
``<output_dir>/<name>.xml``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from snippetdocs.errors import SnippetSourceNotFoundError
from snippetdocs.pipeline.documenting import finalize_documentation
from snippetdocs.pipeline.types import DocumentSpec
from snippetdocs.settings import Settings

logger = logging.getLogger(__name__)

MARKER_NAME = "snippet_doc"

_reports_key = pytest.StashKey[dict[str, pytest.TestReport]]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("snippet-docs", "snippet documentation")
    group.addoption(
        "--snippet-docs-output",
        action="store",
        default=None,
        help="Directory for generated snippet documents (default: src/docbkx/snippets).",
    )
    group.addoption(
        "--snippet-docs-skip-failed",
        action="store_true",
        default=False,
        help="Do not write snippet documents for failed tests.",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        f"{MARKER_NAME}(title, snippet_id, snippet_title='', paragraphs=(), identity=None, "
        "name=None, module_root=None, language=None): write a DocBook snippet document after the test",
    )


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[None]) -> Iterator[None]:
    outcome = yield
    report = outcome.get_result()
    if report.when in ("setup", "call"):
        item.stash.setdefault(_reports_key, {})[report.when] = report


@pytest.fixture
def snippet_docs_settings(request: pytest.FixtureRequest) -> Settings:
    """Settings used for generated documents. Override to customise per project."""
    overrides: dict[str, Any] = {}
    output = request.config.getoption("--snippet-docs-output")
    if output:
        overrides["output_dir"] = Path(output)
    return Settings(**overrides)


@pytest.fixture(autouse=True)
def _snippet_documentation(request: pytest.FixtureRequest) -> Iterator[None]:
    marker = request.node.get_closest_marker(MARKER_NAME)
    if marker is None:
        yield
        return

    settings: Settings = request.getfixturevalue("snippet_docs_settings")
    options = dict(marker.kwargs)
    spec = _document_spec(options)
    identity = options.get("identity") or request.module.__name__
    name = options.get("name") or (request.cls.__name__ if request.cls else request.function.__name__)

    yield

    reports = request.node.stash.get(_reports_key, {})
    failed = any(report.failed for report in reports.values())
    if request.config.getoption("--snippet-docs-skip-failed") and failed:
        logger.debug(f"Skipping snippet documentation for failed test {request.node.nodeid}")
        return

    try:
        finalize_documentation(
            spec,
            logical_identity=identity,
            name=name,
            module_root=options.get("module_root"),
            settings=settings,
        )
    except SnippetSourceNotFoundError as e:
        pytest.fail(str(e), pytrace=False)


def _document_spec(options: dict[str, Any]) -> DocumentSpec:
    missing = [key for key in ("title", "snippet_id") if not options.get(key)]
    if missing:
        pytest.fail(f"{MARKER_NAME} marker is missing: {', '.join(missing)}", pytrace=False)
    return DocumentSpec(
        title=options["title"],
        snippet_title=options.get("snippet_title", ""),
        snippet_id=options["snippet_id"],
        paragraphs=options.get("paragraphs", ()),
        language=options.get("language"),
    )
