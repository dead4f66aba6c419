"""Tests for stack detection."""

from __future__ import annotations

from pathlib import Path

import pytest

from docmake.detect.stack import StackDetector


def test_go_marker_wins_over_other_markers(repo_builder) -> None:
    repo_builder.write(
        {
            "package.json": '{"dependencies": {"next": "^13"}}',
            "requirements.txt": "flask\n",
            "go.mod": "module example.com/demo\n",
        }
    )

    stack = StackDetector().detect(repo_builder.path())

    assert stack.primary == "go"
    assert stack.framework is None


def test_requirements_marker_beats_package_json(repo_builder) -> None:
    repo_builder.write({"package.json": "{}", "requirements.txt": "django\n"})

    assert StackDetector().detect(repo_builder.path()).primary == "python"


@pytest.mark.parametrize(
    ("dependencies", "framework"),
    [
        ('{"next": "^13", "react": "^18"}', "nextjs"),
        ('{"react": "^18"}', "react"),
        ('{"express": "^4"}', None),
    ],
)
def test_package_json_framework_sub_check(repo_builder, dependencies: str, framework) -> None:
    repo_builder.write({"package.json": f'{{"dependencies": {dependencies}}}'})

    stack = StackDetector().detect(repo_builder.path())

    assert stack.primary == "node"
    assert stack.framework == framework


def test_invalid_package_json_is_plain_node(repo_builder) -> None:
    repo_builder.write({"package.json": "{not json"})

    stack = StackDetector().detect(repo_builder.path())

    assert (stack.primary, stack.framework) == ("node", None)


@pytest.mark.parametrize(
    ("marker", "primary"),
    [("pom.xml", "java-maven"), ("build.gradle", "java-gradle")],
)
def test_java_markers(repo_builder, marker: str, primary: str) -> None:
    repo_builder.write({marker: ""})

    assert StackDetector().detect(repo_builder.path()).primary == primary


def test_extension_majority_fallback(repo_builder) -> None:
    repo_builder.write(
        {
            "scripts/a.py": "",
            "scripts/b.py": "",
            "web/app.jsx": "",
            "cmd/main.go": "",
        }
    )

    stack = StackDetector().detect(repo_builder.path())

    assert stack.primary == "python"
    assert stack.from_marker is False


def test_marker_detection_is_flagged(repo_builder) -> None:
    repo_builder.write({"requirements.txt": "flask\n", "package.json": "{}"})

    assert StackDetector().detect(repo_builder.path()).from_marker is True


def test_extension_fallback_counts_js_and_jsx_together(repo_builder) -> None:
    repo_builder.write({"a.js": "", "b.jsx": "", "c.py": ""})

    assert StackDetector().detect(repo_builder.path()).primary == "javascript"


def test_extension_tie_is_unknown(repo_builder) -> None:
    repo_builder.write({"a.py": "", "b.go": ""})

    assert StackDetector().detect(repo_builder.path()).primary == "unknown"


def test_empty_repository_is_unknown(repo_builder) -> None:
    repo_builder.write({"README.md": "# demo\n"})

    stack = StackDetector().detect(repo_builder.path())

    assert stack.primary == "unknown"
    assert stack.supported is False


def test_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        StackDetector().detect(tmp_path / "missing")
