"""Repository health scan: source inventory and hygiene signals."""

from __future__ import annotations

import logging
import os
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from codemedic_core.report import Report, ReportTable

logger = logging.getLogger(__name__)

# Directories never descended into
SKIP_DIRS = frozenset({
    ".git", ".hg", ".svn", ".vs", ".idea", ".venv", "venv", "node_modules",
    "bin", "obj", "build", "dist", "__pycache__", ".mypy_cache", ".pytest_cache",
    ".tox",
})

LANGUAGES: dict[str, str] = {
    ".cs": "C#",
    ".fs": "F#",
    ".vb": "Visual Basic",
    ".py": "Python",
    ".js": "JavaScript",
    ".jsx": "JavaScript",
    ".ts": "TypeScript",
    ".tsx": "TypeScript",
    ".go": "Go",
    ".rs": "Rust",
    ".java": "Java",
    ".kt": "Kotlin",
    ".rb": "Ruby",
    ".c": "C",
    ".h": "C",
    ".cpp": "C++",
    ".hpp": "C++",
}

PROJECT_SUFFIXES = (".csproj", ".fsproj", ".vbproj", ".sln")
PROJECT_FILENAMES = frozenset({
    "pyproject.toml", "setup.py", "package.json", "go.mod", "Cargo.toml",
    "pom.xml", "build.gradle",
})

CI_MARKERS = (
    ".github/workflows",
    ".gitlab-ci.yml",
    "azure-pipelines.yml",
    ".circleci",
    "Jenkinsfile",
)


@dataclass
class HealthScan:
    """Raw signals collected from a repository walk."""

    root: Path
    language_files: Counter = field(default_factory=Counter)
    project_files: list[str] = field(default_factory=list)
    total_files: int = 0
    has_readme: bool = False
    has_license: bool = False
    has_tests: bool = False
    has_ci: bool = False

    @property
    def score(self) -> int:
        """0-100 score from the hygiene signals present."""
        points = 0
        if self.has_readme:
            points += 25
        if self.has_license:
            points += 15
        if self.has_tests:
            points += 30
        if self.has_ci:
            points += 15
        if self.project_files:
            points += 15
        return points


def _is_test_path(rel: Path) -> bool:
    for part in rel.parts:
        lowered = part.lower()
        if lowered in ("test", "tests", "__tests__", "spec") or lowered.endswith((".test", ".tests")):
            return True
    name = rel.name.lower()
    return name.startswith("test_") or name.endswith(("_test.py", "tests.cs", "test.cs", ".test.js", ".spec.ts"))


def scan_repository(path: str | Path) -> HealthScan:
    """Walk ``path`` and collect health signals.

    Raises:
        NotADirectoryError: If ``path`` is not an existing directory.
    """
    root = Path(path).resolve()
    if not root.is_dir():
        raise NotADirectoryError(f"Repository path is not a directory: {root}")

    scan = HealthScan(root=root)
    scan.has_ci = any((root / marker).exists() for marker in CI_MARKERS)

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
        current = Path(dirpath)
        for filename in sorted(filenames):
            scan.total_files += 1
            file_path = current / filename
            rel = file_path.relative_to(root)
            lowered = filename.lower()

            if current == root:
                if lowered.startswith("readme"):
                    scan.has_readme = True
                elif lowered.startswith(("license", "licence", "copying")):
                    scan.has_license = True

            if filename.endswith(PROJECT_SUFFIXES) or filename in PROJECT_FILENAMES:
                scan.project_files.append(rel.as_posix())

            language = LANGUAGES.get(file_path.suffix.lower())
            if language:
                scan.language_files[language] += 1
                if not scan.has_tests and _is_test_path(rel):
                    scan.has_tests = True

    logger.debug("Scanned %d files under %s", scan.total_files, root)
    return scan


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def build_health_report(scan: HealthScan) -> Report:
    """Turn a HealthScan into the dashboard report."""
    summary = {
        "Repository": str(scan.root),
        "Health score": f"{scan.score}/100",
        "Files": scan.total_files,
        "Source files": sum(scan.language_files.values()),
        "Projects": len(scan.project_files),
    }

    languages = ReportTable(
        title="Languages",
        columns=("Language", "Files"),
        rows=tuple(
            (language, str(count))
            for language, count in sorted(
                scan.language_files.items(), key=lambda item: (-item[1], item[0])
            )
        ),
    )
    projects = ReportTable(
        title="Projects",
        columns=("Project file",),
        rows=tuple((p,) for p in scan.project_files),
    )
    checks = ReportTable(
        title="Quality indicators",
        columns=("Check", "Present"),
        rows=(
            ("README", _yes_no(scan.has_readme)),
            ("License", _yes_no(scan.has_license)),
            ("Tests", _yes_no(scan.has_tests)),
            ("Continuous integration", _yes_no(scan.has_ci)),
        ),
    )
    return Report(
        title="Repository Health Dashboard",
        summary=summary,
        tables=[checks, languages, projects],
    )


def analyze_health(path: str | Path) -> Report:
    """Scan ``path`` and build the health report."""
    return build_health_report(scan_repository(path))
