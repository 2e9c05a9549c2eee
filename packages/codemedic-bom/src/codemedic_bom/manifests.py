"""Parse dependency manifests into package and framework inventories."""

from __future__ import annotations

import json
import logging
import os
import re
import tomllib
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from codemedic_core.report import Report, ReportTable

logger = logging.getLogger(__name__)

SKIP_DIRS = frozenset({
    ".git", ".hg", ".svn", ".vs", ".venv", "venv", "node_modules", "bin", "obj",
    "build", "dist", "__pycache__",
})

# PEP 508 name followed by an optional version specifier
_REQUIREMENT_RE = re.compile(r"^\s*([A-Za-z0-9][A-Za-z0-9._-]*)(?:\[[^\]]*\])?\s*(.*)$")


@dataclass(frozen=True)
class PackageReference:
    """A dependency declared in a manifest."""

    name: str
    version: str
    ecosystem: str
    source: str
    dev: bool = False


@dataclass(frozen=True)
class FrameworkReference:
    """A runtime or target framework declared in a manifest."""

    name: str
    source: str


@dataclass
class BomScan:
    root: Path
    manifests: list[str]
    packages: list[PackageReference]
    frameworks: list[FrameworkReference]


def _parse_requirement(line: str) -> tuple[str, str] | None:
    line = line.split("#", 1)[0].strip()
    if not line or line.startswith("-"):
        return None
    line = line.split(";", 1)[0]
    match = _REQUIREMENT_RE.match(line)
    if not match:
        return None
    return match.group(1), match.group(2).strip()


def parse_requirements(path: Path, source: str) -> list[PackageReference]:
    packages = []
    for line in path.read_text(encoding="utf-8", errors="replace").splitlines():
        parsed = _parse_requirement(line)
        if parsed:
            name, version = parsed
            packages.append(PackageReference(name, version, "PyPI", source))
    return packages


def _section(data: Any, key: str, kind: type = dict) -> Any:
    """Return ``data[key]``, or an empty ``kind`` when absent.

    Raises:
        ValueError: If ``data`` is not a mapping or the entry is not a ``kind``.
    """
    if not isinstance(data, dict):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    value = data.get(key)
    if value is None:
        return kind()
    if not isinstance(value, kind):
        raise ValueError(f"'{key}' should be a {kind.__name__}, got {type(value).__name__}")
    return value


def _pep508_packages(entries: list, source: str, dev: bool = False) -> list[PackageReference]:
    packages = []
    for requirement in entries:
        if not isinstance(requirement, str):
            raise ValueError(f"requirement should be a str, got {type(requirement).__name__}")
        parsed = _parse_requirement(requirement)
        if parsed:
            packages.append(PackageReference(parsed[0], parsed[1], "PyPI", source, dev=dev))
    return packages


def parse_pyproject(
    path: Path, source: str
) -> tuple[list[PackageReference], list[FrameworkReference]]:
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    project = _section(data, "project")

    packages = _pep508_packages(_section(project, "dependencies", list), source)
    for extra in _section(project, "optional-dependencies").values():
        if not isinstance(extra, list):
            raise ValueError(f"optional dependency group should be a list, got {type(extra).__name__}")
        packages.extend(_pep508_packages(extra, source, dev=True))

    frameworks = []
    if project.get("requires-python"):
        frameworks.append(FrameworkReference(f"Python {project['requires-python']}", source))
    return packages, frameworks


def parse_package_json(
    path: Path, source: str
) -> tuple[list[PackageReference], list[FrameworkReference]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    packages = [
        PackageReference(name, str(version), "npm", source)
        for name, version in _section(data, "dependencies").items()
    ]
    packages.extend(
        PackageReference(name, str(version), "npm", source, dev=True)
        for name, version in _section(data, "devDependencies").items()
    )
    frameworks = []
    node = _section(data, "engines").get("node")
    if node:
        frameworks.append(FrameworkReference(f"Node.js {node}", source))
    return packages, frameworks


def _local_name(tag: str) -> str:
    # MSBuild files may carry an XML namespace
    return tag.rsplit("}", 1)[-1]


def parse_msbuild_project(
    path: Path, source: str
) -> tuple[list[PackageReference], list[FrameworkReference]]:
    root = ET.parse(path).getroot()
    packages = []
    frameworks = []
    for element in root.iter():
        tag = _local_name(element.tag)
        if tag == "PackageReference":
            name = element.get("Include") or element.get("Update")
            if not name:
                continue
            version = element.get("Version")
            if version is None:
                child = next(
                    (c for c in element if _local_name(c.tag) == "Version"), None
                )
                version = child.text.strip() if child is not None and child.text else ""
            packages.append(PackageReference(name, version, "NuGet", source))
        elif tag in ("TargetFramework", "TargetFrameworks") and element.text:
            for moniker in element.text.split(";"):
                if moniker.strip():
                    frameworks.append(FrameworkReference(moniker.strip(), source))
    return packages, frameworks


def parse_packages_config(path: Path, source: str) -> list[PackageReference]:
    root = ET.parse(path).getroot()
    return [
        PackageReference(element.get("id", ""), element.get("version", ""), "NuGet", source)
        for element in root.iter("package")
        if element.get("id")
    ]


def _parse_manifest(
    path: Path, source: str
) -> tuple[list[PackageReference], list[FrameworkReference]] | None:
    """Dispatch on filename. Returns None for files that are not manifests."""
    name = path.name
    if name.endswith((".csproj", ".fsproj", ".vbproj")):
        return parse_msbuild_project(path, source)
    if name == "packages.config":
        return parse_packages_config(path, source), []
    if name == "pyproject.toml":
        return parse_pyproject(path, source)
    if name == "package.json":
        return parse_package_json(path, source)
    if name.startswith("requirements") and name.endswith(".txt"):
        return parse_requirements(path, source), []
    return None


def scan_manifests(path: str | Path) -> BomScan:
    """Find and parse every dependency manifest under ``path``.

    Manifests that fail to parse, or whose sections have the wrong type,
    are logged and skipped.

    Raises:
        NotADirectoryError: If ``path`` is not an existing directory.
    """
    root = Path(path).resolve()
    if not root.is_dir():
        raise NotADirectoryError(f"Repository path is not a directory: {root}")

    scan = BomScan(root=root, manifests=[], packages=[], frameworks=[])
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
        for filename in sorted(filenames):
            file_path = Path(dirpath) / filename
            source = file_path.relative_to(root).as_posix()
            try:
                parsed = _parse_manifest(file_path, source)
            except (OSError, ValueError, ET.ParseError) as e:
                logger.warning("Skipping unreadable manifest %s: %s", source, e)
                continue
            if parsed is None:
                continue
            packages, frameworks = parsed
            scan.manifests.append(source)
            scan.packages.extend(packages)
            scan.frameworks.extend(frameworks)

    logger.debug("Found %d manifests under %s", len(scan.manifests), root)
    return scan


def build_bom_report(scan: BomScan) -> Report:
    """Turn a BomScan into the bill of materials report."""
    ecosystems = sorted({p.ecosystem for p in scan.packages})
    summary = {
        "Repository": str(scan.root),
        "Manifests": len(scan.manifests),
        "Packages": len(scan.packages),
        "Unique packages": len({(p.ecosystem, p.name.lower()) for p in scan.packages}),
        "Ecosystems": ", ".join(ecosystems) if ecosystems else "none",
        "Frameworks": len(scan.frameworks),
    }
    packages = ReportTable(
        title="Packages",
        columns=("Package", "Version", "Ecosystem", "Scope", "Source"),
        rows=tuple(
            (p.name, p.version or "*", p.ecosystem, "dev" if p.dev else "runtime", p.source)
            for p in sorted(scan.packages, key=lambda p: (p.ecosystem, p.name.lower(), p.source))
        ),
    )
    frameworks = ReportTable(
        title="Frameworks",
        columns=("Framework", "Source"),
        rows=tuple((f.name, f.source) for f in scan.frameworks),
    )
    return Report(title="Bill of Materials (BOM)", summary=summary, tables=[packages, frameworks])


def analyze_bom(path: str | Path) -> Report:
    """Scan ``path`` and build the BOM report."""
    return build_bom_report(scan_manifests(path))
