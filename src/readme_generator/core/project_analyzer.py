"""
Project Analyzer for the README Generator.

Collects everything the README renderer needs from a project directory:
- Directory tree (bounded scan + text rendering)
- package.json metadata (optional, never fatal)
- Technologies inferred from marker files at the project root
"""

import os
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..config import DEFAULT_CONFIG, MANIFEST_FILENAME, GeneratorConfig
from .directory_scanner import (
    DirectoryNode,
    format_directory_structure,
    scan_directory,
    node_name,
)
from .errors import AnalysisError, ScanError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# README template (informational, returned by analyze_project)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TemplateSection:
    name: str
    description: str
    required: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "required": self.required,
        }


README_TEMPLATE: Tuple[TemplateSection, ...] = (
    TemplateSection("Project Title", "The main title/name of the project", True),
    TemplateSection("Description", "A brief overview of what the project does", True),
    TemplateSection("Features", "Key features and capabilities of the project", False),
    TemplateSection("Installation", "Steps to install and set up the project", True),
    TemplateSection("Usage", "How to use the project, including examples", True),
    TemplateSection("Project Structure", "Directory/file structure overview", False),
    TemplateSection("Technologies Used", "List of technologies, frameworks, and tools used", False),
    TemplateSection("Configuration", "Configuration options, environment variables, etc.", False),
    TemplateSection("Contributing", "Guidelines for contributing to the project", False),
    TemplateSection("License", "License information", False),
)


def template_to_dict(template: Tuple[TemplateSection, ...] = README_TEMPLATE) -> Dict[str, Any]:
    return {"sections": [section.to_dict() for section in template]}


# ---------------------------------------------------------------------------
# Technology markers (in detection order)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Marker:
    """
    Root-level filenames that imply a technology.

    The first filename present is recorded as a config file. A marker with
    no technology only contributes the config file.
    """
    filenames: Tuple[str, ...]
    technology: Optional[str] = None

    def match(self, root_files: List[str]) -> Optional[str]:
        for filename in self.filenames:
            if filename in root_files:
                return filename
        return None


_MARKERS: Tuple[Marker, ...] = (
    Marker(("tsconfig.json",), "TypeScript"),
    Marker(("requirements.txt",), "Python"),
    Marker(("setup.py",), "Python"),
    Marker(("Cargo.toml",), "Rust"),
    Marker(("go.mod",), "Go"),
    Marker(("pom.xml",), "Java"),
    Marker(("build.gradle",), "Java/Gradle"),
    Marker(("Dockerfile",), "Docker"),
    Marker((".env.example", ".env.template")),
)


def marker_table(manifest_filename: str = MANIFEST_FILENAME) -> Tuple[Marker, ...]:
    """Marker table whose Node.js row follows the configured manifest name."""
    return (Marker((manifest_filename,), "Node.js"),) + _MARKERS


MARKER_TABLE: Tuple[Marker, ...] = marker_table()


def detect_technologies(
    root_files: List[str],
    markers: Tuple[Marker, ...] = MARKER_TABLE,
) -> Tuple[List[str], List[str]]:
    """
    Match root entries against the marker table.

    Args:
        root_files: Names of the entries directly under the project root
        markers: Ordered marker table

    Returns:
        (detected_technologies, config_files), both in table order
    """
    technologies: List[str] = []
    config_files: List[str] = []

    for marker in markers:
        found = marker.match(root_files)
        if found is None:
            continue
        config_files.append(found)
        if marker.technology and marker.technology not in technologies:
            technologies.append(marker.technology)

    return technologies, config_files


# ---------------------------------------------------------------------------
# Project metadata
# ---------------------------------------------------------------------------

@dataclass
class ProjectMetadata:
    """Everything known about a project, manifest fields first."""
    project_name: str
    description: Optional[str] = None
    version: Optional[str] = None
    author: Any = None
    license: Optional[str] = None
    homepage: Optional[str] = None
    repository: Any = None
    scripts: Dict[str, str] = field(default_factory=dict)
    dependencies: List[str] = field(default_factory=list)
    dev_dependencies: List[str] = field(default_factory=list)
    detected_technologies: List[str] = field(default_factory=list)
    config_files: List[str] = field(default_factory=list)
    root_files: List[str] = field(default_factory=list)
    directory_structure: Optional[DirectoryNode] = None
    directory_structure_formatted: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys clients expect."""
        return {
            "projectName": self.project_name,
            "description": self.description,
            "version": self.version,
            "author": self.author,
            "license": self.license,
            "homepage": self.homepage,
            "repository": self.repository,
            "scripts": dict(self.scripts),
            "dependencies": list(self.dependencies),
            "devDependencies": list(self.dev_dependencies),
            "detectedTechnologies": list(self.detected_technologies),
            "configFiles": list(self.config_files),
            "directoryStructure": (
                self.directory_structure.to_dict() if self.directory_structure else None
            ),
            "directoryStructureFormatted": self.directory_structure_formatted,
            "rootFiles": list(self.root_files),
        }


def read_manifest(project_path: str, config: GeneratorConfig = DEFAULT_CONFIG) -> Optional[Dict[str, Any]]:
    """
    Load package.json from the project root.

    Returns:
        The parsed object, or None if the file is missing, unreadable,
        not valid JSON, or not a JSON object
    """
    manifest_path = os.path.join(project_path, config.manifest_filename)
    try:
        with open(manifest_path, 'r', encoding=config.encoding) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.debug("No usable manifest at %s: %s", manifest_path, e)
        return None

    if not isinstance(data, dict):
        logger.debug("Manifest at %s is not a JSON object", manifest_path)
        return None
    return data


def _names(section: Any) -> List[str]:
    if isinstance(section, dict):
        return list(section.keys())
    return []


def _text(value: Any) -> Optional[str]:
    """Manifest value as display text. Lists are comma-joined; empty values become None."""
    if isinstance(value, list):
        value = ", ".join(str(item) for item in value)
    elif value is not None and not isinstance(value, str):
        value = str(value)
    return value or None


def _scripts(section: Any) -> Dict[str, str]:
    if isinstance(section, dict):
        return {str(name): str(command) for name, command in section.items()}
    return {}


def analyze_project(project_path: str, config: GeneratorConfig = DEFAULT_CONFIG) -> ProjectMetadata:
    """
    Analyze a project directory.

    Args:
        project_path: Path to the project root
        config: Scan depth, ignore patterns and manifest name

    Returns:
        ProjectMetadata built from the filesystem

    Raises:
        AnalysisError: If the project directory cannot be scanned
    """
    project_path = str(project_path)
    logger.info("Analyzing project at %s", project_path)

    try:
        structure = scan_directory(project_path, config.max_depth, config.ignore_patterns)
        root_files = sorted(os.listdir(project_path))
    except (ScanError, OSError) as e:
        raise AnalysisError(project_path, e) from e

    pkg = read_manifest(project_path, config) or {}

    technologies, config_files = detect_technologies(root_files, marker_table(config.manifest_filename))
    logger.debug("Detected technologies: %s", technologies)

    return ProjectMetadata(
        project_name=_text(pkg.get("name")) or node_name(project_path),
        description=_text(pkg.get("description")),
        version=_text(pkg.get("version")),
        author=pkg.get("author") or None,
        license=_text(pkg.get("license")),
        homepage=_text(pkg.get("homepage")),
        repository=pkg.get("repository") or None,
        scripts=_scripts(pkg.get("scripts")),
        dependencies=_names(pkg.get("dependencies")),
        dev_dependencies=_names(pkg.get("devDependencies")),
        detected_technologies=technologies,
        config_files=config_files,
        root_files=root_files,
        directory_structure=structure,
        directory_structure_formatted=format_directory_structure(structure),
    )


def build_analysis(metadata: ProjectMetadata) -> Dict[str, Any]:
    """Combine the template and project data into the analyze_project payload."""
    return {
        "template": template_to_dict(),
        "projectData": metadata.to_dict(),
    }
