"""
README Generator Core Module
Contains the directory scanner, project analyzer and README renderer.
"""

from .errors import ReadmeGeneratorError, ScanError, AnalysisError

from .directory_scanner import (
    FileNode,
    DirectoryNode,
    scan_directory,
    format_directory_structure
)

from .project_analyzer import (
    README_TEMPLATE,
    MARKER_TABLE,
    marker_table,
    ProjectMetadata,
    analyze_project,
    build_analysis,
    detect_technologies
)

from .readme_renderer import generate_readme

__all__ = [
    'ReadmeGeneratorError',
    'ScanError',
    'AnalysisError',
    'FileNode',
    'DirectoryNode',
    'scan_directory',
    'format_directory_structure',
    'README_TEMPLATE',
    'MARKER_TABLE',
    'marker_table',
    'ProjectMetadata',
    'analyze_project',
    'build_analysis',
    'detect_technologies',
    'generate_readme'
]
