"""
README Generator MCP Server
Scans a local project, detects its stack, and renders a README.
"""

from .config import VERSION, GeneratorConfig
from .core.project_analyzer import ProjectMetadata, analyze_project
from .core.readme_renderer import generate_readme

__version__ = VERSION
__all__ = ["GeneratorConfig", "ProjectMetadata", "analyze_project", "generate_readme"]
