"""
README Renderer

Turns ProjectMetadata into a Markdown README. Sections are emitted in a
fixed order and only when their data is present; Installation and the
footer are always emitted.
"""

import json
from typing import Any, List, Optional

from .project_analyzer import ProjectMetadata

FOOTER = "*Generated with ❤️ by README Generator MCP Server*"
INSTALL_FALLBACK = "Clone the repository and follow the setup instructions."

# (technology, badge label, color)
TECHNOLOGY_BADGES = (
    ("Node.js", "node.js", "brightgreen"),
    ("TypeScript", "typescript", "blue"),
    ("Python", "python", "yellow"),
    ("Rust", "rust", "orange"),
    ("Go", "go", "00ADD8"),
)

# First detected technology wins
INSTALL_COMMANDS = (
    ("Node.js", "npm install"),
    ("Python", "pip install -r requirements.txt"),
    ("Rust", "cargo build"),
    ("Go", "go mod download"),
)


def _shield_text(value: str) -> str:
    """Escape a value for a shields.io static badge path segment."""
    return str(value).replace("-", "--").replace("_", "__").replace(" ", "%20")


def _badges(metadata: ProjectMetadata) -> List[str]:
    badges = []
    if metadata.version:
        badges.append(
            f"![Version](https://img.shields.io/badge/version-{_shield_text(metadata.version)}-blue.svg)"
        )
    if metadata.license:
        badges.append(
            f"![License](https://img.shields.io/badge/license-{_shield_text(metadata.license)}-green.svg)"
        )
    for tech, label, color in TECHNOLOGY_BADGES:
        if tech in metadata.detected_technologies:
            badges.append(f"![{tech}](https://img.shields.io/badge/{label}-✓-{color}.svg)")
    return badges


def install_command(technologies: List[str]) -> Optional[str]:
    """Package manager command for the first matching technology, if any."""
    for tech, command in INSTALL_COMMANDS:
        if tech in technologies:
            return command
    return None


def _format_author(author: Any) -> str:
    if isinstance(author, str):
        return author
    return json.dumps(author, ensure_ascii=False, separators=(",", ":"))


def _repository_url(repository: Any) -> Optional[str]:
    if isinstance(repository, str):
        return repository
    if isinstance(repository, dict):
        return repository.get("url") or None
    return None


def _has_structure(metadata: ProjectMetadata) -> bool:
    # An empty root directory has nothing to show
    if metadata.directory_structure is not None:
        return bool(metadata.directory_structure.children)
    return bool(metadata.directory_structure_formatted)


def generate_readme(metadata: ProjectMetadata) -> str:
    """
    Render a README for the analyzed project.

    Args:
        metadata: Result of analyze_project()

    Returns:
        Markdown text ending with a newline
    """
    lines = []

    # Title
    lines.append(f"# {metadata.project_name}")
    lines.append("")

    # Badges
    badges = _badges(metadata)
    if badges:
        lines.append(" ".join(badges))
        lines.append("")

    # Description
    if metadata.description:
        lines.append("## 📝 Description")
        lines.append("")
        lines.append(metadata.description)
        lines.append("")

    # Technologies
    if metadata.detected_technologies:
        lines.append("## 🛠️ Technologies Used")
        lines.append("")
        for tech in metadata.detected_technologies:
            lines.append(f"- {tech}")
        lines.append("")

    # Installation
    lines.append("## 📦 Installation")
    lines.append("")
    command = install_command(metadata.detected_technologies)
    if command:
        lines.append("```bash")
        lines.append(command)
        lines.append("```")
    else:
        lines.append(INSTALL_FALLBACK)
    lines.append("")

    # Usage
    if metadata.scripts:
        lines.append("## 🚀 Usage")
        lines.append("")
        lines.append("Available scripts:")
        lines.append("")
        for name, script in metadata.scripts.items():
            lines.append("```bash")
            lines.append(f"npm run {name}")
            lines.append("```")
            lines.append(script)
            lines.append("")

    # Project structure
    if _has_structure(metadata):
        lines.append("## 📁 Project Structure")
        lines.append("")
        lines.append("```")
        lines.append(metadata.directory_structure_formatted.rstrip("\n"))
        lines.append("```")
        lines.append("")

    if metadata.dependencies:
        lines.append("## 📚 Dependencies")
        lines.append("")
        for dep in metadata.dependencies:
            lines.append(f"- {dep}")
        lines.append("")

    if metadata.dev_dependencies:
        lines.append("## 🔧 Dev Dependencies")
        lines.append("")
        for dep in metadata.dev_dependencies:
            lines.append(f"- {dep}")
        lines.append("")

    if metadata.license:
        lines.append("## 📄 License")
        lines.append("")
        lines.append(f"This project is licensed under the {metadata.license} License.")
        lines.append("")

    if metadata.author:
        lines.append("## 👤 Author")
        lines.append("")
        lines.append(_format_author(metadata.author))
        lines.append("")

    # Links
    repo_url = _repository_url(metadata.repository)
    if metadata.homepage or repo_url:
        lines.append("## 🔗 Links")
        lines.append("")
        if metadata.homepage:
            lines.append(f"- [Homepage]({metadata.homepage})")
        if repo_url:
            lines.append(f"- [Repository]({repo_url})")
        lines.append("")

    # Footer
    lines.append("---")
    lines.append("")
    lines.append(FOOTER)

    return "\n".join(lines) + "\n"
