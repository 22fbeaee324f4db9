"""
Tool operations for the README Generator MCP server.

Two entry points, independent of the transport:
- list_operations(): name, description and input schema of each tool
- dispatch(): run a tool by name; failures come back as "Error: ..." text
  with is_error set, never as exceptions
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ..config import DEFAULT_CONFIG, DEFAULT_MAX_DEPTH, GeneratorConfig
from ..core.directory_scanner import scan_directory
from ..core.project_analyzer import analyze_project, build_analysis
from ..core.readme_renderer import generate_readme

logger = logging.getLogger(__name__)


@dataclass
class ToolResult:
    """Text payload of a tool call plus its error flag."""
    text: str
    is_error: bool = False

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"content": [{"type": "text", "text": self.text}]}
        if self.is_error:
            result["isError"] = True
        return result


@dataclass(frozen=True)
class Operation:
    name: str
    description: str
    input_schema: Dict[str, Any]
    handler: Callable[[Dict[str, Any], GeneratorConfig], str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


def _require(arguments: Dict[str, Any], key: str) -> Any:
    value = arguments.get(key)
    if value is None or value == "":
        raise ValueError(f"Missing required argument: {key}")
    return value


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def _read_project_structure(arguments: Dict[str, Any], config: GeneratorConfig) -> str:
    path = _require(arguments, "path")
    max_depth = arguments.get("maxDepth")
    max_depth = config.max_depth if max_depth is None else int(max_depth)
    structure = scan_directory(path, max_depth, config.ignore_patterns)
    return json.dumps(structure.to_dict(), indent=2, ensure_ascii=False)


def _read_file(arguments: Dict[str, Any], config: GeneratorConfig) -> str:
    path = _require(arguments, "path")
    with open(path, 'r', encoding=config.encoding) as f:
        return f.read()


def _analyze_project(arguments: Dict[str, Any], config: GeneratorConfig) -> str:
    project_path = _require(arguments, "projectPath")
    analysis = build_analysis(analyze_project(project_path, config))
    return json.dumps(analysis, indent=2, ensure_ascii=False)


def _generate_readme(arguments: Dict[str, Any], config: GeneratorConfig) -> str:
    project_path = _require(arguments, "projectPath")
    return generate_readme(analyze_project(project_path, config))


# ---------------------------------------------------------------------------
# Operation table
# ---------------------------------------------------------------------------

def max_depth_schema(max_depth: int) -> Dict[str, Any]:
    """Schema of the maxDepth argument, advertising the configured default."""
    return {
        "type": "integer",
        "description": f"Maximum depth to traverse (default: {max_depth})",
        "default": max_depth,
    }


_PROJECT_PATH_SCHEMA = {
    "type": "object",
    "properties": {
        "projectPath": {
            "type": "string",
            "description": "The absolute path to the project directory",
        },
    },
    "required": ["projectPath"],
}

OPERATIONS: Dict[str, Operation] = {
    op.name: op for op in (
        Operation(
            name="read_project_structure",
            description=(
                "Read the directory structure of a project. "
                "Returns a tree-like structure of files and folders."
            ),
            input_schema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "The absolute path to the project directory",
                    },
                    "maxDepth": max_depth_schema(DEFAULT_MAX_DEPTH),
                },
                "required": ["path"],
            },
            handler=_read_project_structure,
        ),
        Operation(
            name="read_file",
            description="Read the contents of a file",
            input_schema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "The absolute path to the file to read",
                    },
                },
                "required": ["path"],
            },
            handler=_read_file,
        ),
        Operation(
            name="analyze_project",
            description=(
                "Analyze a project directory and return structured data about the project "
                "along with a README template. "
                "Returns: (1) A template structure with recommended README sections "
                "(some required, some optional), "
                "and (2) Detailed project analysis including detected technologies, "
                "package.json data, directory structure, scripts, dependencies, "
                "and configuration files. "
                "The LLM should use this information to construct a comprehensive README "
                "following the template structure as a guide, "
                "adapting sections based on what's relevant for the specific project."
            ),
            input_schema=_PROJECT_PATH_SCHEMA,
            handler=_analyze_project,
        ),
        Operation(
            name="generate_readme",
            description=(
                "Generate a well-formatted, visually appealing README.md file for a project. "
                "This tool analyzes the project directory and automatically creates "
                "a comprehensive README with: "
                "badges, emojis, proper sections (description, installation, usage, "
                "project structure, dependencies, etc.), "
                "code blocks, and professional formatting. "
                "The generated README is ready to use and follows best practices."
            ),
            input_schema=_PROJECT_PATH_SCHEMA,
            handler=_generate_readme,
        ),
    )
}


def list_operations(config: GeneratorConfig = DEFAULT_CONFIG) -> List[Dict[str, Any]]:
    """Describe every tool: name, description, inputSchema."""
    described = []
    for op in OPERATIONS.values():
        entry = op.to_dict()
        properties = entry["inputSchema"]["properties"]
        if "maxDepth" in properties:
            entry["inputSchema"] = dict(
                entry["inputSchema"],
                properties=dict(properties, maxDepth=max_depth_schema(config.max_depth)),
            )
        described.append(entry)
    return described


def dispatch(
    name: str,
    arguments: Optional[Dict[str, Any]] = None,
    config: GeneratorConfig = DEFAULT_CONFIG,
) -> ToolResult:
    """
    Run a tool by name.

    Args:
        name: Tool name from list_operations()
        arguments: Tool arguments (camelCase keys, as in the input schema)
        config: Scan/analysis settings

    Returns:
        ToolResult with the payload, or "Error: <message>" and is_error=True
    """
    arguments = arguments or {}
    try:
        operation = OPERATIONS.get(name)
        if operation is None:
            raise ValueError(f"Unknown tool: {name}")
        logger.debug("Calling %s with %s", name, arguments)
        return ToolResult(operation.handler(arguments, config))
    except Exception as e:
        logger.warning("Tool %s failed: %s", name, e)
        return ToolResult(f"Error: {e}", is_error=True)
