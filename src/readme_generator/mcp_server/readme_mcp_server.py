"""
MCP Server for the README Generator
Exposes tools that let an AI inspect a local project and generate its README.

Usage:
    Add to your MCP client config:
    {
        "mcpServers": {
            "readme-generator": {
                "command": "readme-generator-mcp",
                "args": ["--log-level", "INFO"]
            }
        }
    }
"""

import os
import sys
import argparse
import logging
from typing import Annotated, List, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from ..config import APP_NAME, ENV_LOG_LEVEL, GeneratorConfig
from ..logging_config import configure_logging
from .operations import OPERATIONS, dispatch, max_depth_schema

logger = logging.getLogger(__name__)

ProjectPath = Annotated[str, Field(description="The absolute path to the project directory")]


def _call(name: str, arguments: dict, config: GeneratorConfig) -> str:
    result = dispatch(name, arguments, config)
    if result.is_error:
        # ToolError text is passed through as-is with isError set
        raise ToolError(result.text)
    return result.text


def create_server(config: Optional[GeneratorConfig] = None) -> FastMCP:
    """
    Build the MCP server with all four tools registered.

    Args:
        config: Settings captured by every tool. Defaults to environment config.

    Returns:
        FastMCP instance, ready for run()
    """
    config = config or GeneratorConfig.from_env()
    mcp = FastMCP(APP_NAME)
    max_depth_description = max_depth_schema(config.max_depth)["description"]

    @mcp.tool(
        name="read_project_structure",
        description=OPERATIONS["read_project_structure"].description,
    )
    def read_project_structure(
        path: ProjectPath,
        maxDepth: Annotated[int, Field(description=max_depth_description)] = config.max_depth,
    ) -> str:
        return _call("read_project_structure", {"path": path, "maxDepth": maxDepth}, config)

    @mcp.tool(name="read_file", description=OPERATIONS["read_file"].description)
    def read_file(
        path: Annotated[str, Field(description="The absolute path to the file to read")],
    ) -> str:
        return _call("read_file", {"path": path}, config)

    @mcp.tool(name="analyze_project", description=OPERATIONS["analyze_project"].description)
    def analyze_project(projectPath: ProjectPath) -> str:
        return _call("analyze_project", {"projectPath": projectPath}, config)

    @mcp.tool(name="generate_readme", description=OPERATIONS["generate_readme"].description)
    def generate_readme(projectPath: ProjectPath) -> str:
        return _call("generate_readme", {"projectPath": projectPath}, config)

    return mcp


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="readme-generator-mcp",
        description="README Generator MCP server (stdio transport).",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Default directory depth for scans (overrides README_GENERATOR_MAX_DEPTH).",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Ignore substring; repeat to add more. Replaces the default list.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Log level for stderr output (overrides {ENV_LOG_LEVEL}).",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Environment config with CLI flags applied on top."""
    return GeneratorConfig.from_env().with_overrides(
        max_depth=args.max_depth,
        ignore_patterns=tuple(args.ignore) if args.ignore else None,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    configure_logging(args.log_level or os.environ.get(ENV_LOG_LEVEL))

    config = build_config(args)
    mcp = create_server(config)

    try:
        logger.info("README Generator MCP Server running on stdio")
        mcp.run()
    except Exception as e:
        logger.error("Fatal error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
