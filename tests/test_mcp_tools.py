"""
MCP Tool Tests

Tests the transport-independent operation table (list_operations/dispatch)
and the FastMCP registration through an in-process client.

Run with: pytest tests/test_mcp_tools.py -v
"""

import asyncio
import json

import pytest
from fastmcp import Client

from readme_generator.config import GeneratorConfig
from readme_generator.mcp_server.operations import (
    OPERATIONS,
    ToolResult,
    dispatch,
    list_operations,
)
from readme_generator.mcp_server.readme_mcp_server import (
    _parse_args,
    build_config,
    create_server,
)


class TestListOperations:

    def test_four_operations(self):
        names = [op["name"] for op in list_operations()]
        assert names == ["read_project_structure", "read_file", "analyze_project", "generate_readme"]

    def test_required_fields(self):
        required = {op["name"]: op["inputSchema"]["required"] for op in list_operations()}
        assert required == {
            "read_project_structure": ["path"],
            "read_file": ["path"],
            "analyze_project": ["projectPath"],
            "generate_readme": ["projectPath"],
        }

    def test_max_depth_default(self):
        schema = OPERATIONS["read_project_structure"].input_schema
        assert schema["properties"]["maxDepth"] == {
            "type": "integer",
            "description": "Maximum depth to traverse (default: 3)",
            "default": 3,
        }

    def test_max_depth_default_follows_config(self):
        described = {op["name"]: op for op in list_operations(GeneratorConfig(max_depth=5))}

        max_depth = described["read_project_structure"]["inputSchema"]["properties"]["maxDepth"]
        assert max_depth["default"] == 5
        assert OPERATIONS["read_project_structure"].input_schema["properties"]["maxDepth"]["default"] == 3


class TestDispatch:
    """Failures always come back as error-flagged text."""

    def test_read_file(self, make_project):
        root = make_project({"notes.txt": "hello\nworld\n"})

        result = dispatch("read_file", {"path": str(root / "notes.txt")})

        assert result == ToolResult("hello\nworld\n")

    def test_read_file_missing(self, tmp_path):
        result = dispatch("read_file", {"path": str(tmp_path / "missing.txt")})

        assert result.is_error
        assert result.text.startswith("Error: ")

    def test_read_project_structure(self, make_project):
        root = make_project({"a.txt": "", "sub/b.txt": ""})

        result = dispatch("read_project_structure", {"path": str(root), "maxDepth": 1})

        assert not result.is_error
        tree = json.loads(result.text)
        assert tree["name"] == "demo-project"
        assert [c["name"] for c in tree["children"]] == ["a.txt"]

    def test_read_project_structure_uses_config_depth(self, make_project):
        root = make_project({"a/b/c.txt": ""})

        result = dispatch("read_project_structure", {"path": str(root)}, GeneratorConfig(max_depth=0))

        assert json.loads(result.text)["children"] == []

    def test_read_project_structure_missing(self, tmp_path):
        result = dispatch("read_project_structure", {"path": str(tmp_path / "x")})

        assert result.is_error
        assert result.text.startswith("Error: Failed to read directory:")

    def test_analyze_project(self, node_project):
        result = dispatch("analyze_project", {"projectPath": str(node_project)})

        payload = json.loads(result.text)
        assert payload["projectData"]["projectName"] == "foo"
        assert payload["template"]["sections"][0]["name"] == "Project Title"

    def test_analyze_project_missing(self, tmp_path):
        result = dispatch("analyze_project", {"projectPath": str(tmp_path / "x")})

        assert result.is_error
        assert result.text.startswith("Error: Failed to analyze project:")

    def test_generate_readme(self, node_project):
        result = dispatch("generate_readme", {"projectPath": str(node_project)})

        assert not result.is_error
        assert result.text.startswith("# foo\n")

    @pytest.mark.parametrize("description, expected", [(42, "42"), (["a"], "a")])
    def test_generate_readme_non_string_description(self, make_project, description, expected):
        root = make_project({"package.json": {"name": "foo", "description": description}})

        result = dispatch("generate_readme", {"projectPath": str(root)})

        assert not result.is_error
        assert f"## 📝 Description\n\n{expected}\n" in result.text

    def test_missing_argument(self):
        result = dispatch("generate_readme", {})

        assert result == ToolResult("Error: Missing required argument: projectPath", is_error=True)

    def test_unknown_tool(self):
        result = dispatch("delete_everything", {"path": "/"})

        assert result == ToolResult("Error: Unknown tool: delete_everything", is_error=True)

    def test_result_to_dict(self):
        assert ToolResult("x", is_error=True).to_dict() == {
            "content": [{"type": "text", "text": "x"}],
            "isError": True,
        }
        assert "isError" not in ToolResult("x").to_dict()


async def _call_tool(server, name, arguments):
    async with Client(server) as client:
        return await client.call_tool(name, arguments, raise_on_error=False)


async def _list_tools(server):
    async with Client(server) as client:
        return await client.list_tools()


class TestFastMCPServer:
    """The registered tools, called through the MCP protocol in-process."""

    def test_tools_registered(self):
        tools = asyncio.run(_list_tools(create_server(GeneratorConfig())))

        by_name = {tool.name: tool for tool in tools}
        assert set(by_name) == set(OPERATIONS)
        assert by_name["read_file"].description == OPERATIONS["read_file"].description
        assert by_name["generate_readme"].inputSchema["required"] == ["projectPath"]

    @pytest.mark.parametrize("max_depth", [3, 5])
    def test_max_depth_schema_matches_operation_table(self, max_depth):
        config = GeneratorConfig(max_depth=max_depth)
        tools = asyncio.run(_list_tools(create_server(config)))

        published = {tool.name: tool for tool in tools}["read_project_structure"]
        published = published.inputSchema["properties"]["maxDepth"]
        described = {op["name"]: op for op in list_operations(config)}["read_project_structure"]
        described = described["inputSchema"]["properties"]["maxDepth"]

        assert published["type"] == described["type"] == "integer"
        assert published["default"] == described["default"] == max_depth
        assert published["description"] == described["description"]

    def test_generate_readme_call(self, node_project):
        server = create_server(GeneratorConfig())

        result = asyncio.run(_call_tool(server, "generate_readme", {"projectPath": str(node_project)}))

        assert not result.is_error
        assert result.content[0].text.startswith("# foo\n")

    def test_error_call_sets_is_error(self, tmp_path):
        server = create_server(GeneratorConfig())

        result = asyncio.run(_call_tool(server, "read_file", {"path": str(tmp_path / "missing")}))

        assert result.is_error
        assert result.content[0].text.startswith("Error: ")


class TestCli:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("README_GENERATOR_MAX_DEPTH", raising=False)
        monkeypatch.delenv("README_GENERATOR_IGNORE", raising=False)

        config = build_config(_parse_args([]))

        assert config == GeneratorConfig()

    def test_flags_override_environment(self, monkeypatch):
        monkeypatch.setenv("README_GENERATOR_MAX_DEPTH", "7")

        config = build_config(_parse_args(["--max-depth", "2", "--ignore", "vendor", "--ignore", "tmp"]))

        assert config.max_depth == 2
        assert config.ignore_patterns == ("vendor", "tmp")

    def test_environment_used_without_flags(self, monkeypatch):
        monkeypatch.setenv("README_GENERATOR_MAX_DEPTH", "5")

        assert build_config(_parse_args([])).max_depth == 5

    def test_bad_max_depth_flag(self):
        with pytest.raises(SystemExit):
            _parse_args(["--max-depth", "deep"])
