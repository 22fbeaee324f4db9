"""
README Generator Configuration
Central configuration for the scanner, analyzer and MCP server.
"""

import os
import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------
VERSION = "1.0.0"
APP_NAME = "readme-generator-mcp-server"

# ---------------------------------------------------------------------------
# Scan defaults
# ---------------------------------------------------------------------------
DEFAULT_MAX_DEPTH = 3

DEFAULT_IGNORE_PATTERNS: Tuple[str, ...] = (
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    "coverage",
)

MANIFEST_FILENAME = "package.json"
DEFAULT_ENCODING = "utf-8"

# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------
ENV_MAX_DEPTH = "README_GENERATOR_MAX_DEPTH"
ENV_IGNORE = "README_GENERATOR_IGNORE"
ENV_LOG_LEVEL = "README_GENERATOR_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Settings shared by every tool invocation.

    Immutable: the server captures one instance at startup and passes it
    down to the scanner and analyzer on each call.
    """
    max_depth: int = DEFAULT_MAX_DEPTH
    ignore_patterns: Tuple[str, ...] = field(default=DEFAULT_IGNORE_PATTERNS)
    manifest_filename: str = MANIFEST_FILENAME
    encoding: str = DEFAULT_ENCODING

    def with_overrides(
        self,
        max_depth: Optional[int] = None,
        ignore_patterns: Optional[Tuple[str, ...]] = None,
    ) -> "GeneratorConfig":
        """Return a copy with the given fields replaced (None keeps current)."""
        changes = {}
        if max_depth is not None:
            changes["max_depth"] = max_depth
        if ignore_patterns is not None:
            changes["ignore_patterns"] = tuple(ignore_patterns)
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "GeneratorConfig":
        """
        Build config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            GeneratorConfig with defaults for absent or invalid values
        """
        environ = os.environ if environ is None else environ
        config = cls()

        raw_depth = environ.get(ENV_MAX_DEPTH, "").strip()
        if raw_depth:
            try:
                config = config.with_overrides(max_depth=int(raw_depth))
            except ValueError:
                logger.warning("Ignoring invalid %s=%r", ENV_MAX_DEPTH, raw_depth)

        raw_ignore = environ.get(ENV_IGNORE, "")
        patterns = tuple(p.strip() for p in raw_ignore.split(",") if p.strip())
        if patterns:
            config = config.with_overrides(ignore_patterns=patterns)

        return config


DEFAULT_CONFIG = GeneratorConfig()
