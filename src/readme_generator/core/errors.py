"""
Error types raised by the scanner and analyzer.
"""


class ReadmeGeneratorError(Exception):
    """Base class for README Generator failures."""
    pass


class ScanError(ReadmeGeneratorError):
    """Raised when a directory cannot be listed."""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read directory: {cause}")


class AnalysisError(ReadmeGeneratorError):
    """Raised when project analysis fails because its scan failed."""

    def __init__(self, project_path: str, cause: BaseException):
        self.project_path = project_path
        self.cause = cause
        super().__init__(f"Failed to analyze project: {cause}")
