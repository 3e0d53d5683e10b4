"""Default configurations for Style Rank."""

# Configuration file looked up in the working directory when --config is not given
DEFAULT_CONFIG_FILENAME = ".style-rank.yaml"

DEFAULT_LOCALE = "en"

# Language mappings for parsers (tree-sitter grammar names)
LANGUAGE_MAPPINGS: dict[str, str] = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

# Directories never descended into when analyzing a directory
DEFAULT_IGNORE_PATTERNS = {
    ".git",
    "node_modules",
    "dist",
    "build",
    "coverage",
    ".next",
    ".venv",
    "__pycache__",
}

# Watch mode
DEFAULT_DEBOUNCE_SECONDS = 0.5
