import logging
import tomllib
from pathlib import Path
from typing import Any

from frscript_linter.models import LinterConfig, Severity

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".frscript-lint.toml"

_UNUSED_SEVERITIES = {
    "error": Severity.ERROR,
    "warning": Severity.WARNING,
    "hint": Severity.HINT,
}


class LintConfig:
    """Handles loading and validation of .frscript-lint.toml configuration.

    Settings live at the top level of ``.frscript-lint.toml`` or under
    ``[tool.frscript-lint]`` in ``pyproject.toml``.
    """

    def __init__(self, config_path: Path | None = None):
        self.select: list[str] = ["all"]
        self.ignore: list[str] = []
        self.unused_variables: str = "hint"
        self.metrics_enabled: bool = True
        self.max_complexity: int = 10
        self.max_function_length: int = 50
        self.max_nesting_depth: int = 4
        self.include_examples: bool = True

        if config_path is None:
            config_path = _discover(Path.cwd())
        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            # Fallback to defaults if parsing fails
            logger.warning("ignoring config %s: %s", path, e)
            return

        if "tool" in data:
            data = data["tool"].get("frscript-lint", {})

        self.select = data.get("select", self.select)
        self.ignore = data.get("ignore", self.ignore)

        unused = str(data.get("unused-variables", self.unused_variables)).lower()
        if unused in _UNUSED_SEVERITIES:
            self.unused_variables = unused
        else:
            logger.warning("unknown unused-variables severity %r, keeping %r", unused, self.unused_variables)

        metrics = data.get("metrics", {})
        self.metrics_enabled = bool(metrics.get("enabled", self.metrics_enabled))
        try:
            self.max_complexity = int(metrics.get("max-complexity", self.max_complexity))
            self.max_function_length = int(metrics.get("max-function-length", self.max_function_length))
            self.max_nesting_depth = int(metrics.get("max-nesting-depth", self.max_nesting_depth))
        except (TypeError, ValueError) as e:
            logger.warning("ignoring invalid metrics threshold in %s: %s", path, e)

        documentation = data.get("documentation", {})
        self.include_examples = bool(documentation.get("include-examples", self.include_examples))

    def to_linter_config(self) -> LinterConfig:
        return LinterConfig(
            select=list(self.select),
            ignore=list(self.ignore),
            unused_variable_severity=_UNUSED_SEVERITIES[self.unused_variables],
            metrics_enabled=self.metrics_enabled,
            max_complexity=self.max_complexity,
            max_function_length=self.max_function_length,
            max_nesting_depth=self.max_nesting_depth,
        )

    def apply_to_registry(self, registry: Any) -> list[Any]:
        """Return list of enabled rules based on this config"""
        return registry.get_enabled_rules(ignore=self.ignore)


def _discover(directory: Path) -> Path | None:
    candidate = directory / DEFAULT_CONFIG_NAME
    if candidate.exists():
        return candidate
    pyproject = directory / "pyproject.toml"
    if pyproject.exists():
        return pyproject
    return None
