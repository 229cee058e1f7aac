import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib


@dataclass
class DrapeConfig:
    # Prefix of the layout dialect's attributes, e.g. `layout:title-pattern`.
    dialect_prefix: str = "layout"
    # Prefix of the standard dialect's attributes, e.g. `th:text`.
    standard_prefix: str = "th"
    escape_titles: bool = True

    @property
    def title_pattern_attribute(self) -> str:
        return f"{self.dialect_prefix}:title-pattern"

    @property
    def text_attribute(self) -> str:
        return f"{self.standard_prefix}:text"


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while current_dir.parent != current_dir:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def load_config_from_path(search_path: Path) -> DrapeConfig:
    try:
        config_path = _find_pyproject_toml(search_path)
    except FileNotFoundError:
        return DrapeConfig()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    drape_data: Dict[str, Any] = data.get("tool", {}).get("drape", {})

    defaults = DrapeConfig()
    return DrapeConfig(
        dialect_prefix=drape_data.get("dialect_prefix", defaults.dialect_prefix),
        standard_prefix=drape_data.get("standard_prefix", defaults.standard_prefix),
        escape_titles=bool(drape_data.get("escape_titles", defaults.escape_titles)),
    )
