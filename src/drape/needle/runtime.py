import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from .pointer import SemanticPointer

log = logging.getLogger(__name__)

ASSETS_ROOT = Path(__file__).resolve().parent.parent / "common" / "assets"


def find_project_root(start_dir: Optional[Path] = None) -> Path:
    """
    Walks upwards looking for pyproject.toml, then .git. Falls back to the
    starting directory.
    """
    start = (start_dir or Path.cwd()).resolve()
    current_dir = start
    while current_dir.parent != current_dir:
        if (current_dir / "pyproject.toml").is_file():
            return current_dir
        if (current_dir / ".git").is_dir():
            return current_dir
        current_dir = current_dir.parent
    return start


def load_catalog_directory(directory: Path) -> Dict[str, str]:
    registry: Dict[str, str] = {}
    if not directory.is_dir():
        return registry

    for path in sorted(directory.rglob("*.json")):
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("Skipping unreadable message catalog %s: %s", path, e)
            continue
        # Keys are full dotted ids at the top level of each file.
        for key, value in content.items():
            registry[key] = str(value)
    return registry


class Needle:
    """
    Resolves semantic pointers to message templates.

    Catalogs are loaded lazily per language. For each root, the packaged
    ``needle/<lang>`` directory is read first and the project override
    directory ``.drape/needle/<lang>`` second, so later entries win.
    """

    def __init__(self, roots: Optional[List[Path]] = None, default_lang: str = "en"):
        self.default_lang = default_lang
        self.roots: List[Path] = list(roots) if roots else [ASSETS_ROOT, find_project_root()]
        self._registry: Dict[str, Dict[str, str]] = {}
        self._loaded_langs: Set[str] = set()

    def add_root(self, path: Path) -> None:
        """Adds a root with the highest precedence."""
        if path not in self.roots:
            self.roots.append(path)
            self._loaded_langs.clear()
            self._registry.clear()

    def _ensure_lang_loaded(self, lang: str) -> None:
        if lang in self._loaded_langs:
            return

        merged: Dict[str, str] = {}
        for root in self.roots:
            merged.update(load_catalog_directory(root / "needle" / lang))
            merged.update(load_catalog_directory(root / ".drape" / "needle" / lang))

        self._registry[lang] = merged
        self._loaded_langs.add(lang)

    def get(self, pointer: Union[SemanticPointer, str], lang: Optional[str] = None) -> str:
        """
        Lookup order: target language, default language, then the key itself.
        """
        key = str(pointer)
        target_lang = lang or os.getenv("DRAPE_LANG", self.default_lang)

        self._ensure_lang_loaded(target_lang)
        value = self._registry[target_lang].get(key)
        if value is not None:
            return value

        if target_lang != self.default_lang:
            self._ensure_lang_loaded(self.default_lang)
            value = self._registry[self.default_lang].get(key)
            if value is not None:
                return value

        return key


needle = Needle()
