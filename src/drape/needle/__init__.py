from .pointer import L, SemanticPointer
from .runtime import Needle, find_project_root, needle

__all__ = ["L", "SemanticPointer", "Needle", "needle", "find_project_root"]
