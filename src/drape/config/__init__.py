from .loader import DrapeConfig, load_config_from_path

__all__ = ["DrapeConfig", "load_config_from_path"]
