from .config_loader import Settings, get_config_path, get_settings, load_settings, reload_settings

__all__ = ["Settings", "get_config_path", "get_settings", "load_settings", "reload_settings"]
