"""
Theme and Export Config Resolution

Loads the renderer presets (themes.yaml) and the PDF page geometry
(export.yaml). Both files ship with the package and can be replaced through
environment variables.

Examples:
    >>> themes = load_themes()
    >>> themes["plain"]["headings"]["skills"]
    'SKILLS'
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
_PACKAGE_DIR = Path(__file__).parent
THEMES_PATH = Path(os.getenv("VITAE_THEMES_PATH", _PACKAGE_DIR / "themes.yaml"))
EXPORT_CONFIG_PATH = Path(os.getenv("VITAE_EXPORT_CONFIG_PATH", _PACKAGE_DIR / "export.yaml"))

REQUIRED_THEME_KEYS = ("template", "headings", "colors")


def load_themes(config_path: Path = None) -> Dict[str, Dict[str, Any]]:
    """
    Load themes.yaml into a plain dict keyed by theme name.

    Args:
        config_path: Optional path to config file (defaults to THEMES_PATH)

    Returns:
        Dict mapping theme name to its preset

    Raises:
        ValueError: If a theme lacks a required key
    """
    if config_path is None:
        config_path = THEMES_PATH

    themes = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    for name, preset in themes.items():
        missing = [key for key in REQUIRED_THEME_KEYS if key not in preset]
        if missing:
            raise ValueError(f"Theme '{name}' in {config_path} is missing keys: {missing}")

    return themes


def get_theme(name: str, config_path: Path = None) -> Dict[str, Any]:
    """
    Get one theme preset by name.

    Raises:
        ValueError: If the theme is not defined
    """
    themes = load_themes(config_path)
    if name not in themes:
        raise ValueError(f"Theme '{name}' not found. Available themes: {list(themes)}")
    return themes[name]


def load_export_config(config_path: Path = None) -> Dict[str, Any]:
    """
    Load the PDF export settings (page size, orientation, margin, filename defaults).

    Args:
        config_path: Optional path to config file (defaults to EXPORT_CONFIG_PATH)
    """
    if config_path is None:
        config_path = EXPORT_CONFIG_PATH

    return OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
