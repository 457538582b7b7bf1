"""
MegaStats Configuration
=======================
Loads analysis settings from an INI file (config/config.ini by default).

The file location can be overridden with the MEGASTATS_CONFIG environment
variable. Missing files, sections or keys fall back to defaults.
"""

import configparser
import os
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from megastats.aggregator import DEFAULT_TOP_SIGNATURES
from megastats.hot_cold import DEFAULT_COLD_LAG, DEFAULT_HOT_THRESHOLD, DEFAULT_WINDOW


CONFIG_ENV_VAR = "MEGASTATS_CONFIG"
DEFAULT_CONFIG_PATH = os.path.join("config", "config.ini")
DEFAULT_DRAWS_FILE = os.path.join("data", "mega_sena_data.json")


@dataclass(frozen=True)
class AnalyticsSettings:
    """Runtime settings for the analysis engine"""
    draws_file: str = DEFAULT_DRAWS_FILE
    window: int = DEFAULT_WINDOW
    hot_threshold: int = DEFAULT_HOT_THRESHOLD
    cold_lag: int = DEFAULT_COLD_LAG
    top_signatures: int = DEFAULT_TOP_SIGNATURES


def _candidate_paths(config_path: Optional[str]):
    if config_path:
        return [config_path]
    paths = []
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        paths.append(env_path)
    paths.append(os.path.join(os.path.dirname(__file__), '..', 'config', 'config.ini'))
    paths.append(os.path.join(os.getcwd(), DEFAULT_CONFIG_PATH))
    return paths


def load_settings(config_path: Optional[str] = None) -> AnalyticsSettings:
    """
    Load settings from the first config file found.

    Args:
        config_path: Explicit path; when omitted MEGASTATS_CONFIG and the
            default locations are tried in order

    Returns:
        AnalyticsSettings (defaults for anything not configured)
    """
    config = configparser.ConfigParser()
    paths_to_try = _candidate_paths(config_path)

    config_read = None
    for path in paths_to_try:
        if os.path.exists(path):
            config.read(path)
            config_read = path
            break

    if config_read is None:
        logger.warning(f"Config file not found. Tried paths: {paths_to_try}. Using defaults.")
        return AnalyticsSettings()

    try:
        draws_file = config.get("data", "draws_file", fallback=DEFAULT_DRAWS_FILE)
        if not os.path.isabs(draws_file):
            # relative paths resolve against the project root (parent of config/)
            project_root = os.path.dirname(os.path.dirname(os.path.abspath(config_read)))
            draws_file = os.path.join(project_root, draws_file)

        settings = AnalyticsSettings(
            draws_file=draws_file,
            window=config.getint("hot_cold", "window", fallback=DEFAULT_WINDOW),
            hot_threshold=config.getint("hot_cold", "hot_threshold", fallback=DEFAULT_HOT_THRESHOLD),
            cold_lag=config.getint("hot_cold", "cold_lag", fallback=DEFAULT_COLD_LAG),
            top_signatures=config.getint("aggregation", "top_signatures", fallback=DEFAULT_TOP_SIGNATURES),
        )
    except ValueError as e:
        logger.error(f"Invalid value in {config_read}: {e}")
        logger.warning("Using default analytics settings")
        return AnalyticsSettings()

    logger.info(f"Configuration loaded from: {config_read}")
    return settings
