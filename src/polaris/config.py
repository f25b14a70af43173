"""
Configuration & Path Management
===============================
Where the explorer finds its bundled role and page data.

Why is this file needed?
------------------------
1. One place for paths: Views and sources never build asset paths themselves.
2. Frozen builds: Under PyInstaller the assets are unpacked next to the
   interpreter (sys._MEIPASS), not next to the source tree.
3. Overrides: `POLARIS_ROLES_FILE` / `POLARIS_PAGES_FILE` point the default
   data sources at other JSON files without touching the command line.

Exports:
    ASSETS_PATH (str): Directory holding the bundled JSON data.
    DEFAULT_ROLES_PATH (str): Role batch used when `--roles` is not given.
    DEFAULT_PAGES_PATH (str): Detail pages used when `--pages` is not given.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ROLES_ENV_VAR = "POLARIS_ROLES_FILE"
PAGES_ENV_VAR = "POLARIS_PAGES_FILE"


def get_resource_path(relative_path: str) -> str:
    """Absolute path of a bundled resource, in a source checkout or a frozen build."""
    frozen_root: Optional[str] = getattr(sys, '_MEIPASS', None)
    if frozen_root is not None:
        return os.path.join(frozen_root, relative_path)

    # src/polaris/config.py -> repository root
    project_root: Path = Path(__file__).resolve().parents[2]
    return str(project_root / relative_path)


def data_file(env_var: str, bundled_name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Path of a JSON data file: the environment override if set, else the bundled copy.

    An override that does not exist is still returned; the data source reports it
    when the file is read.
    """
    env = os.environ if environ is None else environ
    override = env.get(env_var, "").strip()
    if override:
        logger.debug(f"{env_var} overrides bundled {bundled_name}: {override}")
        return os.path.abspath(os.path.expanduser(override))
    return os.path.join(ASSETS_PATH, bundled_name)


ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_ROLES_PATH: str = data_file(ROLES_ENV_VAR, "roles_default.json")
DEFAULT_PAGES_PATH: str = data_file(PAGES_ENV_VAR, "pages_default.json")

if not os.path.isdir(ASSETS_PATH):
    logger.warning(f"Bundled data directory is missing: {ASSETS_PATH}")
