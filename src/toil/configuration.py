# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "toil"
SNAPSHOT_FILE_NAME = "time-tracker-storage.yaml"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_SNAPSHOT_PATH: Path = DATA_PATH / SNAPSHOT_FILE_NAME


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    work_target_minutes: int
    break_target_minutes: int
    unassigned_threshold_seconds: int
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "work_target_minutes": 25,
        "break_target_minutes": 5,
        "unassigned_threshold_seconds": 60,
        "log_level": "WARNING",
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the
    snapshot repository is first read.
    """
    global DATA_PATH, DATA_SNAPSHOT_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_SNAPSHOT_PATH = DATA_PATH / SNAPSHOT_FILE_NAME
