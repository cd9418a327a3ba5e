# ==========================================
# CONFIGURATION
# ==========================================
import json
import os

from pydantic import BaseModel, ValidationError

from ..errors import BundleConfigError
from ..expander import MAX_INCLUDE_DEPTH
from ..log import debug_log

CONFIG_PATHS = ["tubundle.json", os.path.join("~", ".tubundle", "config.json")]


class RunnerConfig(BaseModel):
    """Where and how bundled submissions are sent."""
    url: str = "https://onecompiler-apis.p.rapidapi.com/api/v1/run"
    host: str = "onecompiler-apis.p.rapidapi.com"
    timeout: float = 30
    version: str = "latest"
    max_include_depth: int = MAX_INCLUDE_DEPTH


def load_runner_config(paths=None):
    """
    Load runner configuration from the first config file that exists.

    Values in the file override the defaults. A file that cannot be read or
    is not JSON is ignored; a file with invalid values is an error.
    """
    data = {}
    source = None
    for p in paths or CONFIG_PATHS:
        p = os.path.expanduser(p)
        if not os.path.exists(p):
            continue
        try:
            with open(p, "r") as f:
                data = json.load(f)
            source = p
        except (OSError, json.JSONDecodeError) as e:
            debug_log(f"Ignoring config file {p}: {e}")
        break

    if not isinstance(data, dict):
        raise BundleConfigError(
            "Config file must contain a JSON object",
            file_name=source
        )
    try:
        return RunnerConfig(**data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise BundleConfigError(
            f"Invalid value for '{field}': {first['msg']}",
            file_name=source,
            suggestion="Fix or remove the entry to use the default"
        )
