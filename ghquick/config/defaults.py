# ghquick Default Configuration
# Default configuration as Python dict and YAML generator

from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "identity": {
        "account": "",
        "user_name": "",
    },
    "remote": {
        "name": "origin",
        "branch": "main",
        "url_template": "https://github.com/{account}/{repo}.git",
    },
    "git": {
        "executable": "git",
        "timeout": None,
    },
    "output": {
        "debug": False,
        "colored": True,
    },
}


def generate_default_config(account: str = "") -> str:
    """
    Generate default configuration as YAML string.

    Args:
        account: Account name to pre-fill.

    Returns:
        YAML-formatted configuration string.
    """
    data = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    data["identity"]["account"] = account

    header = """# ghquick Configuration
# Quick commit-and-push settings
#
# GITHUB_USERNAME overrides identity.account when set.

"""
    return header + yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
