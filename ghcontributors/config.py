"""Config files and GitHub tokens."""

import json
import os
import subprocess

from .errors import ConfigurationError

TOKEN_ENV_VAR = 'GITHUB_TOKEN'


def _entries(config, key, required):
    entries = config.get(key) or []
    if not isinstance(entries, list):
        raise ConfigurationError(f"'{key}' must be a list in the config file")
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigurationError(f"{key}[{index}] must be an object")
        missing = [field for field in required if not entry.get(field)]
        if missing:
            raise ConfigurationError(f"{key}[{index}] is missing {', '.join(missing)}")
    return entries


def validate_config(config):
    """
    Normalize a parsed config object.

    Expected shape::

        {"token": "...",
         "repos": [{"login": "owner", "repo": "name", "before": "...", "after": "..."}],
         "orgs": [{"login": "org", "before": "...", "after": "..."}]}

    ``token``, ``before`` and ``after`` are optional, so are both lists.
    """
    if not isinstance(config, dict):
        raise ConfigurationError("Config file must contain a JSON object")
    return {
        'token': config.get('token'),
        'repos': _entries(config, 'repos', ('login', 'repo')),
        'orgs': _entries(config, 'orgs', ('login',)),
    }


def load_config(path):
    """Read and validate a JSON config file"""
    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Could not read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Config file {path} is not valid JSON: {e}") from e
    return validate_config(config)


def resolve_token(config_token=None, token=None):
    """The config file's token wins over the caller's, one of them is required"""
    resolved = config_token or token
    if not resolved:
        raise ConfigurationError('No token specified in config or arguments. Aborting.')
    return resolved


def token_from_environment():
    return os.environ.get(TOKEN_ENV_VAR) or None


def generate_github_token():
    """Ask the GitHub CLI for the token of the logged in user, None if unavailable"""
    try:
        token = subprocess.check_output(
            ['gh', 'auth', 'token'],
            universal_newlines=True,
            stderr=subprocess.DEVNULL
        ).strip()
    except (OSError, subprocess.CalledProcessError):
        return None
    return token or None
