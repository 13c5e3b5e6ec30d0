"""Nested settings for npm-score, addressable by dotted paths."""

from __future__ import annotations
from typing import TextIO, List, Any
from pathlib import Path
from logging import error
from argparse import Namespace
from dotnest import DotNest
import yaml


class Config(dict):
    """A settings dictionary that can be filled from YAML and argv."""

    config_option_names: List[str] = ["-y", "--config"]

    def __init__(self, *args, **kwargs):
        """Create an empty (or pre-filled) set of settings."""
        self.dotnest = DotNest(self, allow_creation=True)
        super().__init__(*args, **kwargs)

    def deep_update(self, ref: dict, new_content: dict) -> None:
        """Merge new_content into ref, descending into nested dicts."""
        for key in new_content:
            if key in ref and isinstance(ref[key], dict):
                self.deep_update(ref[key], new_content[key])
            else:
                ref[key] = new_content[key]

    def load_stream(self, config_handle: TextIO) -> None:
        """Merge YAML settings read from a stream."""
        self.deep_update(self, yaml.safe_load(config_handle) or {})

    def load_file(self, config_file: str) -> None:
        """Merge YAML settings read from a file."""
        with Path(config_file).open() as config_handle:
            self.load_stream(config_handle)

    def load_namespace(self, namespace: Namespace) -> None:
        """Copy parsed command line values into the settings."""
        self.update(vars(namespace))

    def read_configfile_from_arguments(self, argv: List[str]) -> None:
        """Apply every '-y file.yml' or '-y key.path=value' found in argv.

        This runs before argument parsing so that settings can provide the
        defaults of the command line options.
        """
        for n, item in enumerate(argv):
            if item not in self.config_option_names:
                continue

            if len(argv) == n + 1 or argv[n + 1].startswith("-"):
                error(f"no settings file or key=value supplied after '{item}'")
                raise ValueError(f"missing argument after '{item}'")

            setting = argv[n + 1]

            if "=" in setting:
                (path, value) = setting.split("=", 1)
                self.set_dotnest(path.strip(), value.strip())
                continue

            if not Path(setting).is_file():
                error(f"The settings file after '{item}' does not exist")
                raise ValueError(f"no such settings file: {setting}")

            self.load_file(setting)

    def dump(self) -> str:
        """Return the settings in YAML format."""
        return yaml.dump(dict(self))

    def set_dotnest(self, parameter: str, value: Any) -> None:
        """Set a value by its dotted path (eg, 'registry.url')."""
        self.dotnest.set(parameter, value)

    def get_dotnest(
        self, parameter: str, default: Any = None, return_none: bool = True
    ) -> Any:
        """Get a value by its dotted path, or default when unset."""
        result = self.dotnest.get(parameter, return_none=return_none)
        if result is not None:
            return result
        return default
