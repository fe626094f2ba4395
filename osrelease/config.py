from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Self

import yaml

from .exceptions import ConfigError
from .osrelease import DEFAULT_PATH, ReleaseInfo

log = logging.getLogger(__name__)


def expand_path(path: str | Path | None) -> Path | None:
    """
    Process a path in the configuration, expanding ~ and making it absolute.

    If path is None or empty, return None
    """
    if not path:
        return None
    return Path(path).expanduser().absolute()


class OsReleaseConfig:
    """
    osrelease-info configuration
    """

    def __init__(self) -> None:
        # os-release file read when no path is given on the command line
        self.path: Path = DEFAULT_PATH
        # os-release keys listed by `show`, in order
        self.fields: list[str] = list(ReleaseInfo.FIELDS)
        # List keys not in `fields` after the others
        self.show_extra: bool = True

    @classmethod
    def xdg_local_config_dir(cls) -> Path:
        config_home = Path(os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config")))
        return config_home / "osrelease-info"

    @classmethod
    def find_config_file(cls) -> Path | None:
        """
        Locate an osrelease-info.yaml configuration file in a list of well
        known directories
        """
        # ~/.config/osrelease-info/osrelease-info.yaml
        local_config = cls.xdg_local_config_dir() / "osrelease-info.yaml"
        if local_config.exists():
            return local_config

        # /etc/osrelease-info.yaml
        system_config = Path("/etc/osrelease-info.yaml")
        if system_config.exists():
            return system_config

        return None

    @classmethod
    def load(cls, path: Path | None = None) -> Self:
        """
        Load the configuration from the given path, or from a list of default paths.
        """
        if path is None:
            path = cls.find_config_file()
        if path is None:
            return cls()

        try:
            with path.open() as fd:
                conf = yaml.load(fd, Loader=yaml.SafeLoader)
            log.info("Configuration loaded from %s", path)
        except FileNotFoundError:
            return cls()
        except OSError as e:
            raise ConfigError(path, f"cannot read configuration: {e.strerror or e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(path, f"cannot parse YAML: {e}") from e

        res = cls()
        if conf is None:
            return res
        if not isinstance(conf, dict):
            raise ConfigError(path, "configuration is not a mapping")

        if value := expand_path(conf.pop("path", None)):
            res.path = value
        if (fields := conf.pop("fields", None)) is not None:
            if not isinstance(fields, list):
                raise ConfigError(path, "fields is not a list")
            res.fields = [str(f) for f in fields]
        res.show_extra = bool(conf.pop("show_extra", res.show_extra))

        for name in conf.keys():
            log.warning("%s: ignoring unknown configuration option %r", path, name)

        return res
