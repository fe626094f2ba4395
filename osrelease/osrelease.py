from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import IO, BinaryIO, ClassVar

log = logging.getLogger(__name__)

#: Well-known location of the os-release file
DEFAULT_PATH = Path("/etc/os-release")

# Match KEY=value anywhere in the line, for keys that are not recognized
RE_ASSIGN = re.compile(r'(\w+)="?([^"]+)"?')


def strip_quotes(value: str) -> str | None:
    """
    Remove an optional leading and an optional trailing double quote.

    Return None if what is left is empty or still contains a double quote.
    """
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    if not value or '"' in value:
        return None
    return value


@dataclasses.dataclass(frozen=True)
class ReleaseInfo:
    """
    Contents of an os-release file
    """

    #: Name of the OS, without version. Example: ``Ubuntu``
    name: str = ""
    #: Version, with release details. Example: ``18.04 LTS (Bionic Beaver)``
    version: str = ""
    #: Lower case OS identifier. Example: ``ubuntu``
    id: str = ""
    #: Identifiers of the OSes this one is derived from. Example: ``debian``
    id_like: str = ""
    #: Name and version for display. Example: ``Ubuntu 18.04 LTS``
    pretty_name: str = ""
    #: Version number only. Example: ``18.04``
    version_id: str = ""
    home_url: str = ""
    support_url: str = ""
    bug_report_url: str = ""
    privacy_policy_url: str = ""
    #: Release codename. Example: ``bionic``
    version_codename: str = ""
    #: All other keys, sorted by key
    extra: Mapping[str, str] = dataclasses.field(default_factory=dict)

    # os-release key name -> attribute name, in matching priority order
    FIELDS: ClassVar[Mapping[str, str]] = MappingProxyType(
        {
            "NAME": "name",
            "VERSION": "version",
            "ID": "id",
            "ID_LIKE": "id_like",
            "PRETTY_NAME": "pretty_name",
            "VERSION_ID": "version_id",
            "HOME_URL": "home_url",
            "SUPPORT_URL": "support_url",
            "BUG_REPORT_URL": "bug_report_url",
            "PRIVACY_POLICY_URL": "privacy_policy_url",
            "VERSION_CODENAME": "version_codename",
        }
    )

    def __post_init__(self) -> None:
        # Freeze extra as a read-only view sorted by key
        object.__setattr__(self, "extra", MappingProxyType(dict(sorted(self.extra.items()))))

    def __hash__(self) -> int:
        # extra is not hashable as is
        return hash((tuple(getattr(self, a) for a in self.FIELDS.values()), tuple(self.extra.items())))

    def get(self, key: str, default: str | None = None) -> str | None:
        """
        Look up a value by its os-release key name
        """
        if (attr := self.FIELDS.get(key)) is not None:
            return getattr(self, attr) or default
        return self.extra.get(key, default)

    def as_dict(self) -> dict[str, str]:
        """
        Return all set values indexed by os-release key name.

        Recognized keys come first, in their usual order, followed by the
        extra keys.
        """
        res: dict[str, str] = {}
        for key, attr in self.FIELDS.items():
            if value := getattr(self, attr):
                res[key] = value
        res.update(self.extra)
        return res


def parse(lines: Iterable[str]) -> ReleaseInfo:
    """
    Parse os-release lines, with line terminators already removed.

    Lines that do not look like assignments are ignored.
    """
    fields: dict[str, str] = {}
    extra: dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition("=")
        if sep and (attr := ReleaseInfo.FIELDS.get(key)) is not None:
            if (stripped := strip_quotes(value)) is not None:
                fields[attr] = stripped
                continue

        if mo := RE_ASSIGN.search(line):
            if mo.group(1) in ReleaseInfo.FIELDS:
                log.debug("ignoring malformed assignment to %s: %r", mo.group(1), line)
                continue
            extra[mo.group(1)] = mo.group(2)
        else:
            log.debug("ignoring line %r", line)

    return ReleaseInfo(extra=extra, **fields)


def read_lines(fd: BinaryIO) -> Iterator[str]:
    """
    Read lines from a binary file, removing line terminators.

    Lines that are not valid UTF-8 are skipped.
    """
    for lineno, raw in enumerate(fd, start=1):
        if raw.endswith(b"\r\n"):
            raw = raw[:-2]
        elif raw.endswith(b"\n"):
            raw = raw[:-1]
        try:
            yield raw.decode()
        except UnicodeDecodeError as e:
            log.debug("%s:%d: skipping line that is not valid UTF-8: %s", getattr(fd, "name", "-"), lineno, e)


def parse_contents(fd: IO[str] | str) -> ReleaseInfo:
    """
    Parse os-release contents from a string or a text file.

    Lines end only at \\n or \\r\\n, as in read_lines.
    """
    if not isinstance(fd, str):
        fd = fd.read()
    return parse(line.removesuffix("\r") for line in fd.split("\n"))


def load_from_path(path: str | Path) -> ReleaseInfo:
    """
    Parse the os-release file at the given path.

    OSError is raised if the file cannot be read.
    """
    path = Path(path)
    with path.open("rb") as fd:
        res = parse(read_lines(fd))
    log.debug("%s: parsed %s", path, res.pretty_name or res.name or "unnamed OS")
    return res


def load_default() -> ReleaseInfo:
    """
    Parse /etc/os-release
    """
    return load_from_path(DEFAULT_PATH)
