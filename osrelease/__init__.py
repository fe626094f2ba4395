from .osrelease import DEFAULT_PATH, ReleaseInfo, load_default, load_from_path, parse, parse_contents, read_lines

__all__ = ["DEFAULT_PATH", "ReleaseInfo", "load_default", "load_from_path", "parse", "parse_contents", "read_lines"]
