import io
import unittest
from unittest import mock

from osrelease import osrelease
from osrelease.osrelease import (
    ReleaseInfo,
    load_default,
    load_from_path,
    parse,
    parse_contents,
    read_lines,
    strip_quotes,
)
from osrelease.unittest import POP_OS, TestCase


class TestStripQuotes(unittest.TestCase):
    def test_strip(self) -> None:
        self.assertEqual(strip_quotes('"value"'), "value")
        self.assertEqual(strip_quotes("value"), "value")
        self.assertEqual(strip_quotes('"value'), "value")
        self.assertEqual(strip_quotes('value"'), "value")
        self.assertEqual(strip_quotes('"with spaces"'), "with spaces")

    def test_invalid(self) -> None:
        self.assertIsNone(strip_quotes(""))
        self.assertIsNone(strip_quotes('"'))
        self.assertIsNone(strip_quotes('""'))
        self.assertIsNone(strip_quotes('"a"b"'))
        self.assertIsNone(strip_quotes('a"b'))


class TestParse(unittest.TestCase):
    def test_empty(self) -> None:
        self.assertEqual(parse([]), ReleaseInfo())
        info = parse([])
        self.assertEqual(info.name, "")
        self.assertEqual(info.extra, {})

    def test_pop_os(self) -> None:
        info = parse(POP_OS.splitlines())
        self.assertEqual(
            info,
            ReleaseInfo(
                name="Pop!_OS",
                version="18.04 LTS",
                id="ubuntu",
                id_like="debian",
                pretty_name="Pop!_OS 18.04 LTS",
                version_id="18.04",
                home_url="https://system76.com/pop",
                support_url="http://support.system76.com",
                bug_report_url="https://github.com/pop-os/pop/issues",
                privacy_policy_url="https://system76.com/privacy",
                version_codename="bionic",
                extra={"EXTRA_KEY": "thing"},
            ),
        )

    def test_quoting(self) -> None:
        for attr, key in ((a, k) for k, a in ReleaseInfo.FIELDS.items()):
            with self.subTest(key=key):
                quoted = parse([f'{key}="value"'])
                unquoted = parse([f"{key}=value"])
                self.assertEqual(getattr(quoted, attr), "value")
                self.assertEqual(quoted, unquoted)
                self.assertEqual(quoted.extra, {})

    def test_unbalanced_quote(self) -> None:
        self.assertEqual(parse(['NAME="Debian GNU/Linux']).name, "Debian GNU/Linux")

    def test_last_wins(self) -> None:
        info = parse(["NAME=First", "NAME=Second"])
        self.assertEqual(info.name, "Second")
        self.assertEqual(info.extra, {})

        info = parse(["FOO=first", "FOO=second"])
        self.assertEqual(info.extra, {"FOO": "second"})

    def test_similar_keys(self) -> None:
        info = parse(["ID_LIKE=debian", "ID=ubuntu", "VERSION_ID=22.04", "VERSION=22.04 LTS"])
        self.assertEqual(info.id, "ubuntu")
        self.assertEqual(info.id_like, "debian")
        self.assertEqual(info.version, "22.04 LTS")
        self.assertEqual(info.version_id, "22.04")
        self.assertEqual(info.extra, {})

    def test_extra(self) -> None:
        self.assertEqual(parse(["FOO=bar"]).extra, {"FOO": "bar"})
        self.assertEqual(parse(['LOGO="distributor-logo"']).extra, {"LOGO": "distributor-logo"})

    def test_extra_sorted(self) -> None:
        info = parse(["ZZZ=1", "AAA=2", "MMM=3"])
        self.assertEqual(list(info.extra), ["AAA", "MMM", "ZZZ"])

    def test_empty_values(self) -> None:
        for line in ("FOO=", 'FOO=""', "NAME=", 'NAME=""', 'ANOTHER_KEY="'):
            with self.subTest(line=line):
                self.assertEqual(parse([line]), ReleaseInfo())

    def test_ignored(self) -> None:
        lines = [
            "",
            "# NAME comment",
            "no assignment here",
            " NAME=Indented",
            'NAME="Quoted" ',
            "\tID=tab",
        ]
        info = parse(lines)
        self.assertEqual(info.name, "")
        self.assertEqual(info.id, "")
        for key in ReleaseInfo.FIELDS:
            self.assertNotIn(key, info.extra)

    def test_recognized_never_in_extra(self) -> None:
        info = parse(['NAME="a"b"', "export ID=debian", "VERSION_CODENAME=bookworm"])
        self.assertEqual(info.name, "")
        self.assertEqual(info.id, "")
        self.assertEqual(info.version_codename, "bookworm")
        self.assertEqual(info.extra, {})

    def test_unanchored_extra(self) -> None:
        # Assignments are found anywhere in the line
        self.assertEqual(parse(["export FOO=bar"]).extra, {"FOO": "bar"})
        self.assertEqual(parse(['  VARIANT_ID="server"']).extra, {"VARIANT_ID": "server"})

    def test_idempotent(self) -> None:
        lines = POP_OS.splitlines()
        self.assertEqual(parse(lines), parse(lines))
        self.assertEqual(hash(parse(lines)), hash(parse(lines)))

    def test_generator(self) -> None:
        self.assertEqual(parse(line for line in ["ID=fedora"]).id, "fedora")

    def test_immutable(self) -> None:
        info = parse(["NAME=Fedora", "FOO=bar"])
        with self.assertRaises(AttributeError):
            info.name = "Debian"  # type: ignore[misc]
        with self.assertRaises(TypeError):
            info.extra["FOO"] = "baz"  # type: ignore[index]


class TestReleaseInfo(unittest.TestCase):
    def test_get(self) -> None:
        info = parse(POP_OS.splitlines())
        self.assertEqual(info.get("VERSION_CODENAME"), "bionic")
        self.assertEqual(info.get("EXTRA_KEY"), "thing")
        self.assertIsNone(info.get("ANOTHER_KEY"))
        self.assertIsNone(ReleaseInfo().get("NAME"))
        self.assertEqual(ReleaseInfo().get("NAME", "Linux"), "Linux")

    def test_as_dict(self) -> None:
        info = parse(["ZZZ=z", "ID=debian", "NAME=Debian"])
        self.assertEqual(list(info.as_dict().items()), [("NAME", "Debian"), ("ID", "debian"), ("ZZZ", "z")])


class TestLoad(TestCase):
    def test_read_lines(self) -> None:
        fd = io.BytesIO(b"NAME=a\r\nID=b\nBAD=\xff\xfe\nLAST=c")
        self.assertEqual(list(read_lines(fd)), ["NAME=a", "ID=b", "LAST=c"])

    def test_load_from_path(self) -> None:
        path = self.write_file(POP_OS)
        info = load_from_path(path)
        self.assertEqual(info.pretty_name, "Pop!_OS 18.04 LTS")
        self.assertEqual(info.extra, {"EXTRA_KEY": "thing"})
        self.assertEqual(load_from_path(path.as_posix()), info)

    def test_load_crlf(self) -> None:
        path = self.write_file(b'NAME="Fedora Linux"\r\nID=fedora\r\n')
        info = load_from_path(path)
        self.assertEqual(info.name, "Fedora Linux")
        self.assertEqual(info.id, "fedora")

    def test_load_invalid_utf8(self) -> None:
        path = self.write_file(b"NAME=Arch\nBROKEN=\xc3\x28\nID=arch\n")
        info = load_from_path(path)
        self.assertEqual(info.name, "Arch")
        self.assertEqual(info.id, "arch")
        self.assertEqual(info.extra, {})

    def test_load_missing(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_from_path(self.tempdir() / "missing")

    def test_load_directory(self) -> None:
        with self.assertRaises(OSError):
            load_from_path(self.tempdir())

    def test_load_default(self) -> None:
        path = self.write_file("ID=debian\n")
        with mock.patch.object(osrelease, "DEFAULT_PATH", path):
            self.assertEqual(load_default().id, "debian")

    def test_parse_contents(self) -> None:
        self.assertEqual(parse_contents(POP_OS), parse(POP_OS.splitlines()))
        self.assertEqual(
            parse_contents(io.StringIO("ID=debian\nFOO=bar\n")), ReleaseInfo(id="debian", extra={"FOO": "bar"})
        )

    def test_parse_contents_line_ends(self) -> None:
        # Only \n and \r\n end a line, as when reading from a file
        text = "NAME=Foo\x0cBar\r\nPRETTY_NAME=A B\nID=x\ry\n"
        expected = parse(read_lines(io.BytesIO(text.encode())))
        self.assertEqual(expected.name, "Foo\x0cBar")
        self.assertEqual(expected.pretty_name, "A B")
        self.assertEqual(expected.id, "x\ry")
        self.assertEqual(parse_contents(text), expected)
        self.assertEqual(parse_contents(io.StringIO(text, newline="")), expected)
