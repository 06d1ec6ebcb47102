import io
import os
import socket
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path
from unittest import mock

import click

from statline.errors import ModifiedTimeError, PathResolutionError, TimestampFormatError
from statline.lister import Lister, ListerOptions, format_record, read_record
from statline.models import FileKind, FileRecord


class TestReadRecord(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_regular_file(self) -> None:
        p = self.root / "a.txt"
        p.write_bytes(b"hello")
        os.chmod(p, 0o644)

        rec = read_record(str(p))
        self.assertEqual(rec.name, str(p))
        self.assertEqual(rec.size, 5)
        self.assertIs(rec.kind, FileKind.FILE)
        self.assertEqual(rec.mode & 0o777, 0o644)
        self.assertFalse(rec.readonly)
        self.assertEqual(rec.modified.tzinfo, timezone.utc)

    def test_name_is_unmodified(self) -> None:
        (self.root / "a.txt").write_bytes(b"")
        cwd = os.getcwd()
        os.chdir(self.root)
        try:
            rec = read_record("./a.txt")
        finally:
            os.chdir(cwd)
        self.assertEqual(rec.name, "./a.txt")

    def test_directory(self) -> None:
        self.assertIs(read_record(str(self.root)).kind, FileKind.DIRECTORY)

    def test_readonly_file(self) -> None:
        p = self.root / "ro.txt"
        p.write_bytes(b"")
        os.chmod(p, 0o444)
        self.assertTrue(read_record(str(p)).readonly)

    @unittest.skipUnless(hasattr(socket, "AF_UNIX"), "unix sockets required")
    def test_socket(self) -> None:
        p = self.root / "s.sock"
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.bind(str(p))
            self.assertIs(read_record(str(p)).kind, FileKind.SOCKET)
        finally:
            sock.close()

    @unittest.skipUnless(hasattr(os, "mkfifo"), "fifo required")
    def test_fifo_is_unknown(self) -> None:
        p = self.root / "pipe"
        os.mkfifo(p)
        self.assertIs(read_record(str(p)).kind, FileKind.UNKNOWN)

    def test_symlink_is_followed(self) -> None:
        target = self.root / "t"
        target.mkdir()
        link = self.root / "l"
        link.symlink_to(target)
        self.assertIs(read_record(str(link)).kind, FileKind.DIRECTORY)

    def test_missing_path(self) -> None:
        missing = str(self.root / "nope")
        with self.assertRaises(PathResolutionError) as cm:
            read_record(missing)
        self.assertEqual(cm.exception.details["path"], missing)
        self.assertIsInstance(cm.exception.cause, FileNotFoundError)

    def test_dangling_symlink(self) -> None:
        link = self.root / "dangling"
        link.symlink_to(self.root / "gone")
        with self.assertRaises(PathResolutionError):
            read_record(str(link))

    def test_mtime_is_truncated_not_rounded(self) -> None:
        p = self.root / "f"
        p.write_bytes(b"")
        mtime = datetime(2025, 1, 1, 12, 34, 59, tzinfo=timezone.utc)
        ns = int(mtime.timestamp()) * 10**9 + 999_999_900
        os.utime(p, ns=(ns, ns))

        rec = read_record(str(p))
        self.assertEqual(rec.modified.replace(microsecond=0), mtime)
        self.assertEqual(rec.modified.microsecond, 999_999)

        expected = mtime.astimezone().strftime("%Y-%m-%d %H:%M")
        self.assertIn(f'"{expected}"', format_record(rec))

    def test_unrepresentable_mtime(self) -> None:
        p = self.root / "f"
        p.write_bytes(b"")
        st = os.stat(p)
        fake = mock.Mock(
            st_mode=st.st_mode,
            st_size=st.st_size,
            st_mtime=1e20,
            st_mtime_ns=10**29,
        )
        with mock.patch("statline.lister.os.stat", return_value=fake):
            with self.assertRaises(ModifiedTimeError) as cm:
                read_record(str(p))
        self.assertEqual(cm.exception.details["path"], str(p))
        self.assertIsInstance(cm.exception.cause, ValueError)


class TestFormatRecord(unittest.TestCase):
    def _record(self, **kw) -> FileRecord:
        base = dict(
            name="data.bin",
            size=1_000_000,
            kind=FileKind.FILE,
            mode=0o100644,
            readonly=False,
            modified=datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc),
        )
        base.update(kw)
        return FileRecord(**base)

    def test_plain_line(self) -> None:
        rec = self._record()
        ts = rec.modified.astimezone().strftime("%Y-%m-%d %H:%M")
        self.assertEqual(
            format_record(rec),
            f'file 100644 (rw-r--r--) 1 MB "{ts}" - data.bin',
        )

    def test_readonly_directory_line(self) -> None:
        rec = self._record(name="d", kind=FileKind.DIRECTORY, mode=0o40555, readonly=True, size=4096)
        line = format_record(rec)
        self.assertTrue(line.startswith("directory 40555 (r-xr-xr-x) 4.1 kB "))
        self.assertTrue(line.endswith(" READONLY d"))

    def test_color_only_changes_styling(self) -> None:
        rec = self._record()
        styled = format_record(rec, color=True)
        self.assertIn("\x1b[", styled)
        self.assertEqual(click.unstyle(styled), format_record(rec, color=False))

    def test_timestamp_failure_is_fatal(self) -> None:
        rec = self._record()
        with mock.patch(
            "statline.lister.format_local",
            side_effect=ValueError("cannot determine local time zone offset"),
        ):
            with self.assertRaises(TimestampFormatError) as cm:
                format_record(rec)
        self.assertEqual(cm.exception.details["path"], "data.bin")


class TestLister(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _files(self, n: int) -> list[str]:
        paths = []
        for i in range(n):
            p = self.root / f"f{i}"
            p.write_bytes(b"x" * i)
            paths.append(str(p))
        return paths

    def test_one_line_per_path_in_order(self) -> None:
        paths = self._files(4)
        paths.reverse()
        out = io.StringIO()
        count = Lister(out).run(paths)

        lines = out.getvalue().splitlines()
        self.assertEqual(count, 4)
        self.assertEqual(len(lines), 4)
        for line, path in zip(lines, paths):
            self.assertTrue(line.endswith(" " + path))

    def test_stops_at_first_error(self) -> None:
        good = self._files(2)
        paths = [good[0], str(self.root / "missing"), good[1]]
        out = io.StringIO()
        with self.assertRaises(PathResolutionError):
            Lister(out).run(paths)

        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].endswith(good[0]))

    def test_color_option(self) -> None:
        out = io.StringIO()
        Lister(out, ListerOptions(color=True)).run(self._files(1))
        self.assertIn("\x1b[", out.getvalue())

    def test_empty_input(self) -> None:
        out = io.StringIO()
        self.assertEqual(Lister(out).run([]), 0)
        self.assertEqual(out.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
