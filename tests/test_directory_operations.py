"""Tests for directory filesystem operations"""

import asyncio
from pathlib import Path

import pytest

from safepath.core.path import (
    Directory,
    FileExists,
    IoError,
    ParentNotFound,
    PathErrorKind,
    PermissionDenied,
)


class TestExistsOnDisk:
    """Test Directory.exists against the local disk"""

    @pytest.mark.asyncio
    async def test_existing_directory(self, base_dir: Directory):
        """Test an existing directory reports True"""
        assert (await base_dir.exists()).value is True

    @pytest.mark.asyncio
    async def test_missing_directory(self, base_dir: Directory):
        """Test a missing directory reports False"""
        missing = base_dir.directory("missing").value

        result = await missing.exists()

        assert result.success
        assert result.value is False

    @pytest.mark.asyncio
    async def test_file_in_place(self, base_dir: Directory, tmp_path: Path):
        """Test a file at the path is FILE_EXISTS"""
        (tmp_path / "occupied").write_text("x")
        occupied = base_dir.directory("occupied").value

        result = await occupied.exists()

        assert not result.success
        assert result.error == FileExists(occupied.full_path)

    @pytest.mark.asyncio
    async def test_file_blocking_ancestor(self, base_dir: Directory, tmp_path: Path):
        """Test a file earlier in the path is FILE_EXISTS"""
        (tmp_path / "blocker").write_text("x")
        nested = base_dir.directory("blocker").value.directory("nested").value

        result = await nested.exists()

        assert result.error.kind == PathErrorKind.FILE_EXISTS


class TestExistsScripted:
    """Test Directory.exists failure classification"""

    @pytest.mark.asyncio
    async def test_other_os_error(self, scripted_fs):
        """Test unexpected failures become IO_ERROR"""
        scripted_fs.fail("stat", "/data", OSError(5, "Input/output error"))
        data = Directory.build("/data", filesystem=scripted_fs).value

        result = await data.exists()

        assert result.error.kind == PathErrorKind.IO_ERROR
        assert result.error.path == "/data"
        assert "Input/output error" in result.error.message

    @pytest.mark.asyncio
    async def test_permission_denied_is_io_error(self, scripted_fs):
        """Test stat permission failures are reported as IO_ERROR"""
        scripted_fs.fail("stat", "/data", PermissionError(13, "Permission denied"))
        data = Directory.build("/data", filesystem=scripted_fs).value

        result = await data.exists()

        assert isinstance(result.error, IoError)


class TestMkdirOnDisk:
    """Test Directory.mkdir against the local disk"""

    @pytest.mark.asyncio
    async def test_fresh_path(self, base_dir: Directory, tmp_path: Path):
        """Test creating a new directory returns True"""
        fresh = base_dir.directory("fresh").value

        result = await fresh.mkdir()

        assert result.success
        assert result.value is True
        assert (tmp_path / "fresh").is_dir()

    @pytest.mark.asyncio
    async def test_already_exists(self, base_dir: Directory, tmp_path: Path):
        """Test an existing directory returns False"""
        (tmp_path / "existing").mkdir()
        existing = base_dir.directory("existing").value

        result = await existing.mkdir()

        assert result.success
        assert result.value is False

    @pytest.mark.asyncio
    async def test_file_in_place(self, base_dir: Directory, tmp_path: Path):
        """Test a file at the path is FILE_EXISTS"""
        (tmp_path / "taken").write_text("x")
        taken = base_dir.directory("taken").value

        result = await taken.mkdir()

        assert result.error == FileExists(taken.full_path)

    @pytest.mark.asyncio
    async def test_parent_missing(self, base_dir: Directory):
        """Test a missing parent is PARENT_NOT_FOUND"""
        orphan = Directory.build(f"{base_dir.full_path}/no/such/parent").value

        result = await orphan.mkdir()

        assert result.error == ParentNotFound(orphan.full_path)

    @pytest.mark.asyncio
    async def test_root_already_exists(self, local_fs):
        """Test mkdir on root reports it already existed"""
        root = Directory.build("/", filesystem=local_fs).value

        result = await root.mkdir()

        assert result.success
        assert result.value is False


class TestMkdirScripted:
    """Test Directory.mkdir failure classification"""

    @pytest.mark.asyncio
    async def test_permission_denied(self, scripted_fs):
        """Test permission failures"""
        scripted_fs.fail("mkdir", "/locked", PermissionError(13, "Permission denied"))
        locked = Directory.build("/locked", filesystem=scripted_fs).value

        result = await locked.mkdir()

        assert result.error == PermissionDenied("/locked")

    @pytest.mark.asyncio
    async def test_vanished_between_mkdir_and_exists(self, scripted_fs):
        """Test directory that exists at mkdir time but not at check time"""
        scripted_fs.fail("mkdir", "/flaky", FileExistsError(17, "File exists"))
        flaky = Directory.build("/flaky", filesystem=scripted_fs).value

        result = await flaky.mkdir()

        assert result.error.kind == PathErrorKind.IO_ERROR
        assert result.error.path == "/flaky"
        assert scripted_fs.calls == [("mkdir", "/flaky"), ("stat", "/flaky")]

    @pytest.mark.asyncio
    async def test_exists_failure_is_forwarded(self, scripted_fs):
        """Test IO errors from the follow-up check are forwarded"""
        scripted_fs.directories.add("/busy")
        scripted_fs.fail("stat", "/busy", OSError(5, "Input/output error"))
        busy = Directory.build("/busy", filesystem=scripted_fs).value

        result = await busy.mkdir()

        assert isinstance(result.error, IoError)
        assert "Input/output error" in result.error.message

    @pytest.mark.asyncio
    async def test_ancestor_is_file(self, scripted_fs):
        """Test unexpected OS failures become IO_ERROR"""
        scripted_fs.files["/blocker"] = ""
        nested = Directory.build("/blocker/nested", filesystem=scripted_fs).value

        result = await nested.mkdir()

        assert result.error.kind == PathErrorKind.IO_ERROR

    @pytest.mark.asyncio
    async def test_other_error(self, scripted_fs):
        """Test generic OS failures"""
        scripted_fs.fail("mkdir", "/full", OSError(28, "No space left on device"))
        full = Directory.build("/full", filesystem=scripted_fs).value

        result = await full.mkdir()

        assert result.error.kind == PathErrorKind.IO_ERROR
        assert "No space left on device" in result.error.message


class TestMkdirpOnDisk:
    """Test Directory.mkdirp against the local disk"""

    @pytest.mark.asyncio
    async def test_creates_all_ancestors(self, base_dir: Directory, tmp_path: Path):
        """Test every missing level is created"""
        deep = Directory.build(f"{base_dir.full_path}/a/b/c/d").value

        result = await deep.mkdirp()

        assert result.success
        assert result.value is True
        assert (tmp_path / "a" / "b" / "c" / "d").is_dir()

    @pytest.mark.asyncio
    async def test_second_call_reports_existing(self, base_dir: Directory):
        """Test mkdirp is idempotent"""
        deep = Directory.build(f"{base_dir.full_path}/x/y").value

        assert (await deep.mkdirp()).value is True
        assert (await deep.mkdirp()).value is False

    @pytest.mark.asyncio
    async def test_file_blocking_ancestor(self, base_dir: Directory, tmp_path: Path):
        """Test a file in the middle of the path stops creation"""
        (tmp_path / "file.txt").write_text("x")
        blocked = Directory.build(f"{base_dir.full_path}/file.txt/sub/leaf").value

        result = await blocked.mkdirp()

        assert result.error == FileExists(f"{base_dir.full_path}/file.txt")
        assert not (tmp_path / "file.txt" / "sub").exists()

    @pytest.mark.asyncio
    async def test_concurrent_callers(self, base_dir: Directory, tmp_path: Path):
        """Test overlapping concurrent calls both succeed"""
        first = Directory.build(f"{base_dir.full_path}/shared/one").value
        second = Directory.build(f"{base_dir.full_path}/shared/one").value

        results = await asyncio.gather(first.mkdirp(), second.mkdirp())

        assert all(result.success for result in results)
        assert sorted(result.value for result in results) == [False, True]
        assert (tmp_path / "shared" / "one").is_dir()


class TestMkdirpScripted:
    """Test Directory.mkdirp failure handling"""

    @pytest.mark.asyncio
    async def test_ancestor_error_propagates_unchanged(self, scripted_fs):
        """Test the first ancestor failure is returned and nothing below runs"""
        scripted_fs.fail("mkdir", "/a/b", PermissionError(13, "Permission denied"))
        leaf = Directory.build("/a/b/c", filesystem=scripted_fs).value

        result = await leaf.mkdirp()

        assert result.error == PermissionDenied("/a/b")
        assert ("mkdir", "/a/b/c") not in scripted_fs.calls
        assert "/a" in scripted_fs.directories

    @pytest.mark.asyncio
    async def test_parent_vanished_is_io_error(self, scripted_fs):
        """Test PARENT_NOT_FOUND after ensuring parents is reported as IO_ERROR"""
        scripted_fs.fail("mkdir", "/a/b", FileNotFoundError(2, "No such file or directory"))
        leaf = Directory.build("/a/b", filesystem=scripted_fs).value

        result = await leaf.mkdirp()

        assert result.error.kind == PathErrorKind.IO_ERROR
        assert result.error.path == "/a/b"

    @pytest.mark.asyncio
    async def test_creates_in_root_first_order(self, scripted_fs):
        """Test ancestors are ensured from the root down"""
        leaf = Directory.build("/a/b/c", filesystem=scripted_fs).value

        result = await leaf.mkdirp()

        assert result.value is True
        mkdir_calls = [path for op, path in scripted_fs.calls if op == "mkdir"]
        assert mkdir_calls == ["/", "/a", "/a/b", "/a/b/c"]

    @pytest.mark.asyncio
    async def test_existing_ancestors(self, scripted_fs):
        """Test only the leaf result is reported"""
        scripted_fs.directories.update({"/a", "/a/b"})
        leaf = Directory.build("/a/b/c", filesystem=scripted_fs).value

        assert (await leaf.mkdirp()).value is True
