"""Unit tests for in-memory tar archives."""

import io
import os
import tarfile
from pathlib import Path

import pytest

from llm_docker.utils.archive import build_tar_archive


def _open(data: bytes) -> tarfile.TarFile:
    return tarfile.open(fileobj=io.BytesIO(data), mode="r")


class TestBuildTarArchive:
    """Test archive construction."""

    def test_single_file(self, tmp_path: Path) -> None:
        """Test a file is archived under its basename."""
        source = tmp_path / "app.conf"
        source.write_text("listen 80;\n")

        with _open(build_tar_archive(source)) as tar:
            assert tar.getnames() == ["app.conf"]
            member = tar.extractfile("app.conf")
            assert member is not None
            assert member.read() == b"listen 80;\n"

    def test_directory_tree(self, tmp_path: Path) -> None:
        """Test directories are recursed with the basename as root."""
        source = tmp_path / "site"
        (source / "assets").mkdir(parents=True)
        (source / "index.html").write_text("<html></html>")
        (source / "assets" / "app.js").write_text("console.log(1)")

        with _open(build_tar_archive(str(source))) as tar:
            names = set(tar.getnames())

        assert names == {"site", "site/index.html", "site/assets", "site/assets/app.js"}

    @pytest.mark.skipif(os.name == "nt", reason="POSIX mode bits")
    def test_mode_bits_preserved(self, tmp_path: Path) -> None:
        """Test file permissions survive archiving."""
        source = tmp_path / "entrypoint.sh"
        source.write_text("#!/bin/sh\n")
        source.chmod(0o755)

        with _open(build_tar_archive(source)) as tar:
            assert tar.getmember("entrypoint.sh").mode & 0o777 == 0o755

    def test_missing_source(self, tmp_path: Path) -> None:
        """Test a missing source raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            build_tar_archive(tmp_path / "nope")
