"""tar + zstd archive adapter."""

import os
import shutil
import subprocess
import tempfile
from collections.abc import Sequence
from pathlib import Path

from ..core.errors import ArchiveToolNotFoundError
from ..ports.logger import LoggerPort


class TarZstdArchiveAdapter:
    """Archive adapter driving the ``tar`` and ``zstd`` binaries.

    Archives are written and extracted with absolute member names preserved
    (``tar -P``): caching ``/opt/toolchain`` restores to ``/opt/toolchain``
    whatever the extraction directory, while relative paths land under it.
    """

    def __init__(
        self,
        logger: LoggerPort,
        temp_dir: Path | None = None,
        tar_path: str = "tar",
        zstd_path: str = "zstd",
    ):
        """Initialize with tool names (or absolute paths).

        Args:
            temp_dir: Extraction fallback when the target is not writable.
        """
        self.logger = logger
        self.temp_dir = temp_dir if temp_dir is not None else Path(tempfile.gettempdir())
        self.tar_path = tar_path
        self.zstd_path = zstd_path

    def compress(self, archive_path: Path, paths: Sequence[str], level: int = 3) -> bool:
        """Compress paths into archive_path.

        The archive is written next to its final location and renamed into
        place, so concurrent readers never see a partial file.
        """
        tmp_path: Path | None = None
        try:
            tar = self._require_tool(self.tar_path)
            try:
                zstd = self._require_tool(self.zstd_path)
            except ArchiveToolNotFoundError:
                self.logger.error("zstd compression tool not available, please install zstd")
                raise

            archive_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{archive_path.name}.", suffix=".tmp", dir=archive_path.parent
            )
            os.close(fd)
            tmp_path = Path(tmp_name)

            args = [
                tar,
                "--use-compress-program",
                " ".join([zstd, *zstd_level_args(level)]),
                "-cf",
                str(tmp_path),
                "-P",
                *paths,
            ]
            self.logger.debug(
                "Starting compression",
                paths=", ".join(paths),
                archive=str(archive_path),
                level=level,
            )
            proc = subprocess.run(args, capture_output=True, text=True)
            if proc.returncode != 0:
                self.logger.error(
                    "Compression with zstd failed",
                    exit_code=proc.returncode,
                    stderr=proc.stderr.strip(),
                )
                return False

            os.chmod(tmp_path, 0o666 & ~current_umask())
            os.replace(tmp_path, archive_path)
            tmp_path = None
            self.logger.info(
                "Successfully compressed", paths=", ".join(paths), archive=str(archive_path)
            )
            return True
        except (ArchiveToolNotFoundError, OSError) as e:
            self.logger.error("Error during compression", error=str(e))
            return False
        finally:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)

    def decompress(self, archive_path: Path, target_dir: Path) -> bool:
        """Extract archive_path into target_dir.

        When target_dir cannot be created the current directory is used, and
        when it is not writable the temp directory is used instead. Either
        fallback is logged as a warning naming the new location.
        """
        try:
            if not archive_path.is_file():
                self.logger.error("Compressed file does not exist", archive=str(archive_path))
                return False

            tar = self._require_tool(self.tar_path)
            try:
                zstd = self._require_tool(self.zstd_path)
            except ArchiveToolNotFoundError:
                self.logger.error("zstd decompression tool not available, please install zstd")
                raise

            target_dir = self._writable_target(target_dir)
            args = [
                tar,
                "--use-compress-program",
                zstd,
                "-xf",
                str(archive_path),
                "-P",
                "-C",
                str(target_dir),
            ]
            self.logger.debug(
                "Starting decompression", archive=str(archive_path), target=str(target_dir)
            )
            proc = subprocess.run(args, capture_output=True, text=True)
            if proc.returncode != 0:
                self.logger.error(
                    "Decompression failed",
                    exit_code=proc.returncode,
                    stderr=proc.stderr.strip(),
                )
                return False

            self.logger.info(
                "Successfully decompressed", archive=str(archive_path), target=str(target_dir)
            )
            return True
        except (ArchiveToolNotFoundError, OSError) as e:
            self.logger.error("Error during decompression", error=str(e))
            return False

    def _writable_target(self, target_dir: Path) -> Path:
        if not target_dir.exists():
            self.logger.debug("Creating target directory", target=str(target_dir))
            try:
                target_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                fallback = Path.cwd()
                self.logger.warning(
                    "Failed to create target directory, falling back to current directory",
                    target=str(target_dir),
                    fallback=str(fallback),
                    error=str(e),
                )
                target_dir = fallback

        if not os.access(target_dir, os.W_OK):
            self.logger.warning(
                "No write permission for target directory, falling back to temp directory",
                target=str(target_dir),
                fallback=str(self.temp_dir),
            )
            self.temp_dir.mkdir(parents=True, exist_ok=True)
            target_dir = self.temp_dir
        return target_dir

    def _require_tool(self, tool: str) -> str:
        resolved = shutil.which(tool)
        if resolved is None:
            raise ArchiveToolNotFoundError(tool)
        return resolved


def zstd_level_args(level: int) -> list[str]:
    """Translate a compression level into zstd flags.

    Negative levels select zstd's fast mode and levels above 19 need
    ``--ultra``; the number itself is passed through unchecked.
    """
    if level < 0:
        return [f"--fast={-level}"]
    if level > 19:
        return ["--ultra", f"-{level}"]
    return [f"-{level}"]


def current_umask() -> int:
    """Read the process umask (os.umask can only read it by setting it)."""
    mask = os.umask(0)
    os.umask(mask)
    return mask
