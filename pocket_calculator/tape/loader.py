"""Load keystroke tapes from text files or tape bundles."""
from pathlib import Path
import tarfile
import tempfile
from typing import NamedTuple
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath


class Tape(NamedTuple):
    """One keystroke tape: its name and its text."""

    name: str
    content: str


def _is_tape_name(name: str) -> bool:
    return name.lower().endswith(".txt")


class TapeLoader(BaseModel):
    """
    Reader for keystroke tapes.

    A tape is plain text where every non-empty line is one calculation typed
    as whitespace-separated key labels, e.g. ``1 2 + 3 =``. Several tapes can
    be bundled in a ``.zip``, ``.tar.xz`` or ``.7z`` archive; every ``.txt``
    member is then a tape, in archive order.
    """

    model_config = ConfigDict(frozen=True)

    encoding: str = Field(default="utf-8", description="Text encoding of the tapes")

    def load(self, tape_file: FilePath) -> list[Tape]:
        """
        Load every tape held by a text file or a bundle.

        :param FilePath tape_file: Path to a ``.txt`` tape or a bundle

        :return: Tapes in file order
        :rtype: list[Tape]
        :raises ValueError: If the format is unsupported or the bundle holds no tape
        """
        name = tape_file.name.lower()
        if name.endswith(".txt"):
            tapes = [Tape(tape_file.name, tape_file.read_text(encoding=self.encoding))]
        elif name.endswith(".zip"):
            tapes = self._load_zip(tape_file)
        elif name.endswith(".tar.xz"):
            tapes = self._load_tar_xz(tape_file)
        elif name.endswith(".7z"):
            tapes = self._load_7z(tape_file)
        else:
            raise ValueError(f"📼❌ Unsupported tape format: {tape_file.name}")

        if not tapes:
            raise ValueError(f"📼❌ No .txt tape found in {tape_file.name}")
        return tapes

    @staticmethod
    def lines(content: str) -> list[str]:
        """
        Split tape content into calculations.

        :param str content: Tape content

        :return: Non-empty stripped lines
        :rtype: list[str]
        """
        return [line.strip() for line in content.splitlines() if line.strip()]

    def _load_zip(self, bundle: Path) -> list[Tape]:
        with zipfile.ZipFile(bundle) as zf:
            return [
                Tape(info.filename, zf.read(info).decode(self.encoding))
                for info in zf.infolist()
                if not info.is_dir() and _is_tape_name(info.filename)
            ]

    def _load_tar_xz(self, bundle: Path) -> list[Tape]:
        tapes: list[Tape] = []
        with tarfile.open(bundle, "r:xz") as tf:
            for member in tf:
                if not (member.isfile() and _is_tape_name(member.name)):
                    continue
                # Members are read in memory, nothing is written to disk
                with tf.extractfile(member) as fh:
                    tapes.append(Tape(member.name, fh.read().decode(self.encoding)))
        return tapes

    def _load_7z(self, bundle: Path) -> list[Tape]:
        # py7zr only extracts to disk across its supported releases
        with tempfile.TemporaryDirectory() as tmpdir, py7zr.SevenZipFile(bundle, mode="r") as archive:
            names = [name for name in archive.getnames() if _is_tape_name(name)]
            archive.extractall(path=tmpdir)
            return [
                Tape(name, (Path(tmpdir) / name).read_text(encoding=self.encoding))
                for name in names
                if (Path(tmpdir) / name).is_file()
            ]
