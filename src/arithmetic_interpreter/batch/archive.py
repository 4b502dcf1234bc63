"""Load expression files, plain or archived."""
from pathlib import Path
import tarfile
import tempfile
import zipfile

import py7zr


def _first_txt(names: list[str], archive_kind: str) -> str:
    """
    Pick the first ``.txt`` member name.

    :raises ValueError: If the archive holds no ``.txt`` member
    """
    txt_files = [name for name in names if name.endswith(".txt")]
    if not txt_files:
        raise ValueError(f"📄❌ No .txt file found in {archive_kind} archive")
    return txt_files[0]


def extract_archive(archive_path: Path) -> str:
    """
    Extract the first .txt file found in a supported archive and return its content as a string.

    Supported formats:
    - .zip
    - .tar.xz
    - .7z

    :param Path archive_path: Path to the archive file

    :return: Content of the extracted .txt file
    :rtype: str
    :raises ValueError: If no .txt file is found or format is unsupported
    """
    # Extract into a temporary directory so nothing is left behind
    with tempfile.TemporaryDirectory() as tmpdir:
        tmpdir_path = Path(tmpdir)

        if archive_path.suffix == ".zip":
            with zipfile.ZipFile(archive_path, "r") as zf:
                member = _first_txt(zf.namelist(), "zip")
                zf.extract(member, path=tmpdir_path)

        elif archive_path.suffixes[-2:] == [".tar", ".xz"]:
            with tarfile.open(archive_path, "r:xz") as tf:
                member = _first_txt(tf.getnames(), "tar.xz")
                tf.extract(member, path=tmpdir_path, filter="data")

        elif archive_path.suffix == ".7z":
            with py7zr.SevenZipFile(archive_path, mode="r") as archive:
                member = _first_txt(archive.getnames(), "7z")
                archive.extract(path=tmpdir_path, targets=[member])

        else:
            raise ValueError(f"📄❌ Unsupported archive format: {archive_path.suffix}")

        return (tmpdir_path / member).read_text(encoding="utf-8")


def load_expressions(input_file: Path) -> list[str]:
    """
    Read the non-blank lines of a text file or of the first text file inside an archive.

    :param Path input_file: Path to a ``.txt`` file or a supported archive

    :return: Expressions with surrounding whitespace removed
    :rtype: list[str]
    :raises ValueError: If the archive format is unsupported or contains no .txt file
    """
    if input_file.suffix == ".txt":
        content = input_file.read_text(encoding="utf-8")
    else:
        content = extract_archive(input_file)

    return [line.strip() for line in content.splitlines() if line.strip()]
