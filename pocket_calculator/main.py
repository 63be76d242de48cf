"""
Command-line tape player.

This script:
- Loads keystroke tapes (a text file or a bundle of them)
- Replays every line in a fresh calculator session
- Writes the resulting display next to the tape

Each tape line is a calculation typed key by key, e.g. ``5 + 3 - 2 =``.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional, TextIO

from pydantic import BaseModel, Field, FilePath, ValidationError

from pocket_calculator.common.logger import logger
from pocket_calculator.engine.session import CalculatorSession, Display
from pocket_calculator.tape.loader import Tape, TapeLoader


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : FilePath
        Path to the keystroke tape.
    verbose : bool
        Log every key press.
    """

    file_path: FilePath
    verbose: bool = Field(default=False, description="Enable debug logging")


def parse_args(argv: Optional[list[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to ``sys.argv[1:]``

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Replay calculator keystroke tapes"
    )

    parser.add_argument(
        "file_path",
        help="Path to the tape (.txt, .zip, .tar.xz or .7z)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every key press",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(file_path=args.file_path, verbose=args.verbose)
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the result file path for a tape.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: tapes/daily.7z
    output: tapes/daily_7z_results.txt

    :param input_path: Path to the tape
    :return: Path to the result file
    """
    base, *extensions = input_path.name.split(".")
    suffix_safe = "".join(f"_{ext}" for ext in extensions)
    return input_path.with_name(f"{base}{suffix_safe}_results.txt")


def replay(line: str) -> Display:
    """
    Type one tape line into a fresh session.

    :param str line: Whitespace-separated key labels

    :return: Display after the last key
    :rtype: Display
    :raises ValueError: If the line contains a key that is not on the keypad
    """
    session = CalculatorSession()
    for key in line.split():
        session.press(key)
    return session.display


def play_tape(lines: list[str], f_out: TextIO) -> int:
    """
    Replay every tape line and write one result line each.

    :param list lines: Tape lines
    :param f_out: Open file handle for writing results

    :return: Number of lines that could not be replayed
    :rtype: int
    """
    failures = 0
    for line_number, line in enumerate(lines, start=1):
        try:
            display = replay(line)
        except ValueError as exc:
            failures += 1
            logger.error(f"🧮❌ Line {line_number} could not be replayed: {exc}")
            f_out.write(f"{line} -> ERROR: {exc}\n")
        else:
            logger.debug(f"🧮✅ Line {line_number}: {display.current}")
            f_out.write(f"{line} = {display.current}\n")
        f_out.flush()
    return failures


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entry point of the ``pocket-calculator`` command.

    :return: Process exit code, 1 if the tape could not be loaded or any line failed
    :rtype: int
    """
    cli_args = parse_args(argv)
    if cli_args.verbose:
        logger.setLevel(logging.DEBUG)

    input_path: Path = Path(cli_args.file_path)
    output_path: Path = build_output_path(input_path)

    loader = TapeLoader()
    try:
        tapes: list[Tape] = loader.load(input_path)
    except ValueError as exc:
        logger.error(f"📼❌ Could not load {input_path}: {exc}")
        return 1

    failures = 0
    with output_path.open("w", encoding="utf-8") as f_out:
        for tape in tapes:
            lines = loader.lines(tape.content)
            logger.info(f"📼 Replaying {len(lines)} line(s) from {tape.name}")
            # Bundles get one section per tape
            if len(tapes) > 1:
                f_out.write(f"# {tape.name}\n")
            failures += play_tape(lines, f_out)

    logger.info(f"✅ Results written to {output_path}")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
