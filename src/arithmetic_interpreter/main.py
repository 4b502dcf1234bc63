"""
Command-line entrypoint.

Without a file argument, this script starts the interactive console.
With a file argument, it evaluates every expression of the file (or archive)
and writes the results next to it, or to the path given with ``--output``.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, FilePath, ValidationError

from arithmetic_interpreter.batch.runner import BatchRunner
from arithmetic_interpreter.common.interpreter import Interpreter
from arithmetic_interpreter.common.logger import logger, set_log_level
from arithmetic_interpreter.console.console import Console


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : Optional[FilePath]
        File or archive of expressions; the console starts when omitted.
    output : Optional[Path]
        Where batch results are written.
    strict_identifiers : bool
        Reject unknown words instead of ignoring them.
    trace : bool
        Log every pipeline stage.
    prompt : str
        Console prompt.
    """

    file_path: Optional[FilePath] = None
    output: Optional[Path] = None
    strict_identifiers: bool = False
    trace: bool = False
    prompt: str = ">>> "


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to ``sys.argv[1:]``

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Evaluate arithmetic expressions interactively or from a file"
    )

    parser.add_argument(
        "file_path",
        nargs="?",
        help="Path to a file (.txt, .zip, .tar.xz, .7z) of expressions, one per line",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Path of the results file (batch mode only)",
    )
    parser.add_argument(
        "--strict-identifiers",
        action="store_true",
        help="Report unknown words as errors instead of ignoring them",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log tokens and postfix sequences of every expression",
    )
    parser.add_argument(
        "--prompt",
        default=">>> ",
        help="Prompt shown by the interactive console",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(**vars(args))
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct a safe output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/expressions.7z
    output: resources/expressions_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    stem = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def main(argv: Optional[List[str]] = None) -> None:
    """
    Run the console or the batch runner depending on the arguments.
    """
    cli_args = parse_args(argv)
    if cli_args.trace:
        set_log_level("DEBUG")

    interpreter = Interpreter(strict_identifiers=cli_args.strict_identifiers)

    if cli_args.file_path is None:
        console = Console(interpreter=interpreter, prompt=cli_args.prompt)
        try:
            console.run()
        except KeyboardInterrupt:
            logger.info("👋 Console interrupted")
        return

    input_path: Path = Path(cli_args.file_path)
    output_path: Path = cli_args.output or build_output_path(input_path)

    try:
        BatchRunner(
            input_file=input_path,
            output_file=output_path,
            interpreter=interpreter,
        ).run()
    except (ValueError, OSError) as exc:
        raise SystemExit(f"Error: {exc}") from exc


if __name__ == "__main__":
    main()
