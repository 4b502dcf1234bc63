"""Interactive read-eval-print loop."""
from io import TextIOBase
import sys

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_interpreter.common.errors import ParseError
from arithmetic_interpreter.common.interpreter import Interpreter
from arithmetic_interpreter.common.models import format_number


def strip_line_ending(line: str) -> str:
    """Remove trailing carriage-return and newline characters."""
    return line.rstrip("\r\n")


class Console(BaseModel):
    """
    Prompt for expressions, evaluate them and print the results.

    The loop runs until the input stream is exhausted; evaluation errors are
    reported and never stop the loop.
    """

    # Allow arbitrary types like text streams
    model_config = ConfigDict(arbitrary_types_allowed=True)

    interpreter: Interpreter = Field(default_factory=Interpreter, description="Expression interpreter")
    prompt: str = Field(default=">>> ", description="Prompt written before each read")
    stdin: TextIOBase = Field(default_factory=lambda: sys.stdin, description="Stream expressions are read from")
    stdout: TextIOBase = Field(default_factory=lambda: sys.stdout, description="Stream results are written to")

    def respond(self, line: str) -> str:
        """
        Evaluate one input line and build the text to display.

        :param str line: Line read from the user, possibly with its line ending

        :return: ``">>> <value>"`` or ``"Error: <message>"``
        :rtype: str
        """
        try:
            value = self.interpreter.interpret(strip_line_ending(line))
        except ParseError as exc:
            return f"Error: {exc.message}"
        return f">>> {format_number(value)}"

    def run(self) -> None:
        """
        Run the loop until end of input.

        :return: None
        """
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()

            line = self.stdin.readline()
            # readline() returns "" only at end of input
            if not line:
                self.stdout.write("\n")
                break

            self.stdout.write(f"{self.respond(line)}\n")
            self.stdout.flush()
