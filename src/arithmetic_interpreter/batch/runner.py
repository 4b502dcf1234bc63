"""Evaluate every expression of a file and write the results."""
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, FilePath

from arithmetic_interpreter.batch.archive import load_expressions
from arithmetic_interpreter.common.interpreter import Interpreter
from arithmetic_interpreter.common.logger import logger
from arithmetic_interpreter.common.models import EvaluationResult


class BatchRunner(BaseModel):
    """
    Evaluate a file of expressions, one expression per line.

    Features:
        - Reads plain text files and .zip, .tar.xz or .7z archives
        - Skips blank lines
        - Writes each result to disk as soon as it is computed
        - Reports errors per line without stopping the run
    """

    model_config = ConfigDict(frozen=True)

    input_file: FilePath = Field(..., description="File or archive holding the expressions")
    output_file: Path = Field(..., description="Path to write evaluation results")
    interpreter: Interpreter = Field(default_factory=Interpreter, description="Expression interpreter")

    def run(self) -> List[EvaluationResult]:
        """
        Evaluate every expression and write one line per result.

        Output lines are ``<expr> = <value>`` or ``<expr> -> ERROR: <message>``.

        :return: Results in input order
        :rtype: List[EvaluationResult]
        :raises ValueError: If the input archive is unsupported or holds no .txt file
        """
        expressions: List[str] = load_expressions(self.input_file)
        logger.info(f"📄 Loaded {len(expressions)} expressions from {self.input_file}")

        results: List[EvaluationResult] = []
        with self.output_file.open("w", encoding="utf-8") as f_out:
            for line_number, expression in enumerate(expressions, start=1):
                logger.debug(f"📄 Line {line_number}: {expression}")
                result = self.interpreter.evaluate(expression)
                results.append(result)

                # Write output immediately
                f_out.write(f"{result.render()}\n")
                f_out.flush()

        logger.info(f"✅ Results written to {self.output_file}")
        return results
