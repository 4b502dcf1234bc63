"""Allow ``python -m arithmetic_interpreter``."""
from arithmetic_interpreter.main import main


main()
