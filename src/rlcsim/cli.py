# src/rlcsim/cli.py
"""
Interactive command-line loop: collect, solve, print, ask to continue.

The program takes no flags, reads no files and no environment variables.
Exit code 0 means normal termination, including a failed read at the
"analyze another circuit?" prompt. Exit code 1 means the input stream ended
while a circuit was still being entered.
"""
import logging
import sys
from typing import Callable, Optional, TextIO

from .collector import InputCollector, InputUnavailableError
from .config import AnalysisConfig
from .errors import AnalysisRunError, RLCSimError
from .log_config import setup_logging
from .report import BANNER, ReportPrinter
from .solver import solve

logger = logging.getLogger(__name__)

CLOSING_MESSAGE = "Thank you for using the RLC circuit calculator. Goodbye!"

# ANSI: clear screen, cursor home.
CLEAR_SCREEN_SEQUENCE = "\033[2J\033[H"


def clear_screen(output: TextIO):
    """Clears the terminal. Does nothing when `output` is not a terminal."""
    isatty = getattr(output, "isatty", None)
    if isatty is not None and isatty():
        output.write(CLEAR_SCREEN_SEQUENCE)
        output.flush()


def run_session(collector: InputCollector, printer: ReportPrinter, output: TextIO) -> int:
    """
    Runs analysis cycles until the user declines to continue.

    Returns:
        The number of circuits analyzed.

    Raises:
        AnalysisRunError: If the input stream fails while a circuit is being collected.
    """
    analyzed = 0
    try:
        while True:
            params = collector.collect()
            clear_screen(output)
            results = solve(params)
            printer.print_report(results)
            analyzed += 1
            if not collector.ask_continue():
                break
    except InputUnavailableError as e:
        logger.info(f"Input unavailable after {analyzed} analyzed circuit(s): {e}")
        raise AnalysisRunError(e.get_diagnostic_report()) from e
    logger.info(f"Session finished after {analyzed} analyzed circuit(s).")
    return analyzed


def main(
    config: Optional[AnalysisConfig] = None,
    input_func: Callable[[str], str] = input,
    output: Optional[TextIO] = None,
) -> int:
    """
    Entry point of the interactive calculator.

    Args:
        config: Settings to use; defaults to `AnalysisConfig()`.
        input_func: Line reader, the builtin `input` by default.
        output: Stream for all user-facing text; the current `sys.stdout` by default.

    Returns:
        The process exit code.
    """
    config = config if config is not None else AnalysisConfig()
    out = output if output is not None else sys.stdout
    logging.getLogger(__package__).setLevel(config.log_level)

    print(BANNER + "\n", file=out)
    collector = InputCollector(config, input_func=input_func, output=out)
    printer = ReportPrinter(config, output=out)
    try:
        run_session(collector, printer, out)
    except RLCSimError as e:
        print(str(e), file=out)
        print(CLOSING_MESSAGE, file=out)
        return 1

    print(CLOSING_MESSAGE, file=out)
    return 0


def run():
    """Console-script wrapper around `main`; the only place logging is configured."""
    setup_logging()
    sys.exit(main())
