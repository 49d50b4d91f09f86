"""Post-creation script execution."""

import subprocess

from workhere.exceptions import ScriptExecutionError
from workhere.logging_config import get_logger

logger = get_logger(__name__)


def run_script(script: str, cwd: str) -> None:
    """Run ``script`` through the shell inside ``cwd``.

    Output goes straight to the terminal.

    Raises:
        ScriptExecutionError: If the script exits with a non-zero status.
    """
    logger.debug(f"Running {script!r} in {cwd}")
    result = subprocess.run(script, shell=True, cwd=cwd)
    if result.returncode != 0:
        raise ScriptExecutionError(script, result.returncode)
