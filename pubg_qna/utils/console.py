"""
Console helpers.
"""
import os
import subprocess
import sys

ANSI_CLEAR = "\033[2J\033[H"


def clear_screen() -> None:
    """Clear the terminal. A no-op when stdout is not a terminal."""
    if not sys.stdout.isatty():
        return
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except FileNotFoundError:
        sys.stdout.write(ANSI_CLEAR)
        sys.stdout.flush()
