"""Open terminal windows in project directories, optionally running claude."""

from __future__ import annotations

import logging
import platform
import shlex
import shutil
import subprocess

logger = logging.getLogger(__name__)

ASSISTANT_COMMAND = "claude"

# Tried in order on Linux.
LINUX_TERMINALS = [
    "gnome-terminal",
    "konsole",
    "xfce4-terminal",
    "mate-terminal",
    "terminator",
    "xterm",
]


def detect_terminal() -> str | None:
    """Name of the first Linux terminal emulator found on PATH."""
    for name in LINUX_TERMINALS:
        if shutil.which(name):
            return name
    return None


def _linux_command(terminal: str, directory: str, script: str) -> list[str]:
    shell = f"cd {shlex.quote(directory)} && {script}; exec bash"
    if terminal == "gnome-terminal":
        return ["gnome-terminal", f"--working-directory={directory}", "--", "bash", "-c", shell]
    if terminal == "konsole":
        return ["konsole", "--workdir", directory, "-e", "bash", "-c", shell]
    if terminal in ("xfce4-terminal", "mate-terminal", "terminator"):
        return [terminal, f"--working-directory={directory}", "-e", f"bash -c {shlex.quote(shell)}"]
    return ["xterm", "-e", "bash", "-c", shell]


def open_terminal(directory: str, command: str | None = None) -> str | None:
    """Open a new terminal window in directory and optionally run command.

    Returns a label for the terminal used, or None if none could be found.
    """
    system = platform.system()
    script = command or "true"

    if system == "Windows":
        inner = f'cd /d "{directory}" && {command}' if command else f'cd /d "{directory}"'
        subprocess.Popen(f'start cmd.exe /k "{inner}"', shell=True)
        logger.debug("opened cmd.exe in %s", directory)
        return "cmd.exe"

    if system == "Darwin":
        applescript = (
            'tell application "Terminal"\n'
            f'    do script "cd {shlex.quote(directory)} && {script}"\n'
            "    activate\n"
            "end tell"
        )
        subprocess.Popen(["osascript", "-e", applescript])
        logger.debug("opened Terminal.app in %s", directory)
        return "Terminal"

    terminal = detect_terminal()
    if terminal is None:
        return None
    subprocess.Popen(_linux_command(terminal, directory, script))
    logger.debug("opened %s in %s", terminal, directory)
    return terminal


def launch_assistant(directory: str) -> str | None:
    """Start claude in a new terminal window rooted at directory."""
    return open_terminal(directory, ASSISTANT_COMMAND)


def copy_to_clipboard(text: str) -> bool:
    """Put text on the clipboard via xclip, xsel, pbcopy or clip. True on success."""
    candidates = [
        ["pbcopy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
        ["clip"],
    ]
    for cmd in candidates:
        if not shutil.which(cmd[0]):
            continue
        result = subprocess.run(cmd, input=text, text=True, capture_output=True)
        if result.returncode == 0:
            return True
    return False
