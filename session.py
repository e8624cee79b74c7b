"""
Interactive zoom / pan / new-equation loop around render_text().

The transitions are pure functions on PlotSettings; the loop takes its
input and output callables as arguments.
"""

import config
from config import PlotSettings, DEFAULT_SETTINGS
from equations import normalize_equation
from implicit_plot import render_text

INSTRUCTIONS = "\n".join([
    "",
    "Instruction:",
    "   -Supports +, -, *, /, ^, sin, cos, tan, log, ln, exp.",
    "   -Does not support asin, acos, atan, or advanced functions like abs or floor.",
    "   -Avoid undefined operations like division by zero.",
])

MENU = "\n".join([
    "",
    "Options:",
    "1. Zoom in (+)",
    "2. Zoom out (-)",
    "3. Move left (<)",
    "4. Move right (>)",
    "5. Move up (^)",
    "6. Move down (v)",
    "7. New equation",
    "8. Exit",
])

# Command registry: menu code -> settings transition
COMMANDS: dict[str, dict] = {
    "1": dict(name="zoom in", func=config.zoom_in),
    "2": dict(name="zoom out", func=config.zoom_out),
    "3": dict(name="move left", func=config.move_left),
    "4": dict(name="move right", func=config.move_right),
    "5": dict(name="move up", func=config.move_up),
    "6": dict(name="move down", func=config.move_down),
}

NEW_EQUATION = "7"
EXIT = "8"


def apply_command(settings: PlotSettings, code: str) -> tuple[PlotSettings, str]:
    """
    Dispatch one menu code.

    Returns the next settings and what the loop should do:
    "redraw", "new" (settings already reset), "exit" or "invalid"
    (settings unchanged).
    """
    if code in COMMANDS:
        return COMMANDS[code]["func"](settings), "redraw"
    if code == NEW_EQUATION:
        return config.reset(), "new"
    if code == EXIT:
        return settings, "exit"
    return settings, "invalid"


def _read_codes(read) -> list[str]:
    # every non-blank character is one command, like repeated scanf(" %c")
    while True:
        codes = [c for c in read() if not c.isspace()]
        if codes:
            return codes


def run_session(equation: str, read=input, write=print, settings: PlotSettings = DEFAULT_SETTINGS) -> PlotSettings:
    """
    Render, show the menu, apply one command; repeat until exit or end of input.

    A line holding several codes ("14") queues them, one redraw each.
    Choosing a new equation drops whatever is left of the line.

    Returns the settings in effect when the session ended.
    """
    equation = normalize_equation(equation)
    pending = []
    try:
        while True:
            write(render_text(equation, settings))
            write(MENU)
            if not pending:
                pending = _read_codes(lambda: read("Choose option: "))
            code = pending.pop(0)

            settings, action = apply_command(settings, code)
            if action == "exit":
                break
            if action == "invalid":
                write("Invalid option!")
            elif action == "new":
                pending = []
                equation = normalize_equation(read("Enter new equation: "))
    except EOFError:
        # end of input ends the session
        write("")
    return settings
