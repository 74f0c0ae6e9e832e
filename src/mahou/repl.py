"""Interactive REPL for Mahou, powered by prompt_toolkit."""

from __future__ import annotations

import os
import re
import sys
import traceback
from dataclasses import dataclass, field
from typing import List

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.shortcuts import clear

from .grouper import GroupError, group_statements
from .lexer import tokenize
from .render import render_statements
from .repl_highlight import MahouLexer
from .table import format_tokens
from .token_types import Tok
from .utils import debug_py_trace_enabled

# Zero-width and invisible characters to strip from input.
_INVISIBLE_RE = re.compile("[\u200b\u200c\u200d\ufeff\u00a0\r]")

# Slash commands: name => (description, argument_hint).
_SLASH_CMDS = {
    "/clear": ("Clear the terminal screen", ""),
    "/py-traceback": ("Toggle Python traceback on errors", "[on|off]"),
    "/reset": ("Drop pending unterminated input", ""),
    "/tokens": ("Show the token table of the last input", ""),
}


@dataclass
class ReplState:
    """Text carried between prompts: input after the last terminator."""

    pending: str = ""
    last_tokens: List[Tok] = field(default_factory=list)


class _SlashCompleter(Completer):
    """Autocomplete slash commands on the primary prompt."""

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        if not text.startswith("/"):
            return

        for cmd, (desc, hint) in _SLASH_CMDS.items():
            if cmd.startswith(text):
                yield Completion(
                    cmd,
                    start_position=-len(text),
                    display_meta=desc,
                )


def _handle_slash(line: str, state: ReplState) -> bool:
    """Handle slash commands. Returns True if the line was a command."""
    stripped = line.strip()
    if not stripped.startswith("/"):
        return False

    parts = stripped.split(None, 1)
    cmd = parts[0]
    arg = parts[1] if len(parts) > 1 else ""

    if cmd == "/clear":
        clear()
        return True

    if cmd == "/py-traceback":
        if arg.lower() in ("on", "1", "true", "yes"):
            os.environ["MAHOU_DEBUG_PY_TRACE"] = "1"
        elif arg.lower() in ("off", "0", "false", "no"):
            os.environ.pop("MAHOU_DEBUG_PY_TRACE", None)
        elif arg == "":
            # Toggle.
            if debug_py_trace_enabled():
                os.environ.pop("MAHOU_DEBUG_PY_TRACE", None)
            else:
                os.environ["MAHOU_DEBUG_PY_TRACE"] = "1"
        else:
            print("Usage: /py-traceback [on|off]", file=sys.stderr)
            return True

        state_name = "on" if debug_py_trace_enabled() else "off"
        print(f"Python traceback: {state_name}")
        return True

    if cmd == "/reset":
        state.pending = ""
        state.last_tokens = []
        print("Pending input dropped.")
        return True

    if cmd == "/tokens":
        table = format_tokens(state.last_tokens)
        if table:
            print(table)
        return True

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return True


def _normalize(text: str) -> str:
    """Strip invisible characters from input."""
    return _INVISIBLE_RE.sub("", text)


def repl_eval(text: str, state: ReplState, skip_malformed: bool = False) -> List[str]:
    """Scan and group pending text plus *text*; return the rendered lines.

    Whatever follows the last terminator stays pending for the next call.
    A GroupError drops the pending text before propagating.
    """
    source = state.pending + text + "\n"
    tokens = tokenize(source)
    state.last_tokens = tokens

    try:
        statements = group_statements(tokens, skip_malformed=skip_malformed)
    except GroupError:
        state.pending = ""
        raise

    cut = source.rfind(";")
    rest = source[cut + 1:] if cut >= 0 else source
    state.pending = rest if rest.strip() else ""
    return render_statements(statements)


def repl(skip_malformed: bool = False) -> None:
    """Interactive read-render loop with prompt_toolkit."""
    state = ReplState()

    session: PromptSession[str] = PromptSession(
        history=InMemoryHistory(),
        lexer=MahouLexer(),
        completer=_SlashCompleter(),
        complete_while_typing=True,
    )

    print("mahou repl, Ctrl-D to exit, / for commands")

    while True:
        try:
            text = session.prompt("... " if state.pending else ">>> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("KeyboardInterrupt")
            continue

        text = _normalize(text)
        if not text.strip():
            continue

        if _handle_slash(text, state):
            continue

        try:
            lines = repl_eval(text, state, skip_malformed=skip_malformed)
        except GroupError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            if debug_py_trace_enabled():
                print("\nPython traceback:", file=sys.stderr)
                print("".join(traceback.format_tb(exc.__traceback__)), file=sys.stderr, end="")
            continue

        for line in lines:
            print(line)
