"""
Interactive console REPL implemented with prompt_toolkit.

Provides command history, tab completion with value hints, and a toolbar
showing the expected argument.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import FileHistory, InMemoryHistory
from prompt_toolkit.styles import Style

from cvar_console.console import ConsoleHost, ConsoleShell, StdoutShell

EXIT_WORDS = {"exit", "quit"}


class HostCompleter(Completer):
    """Completer backed by ConsoleHost.complete()."""

    def __init__(self, host: ConsoleHost):
        self.host = host

    def get_completions(self, document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        result = self.host.complete(text)

        # Word under the cursor, empty right after a space
        word = "" if text[-1:].isspace() else document.get_word_before_cursor(WORD=True)
        # An opening quote is replaced along with the word
        prefix = word.lstrip("\"'")

        for option in result.options:
            if not option.value.startswith(prefix):
                continue
            insert = f'"{option.value}"' if any(c.isspace() for c in option.value) else option.value
            yield Completion(
                insert,
                start_position=-len(word),
                display=option.value,
                display_meta=option.hint or "",
            )


def get_style() -> Style:
    """Get the prompt style."""
    return Style.from_dict({
        "prompt": "ansicyan bold",
        "bottom-toolbar": "noreverse",
    })


def repl(
    host: ConsoleHost,
    history_file: Optional[Path] = None,
    shell: Optional[ConsoleShell] = None,
):
    """Run the interactive console.

    Features:
        - Command history (persistent when history_file is given)
        - Tab completion for commands, CVar names and values
        - Bottom toolbar with the hint for the argument being typed
        - Ctrl+C to cancel input, Ctrl+D or 'exit' to quit

    Args:
        host: Console host with the commands to serve.
        history_file: File for persistent history.
        shell: Output channel (defaults to stdout/stderr).
    """
    shell = shell or StdoutShell()

    if history_file is not None:
        history_file.parent.mkdir(parents=True, exist_ok=True)
        history = FileHistory(str(history_file))
    else:
        history = InMemoryHistory()

    session: PromptSession = PromptSession(
        history=history,
        completer=HostCompleter(host),
        auto_suggest=AutoSuggestFromHistory(),
        style=get_style(),
        complete_while_typing=True,
        enable_history_search=True,
    )

    def get_bottom_toolbar():
        """Show the prompt label for the argument being typed."""
        hint = host.complete(session.default_buffer.document.text_before_cursor).hint
        if not hint:
            return ""
        return HTML(" <b>{}</b>").format(hint)

    session.bottom_toolbar = get_bottom_toolbar

    print("CVar console. Type 'help' for commands, 'cvar ?' to list CVars.")
    print("Tab: completion | Ctrl+R: search history | Ctrl+D: exit")
    print()

    while True:
        try:
            line = session.prompt("> ").strip()
        except KeyboardInterrupt:
            continue
        except EOFError:
            break

        if not line:
            continue
        if line in EXIT_WORDS:
            break

        host.execute(line, shell)

    print("Goodbye!")
