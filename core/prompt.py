"""Interactive multi-select prompt built on prompt_toolkit."""

import logging
from dataclasses import dataclass
from typing import Protocol

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI, StyleAndTextTuples, to_formatted_text
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.text import Text

from .errors import PromptCancelled
from .models import UpdateChoice
from .ui import console as default_console
from .ui import make_console

logger = logging.getLogger(__name__)

POINTER = "❯"
CHECKED = "◉"
UNCHECKED = "◯"
MORE_HINT = "(Move up and down to reveal more choices)"

PROMPT_STYLE = Style.from_dict({
    "question-mark": "#5faf5f bold",
    "question": "bold",
    "pointer": "#5fafd7 bold",
    "checked": "#5faf5f",
    "hint": "#808080",
})


@dataclass
class Separator:
    """A non-selectable line of the prompt."""

    line: Text


@dataclass
class Choice:
    """A selectable prompt line and the update it stands for."""

    title: Text
    value: UpdateChoice
    short: str  # echoed once the selection is finished


PromptEntry = Separator | Choice


class Prompter(Protocol):
    """Anything able to ask the operator for a subset of choices."""

    def select(
        self, message: str, choices: list[PromptEntry], page_size: int
    ) -> list[UpdateChoice]:
        ...


class CheckboxState:
    """Cursor, checked set and scroll window of a checkbox list."""

    def __init__(self, choices: list[PromptEntry], page_size: int):
        self.choices = choices
        self.page_size = max(1, page_size)
        self.selectable = [i for i, entry in enumerate(choices) if isinstance(entry, Choice)]
        self.checked: set[int] = set()
        self.cursor = 0
        self.offset = 0
        self._scroll_to_cursor()

    @property
    def current_index(self) -> int | None:
        if not self.selectable:
            return None
        return self.selectable[self.cursor]

    @property
    def paginated(self) -> bool:
        return len(self.choices) > self.page_size

    def move(self, delta: int) -> None:
        """Move the cursor between selectable rows, wrapping around."""
        if not self.selectable:
            return
        self.cursor = (self.cursor + delta) % len(self.selectable)
        self._scroll_to_cursor()

    def toggle(self) -> None:
        index = self.current_index
        if index is None:
            return
        if index in self.checked:
            self.checked.discard(index)
        else:
            self.checked.add(index)

    def toggle_all(self) -> None:
        if len(self.checked) == len(self.selectable):
            self.checked.clear()
        else:
            self.checked = set(self.selectable)

    def visible_range(self) -> range:
        return range(self.offset, min(len(self.choices), self.offset + self.page_size))

    def selected(self) -> list[UpdateChoice]:
        """Checked values in row order."""
        return [self.choices[i].value for i in self.selectable if i in self.checked]

    def _scroll_to_cursor(self) -> None:
        index = self.current_index
        if index is None:
            return
        if self.cursor == 0 and index < self.page_size:
            # keep the separators above the first row in view
            self.offset = 0
        elif index < self.offset:
            self.offset = index
        elif index >= self.offset + self.page_size:
            self.offset = index - self.page_size + 1


class CheckboxPrompt:
    """Checkbox list prompt: Space toggles, Enter confirms, Control-C cancels."""

    def __init__(self, console: Console | None = None, pipe_input=None, output=None):
        self.console = console or default_console
        self._input = pipe_input
        self._output = output
        self._ansi = make_console(force_terminal=True, color_system="standard", width=10_000)

    def select(
        self, message: str, choices: list[PromptEntry], page_size: int
    ) -> list[UpdateChoice]:
        """Block until the operator confirms or cancels.

        Raises:
            PromptCancelled: the operator pressed Control-C or Escape
        """
        state = CheckboxState(choices, page_size)
        if not state.selectable:
            return []

        logger.debug("Prompting with %d choices, page size %d", len(state.selectable), state.page_size)
        application = self._build_application(message, state)
        try:
            updates = application.run()
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptCancelled("Selection cancelled") from exc

        shorts = ", ".join(choices[i].short for i in state.selectable if i in state.checked)
        self.console.print(
            Text.assemble(("? ", "success"), (message, "bold"), " ", (shorts, "cyan"))
        )
        return updates

    def _to_fragments(self, text: Text) -> StyleAndTextTuples:
        with self._ansi.capture() as capture:
            self._ansi.print(text, end="", soft_wrap=True)
        return to_formatted_text(ANSI(capture.get()))

    def _render(self, message: str, state: CheckboxState) -> StyleAndTextTuples:
        fragments: StyleAndTextTuples = [
            ("class:question-mark", "? "),
            ("class:question", message),
            ("", "\n\n"),
        ]
        for index in state.visible_range():
            entry = state.choices[index]
            if isinstance(entry, Separator):
                fragments.append(("", " "))
                fragments.extend(self._to_fragments(entry.line))
            else:
                is_current = index == state.current_index
                is_checked = index in state.checked
                fragments.append(("class:pointer", POINTER if is_current else " "))
                fragments.append(
                    ("class:checked" if is_checked else "", CHECKED if is_checked else UNCHECKED)
                )
                fragments.append(("", " "))
                fragments.extend(self._to_fragments(entry.title))
            fragments.append(("", "\n"))

        if state.paginated:
            fragments.append(("class:hint", MORE_HINT))
        elif fragments[-1] == ("", "\n"):
            fragments.pop()
        return fragments

    def _build_application(self, message: str, state: CheckboxState) -> Application:
        bindings = KeyBindings()

        @bindings.add("up")
        @bindings.add("k")
        def _(event):
            state.move(-1)

        @bindings.add("down")
        @bindings.add("j")
        def _(event):
            state.move(1)

        @bindings.add(" ")
        def _(event):
            state.toggle()

        @bindings.add("a")
        def _(event):
            state.toggle_all()

        @bindings.add("enter")
        def _(event):
            event.app.exit(result=state.selected())

        @bindings.add("c-c")
        @bindings.add("escape")
        def _(event):
            """Abort the whole review."""
            event.app.exit(exception=KeyboardInterrupt())

        control = FormattedTextControl(
            lambda: self._render(message, state),
            focusable=True,
            show_cursor=False,
        )
        return Application(
            layout=Layout(Window(control, dont_extend_height=True, always_hide_cursor=True)),
            key_bindings=bindings,
            style=PROMPT_STYLE,
            full_screen=False,
            erase_when_done=True,
            input=self._input,
            output=self._output,
        )
