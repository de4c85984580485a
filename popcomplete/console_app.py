"""Interactive playground: a prompt_toolkit prompt with the popup attached."""

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.patch_stdout import patch_stdout  # type: ignore
from prompt_toolkit.shortcuts import print_formatted_text
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .config import Settings
from .sources import LatexSource, WordListSource
from .toolkit import attach_popup


class ConsoleApp:
    """Reads lines with autocomplete until the user exits."""

    def __init__(self, settings: Settings, words: list[str] | None = None):
        self.settings = settings
        self.console = Console()
        self.word_source = WordListSource(words or [])

        # Completion menu styling: transparent background, light-blue highlight
        self.prompt_style = Style.from_dict({
            'prompt': 'ansicyan bold',
            "completion-menu": "bg:default",
            "completion-menu.completion": "bg:default fg:#bbbbbb",
            "completion-menu.completion.current": "bg:#5fafff fg:#202020 bold",
        })

        # prompt_toolkit's own completer stays off; the popup drives the menu.
        self.prompt_session: PromptSession[str] = PromptSession(
            style=self.prompt_style,
            completer=None,
            history=None,
        )
        self.popup, self.key_bindings = attach_popup(
            self.prompt_session.default_buffer,
            settings,
            sources=[LatexSource(), self.word_source],
        )

    def _print_banner(self):
        """Print the application banner."""
        banner = Text()
        banner.append("popcomplete", style="bold white")
        banner.append(" - autocomplete playground", style="dim")
        self.console.print(Panel(banner, border_style="blue", padding=(1, 2)))

        help_text = Text()
        help_text.append("Type to get suggestions from ", style="white")
        help_text.append(f"{len(self.word_source.words)} words", style="cyan")
        help_text.append(" and LaTeX commands (after a backslash).\n", style="white")
        help_text.append(f"{self.settings.insertion_key.value}", style="cyan")
        help_text.append(" accepts, ↑↓ move the selection, esc dismisses.\n", style="white")
        help_text.append("Enter 'exit' or press Ctrl-D to quit.", style="dim")
        self.console.print(Panel(help_text, title="Help", border_style="dim"))

    async def run(self):
        """Run the prompt loop."""
        self._print_banner()

        with patch_stdout():
            while True:
                try:
                    line = await self.prompt_session.prompt_async(
                        HTML("<prompt>› </prompt>"),
                        key_bindings=self.key_bindings,
                    )
                except (EOFError, KeyboardInterrupt):
                    break

                if line.strip() in ("exit", "quit"):
                    break
                if line:
                    print_formatted_text(HTML("<ansigreen>{}</ansigreen>").format(line))

        self.popup.key_binder.disable()
        print_formatted_text(HTML("<ansiyellow>Exiting...</ansiyellow>"))
