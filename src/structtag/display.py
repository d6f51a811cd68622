from rich.console import Console
from rich.table import Table
from rich.text import Text

from .errors import StructTagError
from .schema import Tag
from .tags import Tags


class ConsoleDisplay:
    console = Console()

    @classmethod
    def display_tags(cls, tags: Tags, title: str = "Tags"):
        """Display a tag collection as a table, one row per tag."""
        table = Table(title=f"[bold blue]{title}", show_lines=False)
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Key", style="bold")
        table.add_column("Name")
        table.add_column("Options", style="magenta")

        for i, tag in enumerate(tags, 1):
            # Text keeps square brackets in keys and values literal
            table.add_row(
                str(i),
                Text(tag.key),
                Text(tag.name),
                Text(", ".join(tag.options)),
            )

        cls.console.print(table)
        if not len(tags):
            cls.console.print("[dim]No tags[/]")

    @classmethod
    def display_tag(cls, tag: Tag, value_only: bool = False):
        """Display a single tag, or only its value."""
        cls.console.print(Text(tag.value() if value_only else str(tag)), soft_wrap=True)

    @classmethod
    def display_tag_string(cls, tags: Tags):
        cls.console.print(Text(str(tags)), soft_wrap=True)

    @classmethod
    def display_error(cls, error: StructTagError):
        text = Text()
        text.append(f"{error.code.value}: ", style="bold red")
        text.append(str(error), style="red")
        cls.console.print(text, soft_wrap=True)
