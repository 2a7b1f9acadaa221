from rich.console import Console
from rich.markup import escape
from rich.pretty import Pretty

from models import TopicAggregate


class HotTopicReport:
    """Prints the most viewed topic to the console."""

    def __init__(self, console: Console):
        self.console = console

    def render(self, result: TopicAggregate) -> None:
        self.console.rule("[cyan]Summary", align="left", style="cyan")
        if result.is_empty:
            self.console.print("No topic found", style="yellow")
        else:
            self.console.print(
                f"Most viewed topic id is : [magenta]'{escape(result.id)}'[/magenta] "
                f"with [magenta]{result.views_count}[/magenta] views"
            )
        self.console.rule(style="cyan")

        self.console.rule("[cyan]Detailed result", align="left", style="cyan")
        self.console.print(Pretty(self.to_dict(result)))

    @staticmethod
    def summary_line(result: TopicAggregate) -> str:
        if result.is_empty:
            return "No topic found"
        return f"Most viewed topic id is : '{result.id}' with {result.views_count} views"

    @staticmethod
    def to_dict(result: TopicAggregate) -> dict:
        """Dumps the aggregate with sorted video ids, so that the output is stable."""
        dumped = result.model_dump()
        dumped["video_ids"] = sorted(result.video_ids)
        return dumped
