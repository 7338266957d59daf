"""
The "sys" and "esys" verbs offered to a chat client host.

The host registers both verbs, passes the words typed after the verb,
and acts on the returned CommandOutput: SEND output is replayed into
the current buffer as if the user had typed it, DISPLAY output is
only printed locally.
"""
from enum import Enum
from typing import NamedTuple, Optional, Sequence

from system_info.collector import SystemInfoCollector

COMMAND_DESCRIPTIONS = {
    "sys": "Send system informations",
    "esys": "Display system informations",
}
COMMAND_HELP = "all | cpu | mem | uname|os | disk | uptime | load"
COMMAND_COMPLETIONS = "all|cpu|mem|uname|os|disk|uptime|load"


class OutputAction(Enum):
    """What the host should do with the report line."""
    SEND = "send"
    DISPLAY = "display"


class CommandOutput(NamedTuple):
    action: OutputAction
    text: str


VERB_ACTIONS = {
    "sys": OutputAction.SEND,
    "esys": OutputAction.DISPLAY,
}


def handle_command(verb: str, argv: Sequence[str] = (),
                   collector: Optional[SystemInfoCollector] = None) -> CommandOutput:
    """
    Run a verb and return the line for the host.

    Args:
        verb: "sys" or "esys", with or without a leading slash.
        argv: Words after the verb; only the first one is used, as the category.
        collector: Collector to use; one is created for the running platform if omitted.

    Raises:
        ValueError: If the verb is not one of the registered verbs.
    """
    name = verb.lstrip("/")
    if name not in VERB_ACTIONS:
        raise ValueError(f"Unknown command: {verb}")

    collector = collector or SystemInfoCollector()
    category = argv[0] if argv else None
    return CommandOutput(VERB_ACTIONS[name], collector.compose_report(category))
