# src/ledger/cli/commands.py

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

from ..core.state import AppState
from ..errors import UnknownCommandError
from ..tasks import task_api

CommandHandler = Callable[[AppState, argparse.Namespace], int]
ParserConfigurer = Callable[[argparse.ArgumentParser, AppState], None]

HELP_WORDS = ("help", "-h", "--help")

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    configure: ParserConfigurer | None = None

    def build_parser(self, state: AppState, prog: str) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=f"{prog} {self.name}", description=self.help_text)
        if self.configure is not None:
            self.configure(parser, state)
        return parser


class CommandRegistry:
    """Subcommand registry: `<prog> <command> [flags...]`."""

    def __init__(self, prog: str = "ledger") -> None:
        self.prog = prog
        self._commands: dict[str, Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        configure: ParserConfigurer | None = None,
    ) -> None:
        self._commands[name] = Command(name, handler, help_text, configure)

    def names(self) -> list[str]:
        return list(self._commands)

    def lookup(self, name: str) -> Command:
        cmd = self._commands.get(name)
        if cmd is None:
            raise UnknownCommandError(name)
        return cmd

    def build_help(self) -> str:
        lines = [f"Usage: {self.prog} <command> [options]"]
        width = max([len(n) for n in self._commands] + [len("help")])
        for name, cmd in self._commands.items():
            lines.append(f"  {name.ljust(width)}  {cmd.help_text}")
        lines.append(f"  {'help'.ljust(width)}  display this help text")
        return "\n".join(lines)

    def handle(self, state: AppState, argv: Sequence[str], *, err: TextIO | None = None) -> int:
        """
        Dispatch one command line and return the process exit code.

        Help (or no command at all) prints usage to stderr and returns 1.
        LedgerError from the command propagates to the caller.
        """
        err = err if err is not None else sys.stderr

        if not argv or argv[0] in HELP_WORDS:
            print(self.build_help(), file=err)
            return 1

        cmd = self.lookup(argv[0])
        # Flags may appear anywhere among the description words of `add`.
        args = cmd.build_parser(state, self.prog).parse_intermixed_args(list(argv[1:]))
        logger.debug("Dispatching %s args=%s", cmd.name, vars(args))
        return cmd.handler(state, args)


# ---- parsers ----


def _configure_add(parser: argparse.ArgumentParser, state: AppState) -> None:
    parser.add_argument(
        "--closed", action="store_true", help="automatically close the new task"
    )
    parser.add_argument("description", nargs="*", help="task description words")


def _configure_ls(parser: argparse.ArgumentParser, state: AppState) -> None:
    parser.add_argument("-l", dest="long_id", action="store_true", help="print full task ids")
    parser.add_argument("-a", dest="show_all", action="store_true", help="include closed tasks")


def _configure_prefix(parser: argparse.ArgumentParser, state: AppState) -> None:
    parser.add_argument("id_prefix", help="task id or unique id prefix")


def _configure_rpt(parser: argparse.ArgumentParser, state: AppState) -> None:
    default_days = int(getattr(state.settings, "report_days", task_api.DEFAULT_REPORT_DAYS))
    parser.add_argument(
        "-d",
        dest="days",
        type=int,
        default=default_days,
        help=f"number of days previous to report (default: {default_days})",
    )


def _configure_dump(parser: argparse.ArgumentParser, state: AppState) -> None:
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=task_api.DUMP_FORMATS,
        default="text",
        help="output format (default: text)",
    )


# ---- handlers ----


def cmd_add(state: AppState, args: argparse.Namespace) -> int:
    task_api.add_task(state, " ".join(args.description), auto_close=args.closed)
    return 0


def cmd_ls(state: AppState, args: argparse.Namespace) -> int:
    task_api.list_tasks(state, long_id=args.long_id, show_all=args.show_all)
    return 0


def cmd_cl(state: AppState, args: argparse.Namespace) -> int:
    task_api.close_task(state, args.id_prefix)
    return 0


def cmd_rm(state: AppState, args: argparse.Namespace) -> int:
    task_api.remove_task(state, args.id_prefix)
    return 0


def cmd_rpt(state: AppState, args: argparse.Namespace) -> int:
    task_api.report_tasks(state, days=args.days)
    return 0


def cmd_dump(state: AppState, args: argparse.Namespace) -> int:
    task_api.dump_tasks(state, fmt=args.fmt)
    return 0


def build_registry(prog: str = "ledger") -> CommandRegistry:
    reg = CommandRegistry(prog)
    reg.register("add", cmd_add, "add a new task", _configure_add)
    reg.register("cl", cmd_cl, "close a task", _configure_prefix)
    reg.register("dump", cmd_dump, "dump contents of task file", _configure_dump)
    reg.register("ls", cmd_ls, "display list of tasks", _configure_ls)
    reg.register("rm", cmd_rm, "remove a task", _configure_prefix)
    reg.register("rpt", cmd_rpt, "report recently closed tasks", _configure_rpt)
    return reg


registry = build_registry()
