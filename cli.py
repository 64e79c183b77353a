import logging
import os
import sys

from command_shell.request import CommandRequest
from command_shell.response import Reply, reply
from command_shell.shell import CommandShell
from sortedseq.models.exceptions import ConfigurationError
from sortedseq.service import SequenceService

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "ERROR").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


def main():
    try:
        service = SequenceService(element_kind=os.environ.get("SORTEDSEQ_KIND") or None)
    except ConfigurationError as e:
        logger.critical(f"Cannot start shell: {e}")
        sys.exit(1)

    shell = CommandShell()
    register_commands(shell, service)
    logger.debug(f"Registered commands: {sorted(shell.commands)}")
    shell.run()


def register_commands(shell: CommandShell, service: SequenceService):

    def value_command(name: str, operation):
        @shell.command(name)
        def handler(request: CommandRequest) -> Reply:
            if not request.has_argument():
                return reply(f"Usage: {name} <value>")

            try:
                value = request.value()
            except ValueError as e:
                return reply(str(e), success=False)

            result = operation(value)
            return reply(result.message, success=result.success)

        return handler

    value_command("insert", service.insert_value)
    value_command("remove", service.remove_value)
    value_command("contains", service.contains_value)

    @shell.command("stats")
    def stats(request: CommandRequest) -> Reply:
        stats = service.stats()

        def show(value):
            return "None" if value is None else str(value)

        lines = [
            "List Statistics:",
            f"  Count: {stats.count}",
            f"  Empty: {'Yes' if stats.is_empty else 'No'}",
            f"  Type: {show(stats.value_type)}",
            f"  First: {show(stats.first)}",
            f"  Last: {show(stats.last)}",
            f"  Values: [{', '.join(str(v) for v in stats.values)}]",
        ]
        return reply("\n".join(lines))

    @shell.command("clear")
    def clear(request: CommandRequest) -> Reply:
        result = service.clear_list()
        return reply(result.message, success=result.success)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
