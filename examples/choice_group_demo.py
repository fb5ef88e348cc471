import logging
import sys

from optgroups import Command, Option, OptionGroup, group_choice
from optgroups.utils import setup_logging

setup_logging(console_log_level=logging.DEBUG if "--debug" in sys.argv else logging.WARNING)


class SqliteOptions(OptionGroup):
    path = Option("--db-path", default="app.db")


class PostgresOptions(OptionGroup):
    host = Option("--pg-host", required=True)
    port = Option("--pg-port", type=int, default=5432)


command = Command("migrate")
command.add_option("--debug", type=bool, default=False)
database = group_choice(
    Option("--db"),
    ("sqlite", SqliteOptions("SQLite")),
    ("postgres", PostgresOptions("PostgreSQL")),
).required().register(command)


def split(argv: list[str]) -> list[tuple[str, list[str]]]:
    """Pair every flag with the token after it; enough for this demo."""
    return [(argv[i], [argv[i + 1]]) for i in range(0, len(argv) - 1, 2)]


if __name__ == "__main__":
    args = [arg for arg in sys.argv[1:] if arg != "--debug"]
    command.main(command.invocations_from(split(args)))
    chosen = database.value
    print(f"{chosen.name}: {chosen.values()}")
