import sys

from argtree import ArgumentSpec, HelpRequested, ParseError, flag, option, required
from argtree.console import console

spec = ArgumentSpec(
    [
        flag("verbose").short("v").help("Enable verbose output"),
        option("name", str, "World").short("n").help("Name to greet"),
        option("count", int, 1).short("c").help("Number of greetings"),
        required("config", str).help("Path to the config file"),
    ],
    title="Simple Demo",
    description="Greets someone a number of times.",
)


def main() -> int:
    try:
        args = spec.resolve(sys.argv[1:])
    except HelpRequested:
        for field in spec.visible_fields:
            console.print(f"  {', '.join(field.get_flags()):<20} {field.help}")
        return 0
    except ParseError as error:
        console.print(f"[bold red]error:[/] {error}")
        return 2

    if args.verbose:
        console.print(f"Using config {args.config}")
    for _ in range(args.count):
        console.print(f"Hello, {args.name}!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
