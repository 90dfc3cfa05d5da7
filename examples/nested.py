import sys

from argtree import category, flag, leaf, option, positional, run_cli
from argtree.console import console
from argtree.signals import HelpRequested
from argtree.utils import setup_logging


def serve(args, context) -> None:
    mode = "daemon" if args.daemon else "foreground"
    console.print(f"Serving on port {args.port} ({mode})")


def migrate_up(args, context) -> None:
    console.print(f"Applying {args.steps} migration(s)")


def migrate_down(args, context) -> int:
    if args.steps > 1 and not args.force:
        console.print("Refusing to roll back more than one step without --force")
        return 1
    console.print(f"Rolling back {args.steps} migration(s)")
    return 0


def seed(args, context) -> None:
    console.print(f"Seeding from {args.file}")


def show_help(signal: HelpRequested) -> None:
    node = signal.node
    console.print(f"[bold]{signal.path or node.name}[/] {node.help}")
    if signal.spec is not None:
        for field in signal.spec.visible_fields:
            console.print(f"  {', '.join(field.get_flags()) or field.name:<16} {field.help}")
    else:
        for child in node.visible_children:
            console.print(f"  {child.name:<16} {child.help}")


root = category(
    "nested",
    [
        leaf(
            "serve",
            [
                flag("daemon").short("d").help("Run in the background"),
                option("port", int, 8080).short("p").help("Port to listen on"),
            ],
            serve,
            help="Start the server",
        ),
        category(
            "db",
            [
                category(
                    "migrate",
                    [
                        leaf("up", [option("steps", "u32", 1)], migrate_up, help="Apply"),
                        leaf(
                            "down",
                            [option("steps", "u32", 1), flag("force").short("f")],
                            migrate_down,
                            help="Roll back",
                        ),
                    ],
                    help="Schema migrations",
                ),
                leaf("seed", [positional("file")], seed, help="Load seed data"),
            ],
            help="Database commands",
        ),
    ],
    help="A nested command tree",
)

if __name__ == "__main__":
    setup_logging()
    sys.exit(run_cli(root, help_renderer=show_help))
