"""
Try:
    APP_HOST=api.example.com APP_API_KEY=secret python examples/environment.py
    APP_PORT=3000 python examples/environment.py --api-key mykey --debug
"""
import sys

from argtree import flag, leaf, option, required, run_cli
from argtree.console import console


def show(args, context) -> None:
    console.print("Configuration:")
    for name, value in args.items():
        console.print(f"  {name}: {value!r} ({args.source_of(name) or 'unset'})")


root = leaf(
    "environment",
    [
        flag("debug").short("d").help("Enable debug mode").env("APP_DEBUG"),
        option("host", str, "localhost").short("H").help("Server host").env("APP_HOST"),
        option("port", "u16", 8080).short("p").help("Server port").env("APP_PORT"),
        option("timeout", "u32", 30).short("t").help("Timeout in seconds").env("APP_TIMEOUT"),
        required("api-key", str).short("k").help("API key").env("APP_API_KEY"),
    ],
    show,
)

if __name__ == "__main__":
    sys.exit(run_cli(root))
