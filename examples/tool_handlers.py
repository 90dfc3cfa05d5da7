from argtree.console import console


def serve(args, context) -> None:
    mode = "daemon" if args.daemon else "foreground"
    console.print(f"[{context.path}] serving on port {args.port} ({mode})")
