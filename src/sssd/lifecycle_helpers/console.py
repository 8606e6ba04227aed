"""Console output for human-readable status lines."""


def console(message: str, *, quiet: bool = False) -> None:
    """Emit console output unless suppressed."""
    if not quiet:
        print(message, flush=True)
