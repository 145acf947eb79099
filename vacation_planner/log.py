import logging

from rich.logging import RichHandler


def setup_logging(level: str = "INFO") -> None:
    """Route every `vacation_planner.*` logger to a rich console handler."""
    root = logging.getLogger("vacation_planner")
    if root.handlers:
        return
    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.INFO))
    root.propagate = False
