import sys

from loguru import logger

PALETTE = {
    "solver": "green",
    "cli": "blue",
}


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<8}</> | "
        "<level>{message}</level>\n"
    )


def configure(verbose: bool = False) -> None:
    """Replace loguru's default sink with a component-tagged stderr sink."""
    logger.remove()
    logger.add(
        sys.stderr,
        format=formatter,
        level="DEBUG" if verbose else "INFO",
        colorize=True,
    )
