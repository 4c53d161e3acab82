# ABOUTME: Verbose debug tracing enabled by the DEBUG environment variable
# ABOUTME: Prints tagged lines to stdout so they show up alongside server logs

from fishlog.config import Config


def debug_log(message: str, tag: str = "DEBUG") -> None:
    """Print a tagged debug line when Config.DEBUG is on."""
    if Config.DEBUG:
        print(f"[{tag}] {message}", flush=True)
