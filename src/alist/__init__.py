from alist import logconfig


def init() -> None:
    """Configure logging for alist.

    Importing alist has no side effects; applications which want the package
    logger configured from the `ALIST_*` environment variables call this once at
    startup. Subsequent calls only refresh the logging level."""
    logconfig.configure_root_logger()
