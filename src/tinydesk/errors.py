class TinyDeskError(Exception):
    """Base class for errors that end a scrape run."""


class FetchError(TinyDeskError):
    """The page could not be loaded (navigation, HTTP or timeout failure)."""


class ContainerNotFoundError(FetchError):
    """The story container never showed up on the loaded page."""
