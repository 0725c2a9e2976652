from groupie.upstream.core import (
    UpstreamClient,
    close_upstream,
    setup_upstream,
    with_upstream,
)

__all__ = ["UpstreamClient", "close_upstream", "setup_upstream", "with_upstream"]
