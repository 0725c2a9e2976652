from groupie.artist.core import ArtistRepository

__all__ = ["ArtistRepository"]
