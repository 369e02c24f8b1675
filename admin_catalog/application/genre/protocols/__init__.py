from .genre_gateway import GenreGatewayProtocol

__all__ = ["GenreGatewayProtocol"]
