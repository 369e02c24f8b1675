from .category_gateway import CategoryGatewayProtocol

__all__ = ["CategoryGatewayProtocol"]
