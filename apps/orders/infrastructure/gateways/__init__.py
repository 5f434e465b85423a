from .order_gateway import RemoteOrderGateway

__all__ = ['RemoteOrderGateway']
