from clearly_defined.transport.httpx_adapter import AsyncHttpxTransport, HttpxTransport

__all__ = ["AsyncHttpxTransport", "HttpxTransport"]
