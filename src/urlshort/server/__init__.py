"""Host-layer plumbing — negotiation and ASGI message sending."""
