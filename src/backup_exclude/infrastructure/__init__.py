"""Infrastructure layer: filesystem walking and entry filters."""
