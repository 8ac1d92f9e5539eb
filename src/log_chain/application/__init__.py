"""Application layer: ports and the use cases composing handler policies."""
