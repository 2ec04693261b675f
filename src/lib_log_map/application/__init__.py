"""Application layer: ports and use cases wiring converters into layouts."""
