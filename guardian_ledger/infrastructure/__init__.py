"""Infrastructure layer: adapters, monitoring, observability and test stubs."""
