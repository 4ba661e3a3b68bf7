"""Runtime package: settings resolution, logging and dependency wiring."""

__all__: list[str] = []
