"""Output sinks for inspecting entities."""

from atm_model.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
