"""Top-level package for the lucky-money slot machine.

The package exposes the subsystems (config, core, inventory, rigging, spin,
history, runtime) that make up the spin engine, plus a thin chat interface
that renders spin outcomes. Each subpackage should remain import-safe for any
runtime component.
"""

__all__: list[str] = []
