"""Core data models for clisupport."""

from dataclasses import dataclass

DEFAULT_PROGRAM_NAME = "wireframe"


@dataclass
class Options:
    """Process-wide settings read by every diagnostic emitter."""

    program_name: str = DEFAULT_PROGRAM_NAME  # shown as the [name] prefix
    verbose: int = 0  # trace messages at or below this level are shown
