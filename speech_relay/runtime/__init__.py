"""Runtime package.

Keep this module dependency-light: importing `speech_relay.runtime.*` in unit
tests should not require Google credentials or network access.
"""

__all__: list[str] = []
