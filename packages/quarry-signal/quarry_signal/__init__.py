"""quarry-signal - In-process event bus for the quarry engine."""
from __future__ import annotations

from quarry_signal.bus import ANY, SignalBus
from quarry_signal.systems import make_signal_system

__all__ = ["ANY", "SignalBus", "make_signal_system"]
