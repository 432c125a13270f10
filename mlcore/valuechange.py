"""A record of one change to a named value."""

from __future__ import annotations

from dataclasses import dataclass, field

from mlcore.path import Path
from mlcore.value import Value


@dataclass
class ValueChange:
    """A value at a path changing from an old value to a new one.

    The gesture flags mark the first and last change of a continuous edit.
    The trigger widget names the widget that caused the change, if any.
    """

    name: Path = field(default_factory=Path)
    new_value: Value = field(default_factory=Value)
    old_value: Value = field(default_factory=Value)
    start_gesture: bool = False
    end_gesture: bool = False
    trigger_widget: Path = field(default_factory=Path)

    def __post_init__(self) -> None:
        if not isinstance(self.name, Path):
            self.name = Path(self.name)
        if not isinstance(self.new_value, Value):
            self.new_value = Value(self.new_value)
        if not isinstance(self.old_value, Value):
            self.old_value = Value(self.old_value)
        if not isinstance(self.trigger_widget, Path):
            self.trigger_widget = Path(self.trigger_widget)

    def __str__(self) -> str:
        return f"[{self.name}: {self.old_value} -> {self.new_value}]"