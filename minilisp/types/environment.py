"""Runtime environment for minilisp.

The Environment is a stack of frames. Each frame maps Symbols to values and
records the index of its parent frame, so a lookup walks parent indices from
the current frame outward to the root frame (index 0). Frames are addressed by
integer handles rather than shared references; the "current" frame is just an
index that is swapped in and restored around a user-function call.

Calls nest strictly, so frames are released in the reverse order they were
pushed and the stack never holds a frame that is unreachable from `current`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import Optional

from minilisp import LispValue
from minilisp.errors import LispInvalidSymbol, LispUnboundSymbol
from minilisp.types.symbol import Symbol

ROOT = 0


@dataclass
class Frame:
    """One scope level: bindings plus the handle of the enclosing frame."""

    parent: Optional[int]
    vars: dict[Symbol, LispValue] = field(default_factory=dict)


class Environment:
    """Frame stack with a movable current-frame handle."""

    __slots__ = ("frames", "current")

    def __init__(self):
        self.frames: list[Frame] = [Frame(parent=None)]
        self.current: int = ROOT

    @property
    def depth(self) -> int:
        return len(self.frames)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in the current frame only, overwriting any local binding.

        Raises LispInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispInvalidSymbol(f"cannot define {name!r} as a symbol")
        self.frames[self.current].vars[name] = value

    def define_root(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in the root frame regardless of the current frame."""
        if not isinstance(name, Symbol):
            raise LispInvalidSymbol(f"cannot define {name!r} as a symbol")
        self.frames[ROOT].vars[name] = value

    def find(self, name: Symbol) -> Optional[int]:
        """Handle of the nearest frame binding `name`, or None."""
        handle: Optional[int] = self.current
        while handle is not None:
            frame = self.frames[handle]
            if name in frame.vars:
                return handle
            handle = frame.parent
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Value bound to `name`, searching the current frame then each parent.

        Raises LispUnboundSymbol if no frame binds it.
        """
        handle = self.find(name)
        if handle is None:
            raise LispUnboundSymbol(name)
        return self.frames[handle].vars[name]

    def push_frame(self) -> int:
        """Create a frame parented at the current one and make it current."""
        self.frames.append(Frame(parent=self.current))
        self.current = len(self.frames) - 1
        return self.current

    def pop_frame(self) -> None:
        """Discard the top frame and make its parent current again."""
        if len(self.frames) == 1:
            raise RuntimeError("cannot pop the root frame")
        frame = self.frames.pop()
        self.current = frame.parent

    def unwind(self, handle: int = ROOT) -> None:
        """Drop every frame above `handle` and make it current."""
        del self.frames[handle + 1:]
        self.current = handle

    def _write_vars(self, frame: Frame, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in frame.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            frame = self.frames[self.current]
            self._write_vars(frame, buffer)
            if frame.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            handle: Optional[int] = self.current
            while handle is not None:
                frame = self.frames[handle]
                frame_buf = StringIO()
                self._write_vars(frame, frame_buf)
                chain.append(frame_buf.getvalue())
                handle = frame.parent
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
