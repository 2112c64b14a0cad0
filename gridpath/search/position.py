"""Grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    @classmethod
    def parse(cls, text: str) -> "Position":
        """Parse the ``"x,y"`` form used by the CLI and map tooling."""
        parts = [part.strip() for part in text.split(",")]
        if len(parts) != 2:
            raise ValueError(f"expected 'x,y', got {text!r}")
        try:
            return cls(int(parts[0]), int(parts[1]))
        except ValueError as exc:
            raise ValueError(f"expected integer coordinates, got {text!r}") from exc

    def __str__(self) -> str:
        return f"{self.x},{self.y}"
