"""Counting how often each name occurs, with None counted as unknown."""

from dataclasses import dataclass, field


@dataclass
class Counts:
    """Occurrence counts by name, kept in order of first appearance."""

    counts: dict = field(default_factory=dict)

    def add(self, name):
        """Count one more occurrence of ``name`` (None for an unknown name)."""
        self.counts[name] = self.counts.get(name, 0) + 1

    def format(self):
        """Return ``name: count`` lines, with the unknown count last."""
        lines = [
            f"{name}: {count}\n"
            for name, count in self.counts.items()
            if name is not None
        ]
        if None in self.counts:
            lines.append(f"<unknown> : {self.counts[None]}\n")
        return "".join(lines)