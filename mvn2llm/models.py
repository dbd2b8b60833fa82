"""Core data models shared across mvn2llm components."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class DocRecord:
    """A documentation comment paired with the declaration it precedes."""

    origin: str
    documentation: str
    signature: str

    @property
    def normalized_signature(self) -> str:
        """Signature with every whitespace run collapsed to a single space."""
        return " ".join(self.signature.split())

    def render(self) -> str:
        return f"File: {self.origin}\n{self.documentation}\n{self.normalized_signature}"

    def to_dict(self) -> Dict[str, str]:
        return {
            "origin": self.origin,
            "documentation": self.documentation,
            "signature": self.normalized_signature,
        }

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class SourceUnit:
    """One file's worth of lines, scanned with its own scanner state."""

    origin: str
    lines: tuple[str, ...]
