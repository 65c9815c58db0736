"""Language identification pipeline and shared types."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class IdentificationResult:
    """A single language identification result.

    Frozen dataclass holding the language code (``None`` when nothing
    matched) and the cosine similarity between the text and that language.
    """

    language: str | None
    similarity: float

    def to_dict(self) -> dict[str, str | float | None]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'language'`` and ``'similarity'`` keys.
        """
        return {
            "language": self.language,
            "similarity": self.similarity,
        }


NO_MATCH = IdentificationResult(language=None, similarity=0.0)
