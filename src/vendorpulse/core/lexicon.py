"""Polarity lexicons and the comment scanner."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

import yaml

from .config import settings
from .constants import LexiconConstants
from .errors import LexiconError
from .models import PolarityCounts, review_field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PolarityLexicon:
    """Immutable pair of positive and negative word lists."""
    positive: Tuple[str, ...]
    negative: Tuple[str, ...]

    @classmethod
    def from_words(cls, positive: Iterable[str], negative: Iterable[str]) -> "PolarityLexicon":
        """Build a lexicon, lower-casing and de-duplicating while keeping order."""
        return cls(positive=_normalize_words(positive), negative=_normalize_words(negative))


def _normalize_words(words: Iterable[str]) -> Tuple[str, ...]:
    seen, out = set(), []
    for word in words:
        w = str(word).strip().lower()
        if not w or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return tuple(out)


DEFAULT_LEXICON = PolarityLexicon.from_words(
    LexiconConstants.POSITIVE_WORDS,
    LexiconConstants.NEGATIVE_WORDS,
)


def load_lexicon(path: str) -> PolarityLexicon:
    """
    Load a lexicon from a YAML file with ``positive`` and ``negative`` lists.

    Raises LexiconError if the file is missing, unparsable, or either list
    is absent or empty.
    """
    lexicon_path = Path(path)
    try:
        with open(lexicon_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise LexiconError(f"Lexicon file {lexicon_path} not found") from e
    except yaml.YAMLError as e:
        raise LexiconError(f"Invalid YAML in lexicon file {lexicon_path}: {e}") from e

    if not isinstance(data, dict):
        raise LexiconError(f"Lexicon file {lexicon_path} must be a mapping")

    lists = {}
    for key in ("positive", "negative"):
        words = data.get(key)
        if not isinstance(words, list) or not words:
            raise LexiconError(f"Lexicon file {lexicon_path} needs a non-empty '{key}' list")
        lists[key] = words

    lexicon = PolarityLexicon.from_words(lists["positive"], lists["negative"])
    logger.info(f"Loaded lexicon from {lexicon_path}: "
                f"{len(lexicon.positive)} positive, {len(lexicon.negative)} negative")
    return lexicon


def scan_polarity(reviews, lexicon: PolarityLexicon = DEFAULT_LEXICON) -> PolarityCounts:
    """
    Count lexicon hits in review comments.

    Each lexicon word counts at most once per comment and matches as a plain
    substring, so "professional" also hits inside "unprofessional". Every
    review with a non-empty comment adds one to ``total_comments`` whether
    or not anything matched.
    """
    positive_count = negative_count = total_comments = 0
    for review in reviews:
        comment = review_field(review, "comment")
        if not isinstance(comment, str) or not comment:
            continue
        total_comments += 1
        text = comment.lower()
        positive_count += sum(1 for word in lexicon.positive if word in text)
        negative_count += sum(1 for word in lexicon.negative if word in text)

    return PolarityCounts(
        positive_count=positive_count,
        negative_count=negative_count,
        total_comments=total_comments,
    )


def configured_lexicon() -> PolarityLexicon:
    """Lexicon selected by settings: the YAML override if set, else the built-in lists."""
    if settings.lexicon_file:
        return load_lexicon(settings.lexicon_file)
    return DEFAULT_LEXICON
