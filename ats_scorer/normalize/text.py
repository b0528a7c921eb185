"""Token-level normalization shared by the job and résumé sides of the pipeline."""

from __future__ import annotations

import re
import unicodedata

from ats_scorer.taxonomy.lexicon import SHORT_TECH_TERMS, TECH_PUNCTUATED_TERMS

# Separators between tokens: whitespace, list punctuation and bullet glyphs.
_SPLIT_RE = re.compile(r"[\s,;|()\[\]{}<>\"`!?:•◦▪▫●○■□◆◇▶►·–—…]+")
_DOTTED_TECH_RE = re.compile(r"^[a-z0-9]+\.(?:js|net|io)$")
_DISALLOWED_RE = re.compile(r"[^a-z0-9+\-]")
_EDGE_PUNCT = ".-+"

MIN_TOKEN_LENGTH = 2
NGRAM_SIZES = (1, 2, 3)


def ascii_fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text or "")
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).encode("ascii", "ignore").decode("ascii")


def _clean_token(raw: str) -> list[str]:
    token = raw.strip(".")
    if not token:
        return []
    if raw in TECH_PUNCTUATED_TERMS:
        return [raw]
    if token in TECH_PUNCTUATED_TERMS or _DOTTED_TECH_RE.match(token):
        return [token]

    cleaned: list[str] = []
    for part in token.split("/"):
        part = _DISALLOWED_RE.sub("", part.replace(".", ""))
        # "c++" survives; stray "-" or "+" at the edges does not.
        if part not in TECH_PUNCTUATED_TERMS:
            part = part.strip(_EDGE_PUNCT)
        if part:
            cleaned.append(part)
    return cleaned


def normalize(text: str) -> list[str]:
    """Lower-case, ASCII-fold and tokenize ``text``.

    Technical tokens such as ``c++``, ``node.js`` or ``ci/cd`` keep their
    punctuation; everything else is reduced to letters, digits, ``-`` and ``+``.
    Tokens shorter than two characters are dropped unless they are known
    single-letter languages (``r``, ``c``).
    """
    folded = ascii_fold(text).lower()
    tokens: list[str] = []
    for raw in _SPLIT_RE.split(folded):
        if not raw:
            continue
        for token in _clean_token(raw):
            if len(token) < MIN_TOKEN_LENGTH and token not in SHORT_TECH_TERMS:
                continue
            tokens.append(token)
    return tokens


def ngrams(tokens: list[str], n: int) -> list[str]:
    if n <= 0 or n > len(tokens):
        return []
    return [" ".join(tokens[index:index + n]) for index in range(len(tokens) - n + 1)]


def ngram_set(tokens: list[str], sizes: tuple[int, ...] = NGRAM_SIZES) -> set[str]:
    grams: set[str] = set()
    for size in sizes:
        grams.update(ngrams(tokens, size))
    return grams


def stem(word: str) -> str:
    """Strip one of ``ing``/``ed``/``s`` and then a trailing ``e``.

    Only plain alphabetic words of four letters or more are touched, so
    ``manage``, ``managed`` and ``managing`` share the stem ``manag`` while
    ``c++`` or ``aws`` stay as they are.
    """
    if len(word) < 4 or not word.isalpha():
        return word
    base = word
    if base.endswith("ing") and len(base) - 3 >= 3:
        base = base[:-3]
    elif base.endswith("ed") and len(base) - 2 >= 3:
        base = base[:-2]
    elif base.endswith("s") and not base.endswith("ss") and len(base) - 1 >= 3:
        base = base[:-1]
    if base.endswith("e") and len(base) > 3:
        base = base[:-1]
    return base


def stem_phrase(phrase: str) -> str:
    return " ".join(stem(word) for word in phrase.split())


def inflections(word: str) -> set[str]:
    """Common conjugated forms of a single alphabetic word."""
    if len(word) < 4 or not word.isalpha():
        return set()
    base = stem(word)
    forms = {base + "ed", base + "ing"}
    if word.endswith("e"):
        forms.add(word + "s")
    elif base == word:
        forms.add(word + "s")
    forms.discard(word)
    return forms


def fold_hyphens(tokens: list[str]) -> list[str]:
    """Split hyphenated words (``problem-solving`` -> ``problem``, ``solving``)."""
    folded: list[str] = []
    for token in tokens:
        folded.extend(part for part in token.split("-") if part)
    return folded
