"""
Sequence alphabets, normalization and validation.

Normalization is permissive: it recovers a usable sequence from loosely
formatted text (FASTA headers, line breaks, digits, mixed case).
Validation is strict and only reports; `require_valid` is the gate that
raises for callers who want a hard rejection.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

from genolyze.exceptions import InvalidSequenceError
from genolyze.utils.amino_acids import STANDARD_AMINO_ACIDS
from genolyze.utils.genetic_code import STOP_SYMBOL

logger = logging.getLogger(__name__)

DNA_ALPHABET = frozenset("ATGC")
RNA_ALPHABET = frozenset("AUGC")
PROTEIN_ALPHABET = frozenset(STANDARD_AMINO_ACIDS + STOP_SYMBOL)

_NON_LETTERS = re.compile(r"[^A-Za-z]")
_WHITESPACE = re.compile(r"\s")


class SequenceKind(str, Enum):
    """Declared kind of a sequence; decides its alphabet."""

    DNA = "dna"
    RNA = "rna"
    PROTEIN = "protein"

    @classmethod
    def parse(cls, value: Union[str, "SequenceKind"]) -> "SequenceKind":
        """
        Coerce a kind given as a member or a string ("DNA", "rna", ...).

        Raises:
            ValueError: If the value names no known kind
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown sequence kind: {value!r} "
                f"(expected one of {', '.join(k.value for k in cls)})"
            ) from None

    @property
    def alphabet(self) -> frozenset:
        return _ALPHABETS[self]


_ALPHABETS = {
    SequenceKind.DNA: DNA_ALPHABET,
    SequenceKind.RNA: RNA_ALPHABET,
    SequenceKind.PROTEIN: PROTEIN_ALPHABET,
}

_VALID_PATTERNS = {
    SequenceKind.DNA: re.compile(r"[ATGC]+"),
    SequenceKind.RNA: re.compile(r"[AUGC]+"),
    SequenceKind.PROTEIN: re.compile(r"[ACDEFGHIKLMNPQRSTVWY*]+"),
}


@dataclass(frozen=True)
class NormalizedSequence:
    """
    A cleaned symbol sequence together with its declared kind.

    Attributes:
        sequence: Uppercase symbols, no whitespace or headers
        kind: Declared SequenceKind
    """
    sequence: str
    kind: SequenceKind

    def __len__(self) -> int:
        return len(self.sequence)

    def __str__(self) -> str:
        return self.sequence

    def __iter__(self) -> Iterator[str]:
        return iter(self.sequence)


SequenceLike = Union[str, NormalizedSequence]


def clean_sequence(sequence: SequenceLike) -> str:
    """
    Keep letters only and uppercase them.

    Example:
        >>> clean_sequence("atg cgt\\n12aa")
        'ATGCGTAA'
    """
    return _NON_LETTERS.sub("", str(sequence or "")).upper()


def rna_to_dna(sequence: str) -> str:
    """Convert RNA to DNA (U -> T)."""
    return sequence.replace("U", "T")


def dna_to_rna(sequence: str) -> str:
    """Convert DNA to RNA (T -> U)."""
    return sequence.replace("T", "U")


def normalize(
    raw: Optional[SequenceLike],
    kind: Union[str, SequenceKind] = SequenceKind.DNA
) -> NormalizedSequence:
    """
    Normalize raw user or FASTA text into a sequence of the given kind.

    Steps:
        1. Drop FASTA header lines (first non-blank character is '>')
        2. Keep letters only and uppercase them
        3. Harmonize bases: T -> U for RNA, U -> T for DNA

    Nothing is validated here; ambiguity codes and other letters pass
    through untouched.

    Args:
        raw: Raw text, or an already normalized sequence
        kind: Declared sequence kind

    Returns:
        NormalizedSequence

    Example:
        >>> normalize(">seq1 test\\nATG CGU\\n", "dna").sequence
        'ATGCGT'
    """
    kind = SequenceKind.parse(kind)
    if not raw:
        return NormalizedSequence("", kind)

    lines = str(raw).splitlines()
    body = "".join(line for line in lines if not line.strip().startswith(">"))
    seq = clean_sequence(body)

    if kind is SequenceKind.RNA:
        seq = dna_to_rna(seq)
    elif kind is SequenceKind.DNA:
        seq = rna_to_dna(seq)

    return NormalizedSequence(seq, kind)


def validate(
    sequence: SequenceLike,
    kind: Union[str, SequenceKind] = SequenceKind.DNA
) -> bool:
    """
    Check that every symbol belongs to the alphabet of `kind`.

    Whitespace is ignored and case is folded before checking. Empty
    sequences are not valid.

    Example:
        >>> validate("atg cga", "dna")
        True
        >>> validate("AUGN", "rna")
        False
    """
    kind = SequenceKind.parse(kind)
    seq = _WHITESPACE.sub("", str(sequence or "")).upper()
    return _VALID_PATTERNS[kind].fullmatch(seq) is not None


def require_valid(
    sequence: SequenceLike,
    kind: Union[str, SequenceKind, None] = None
) -> NormalizedSequence:
    """
    Validate a sequence and return it as a NormalizedSequence.

    Args:
        sequence: Sequence text or NormalizedSequence
        kind: Declared kind; defaults to the NormalizedSequence's own
            kind, or DNA for plain strings

    Raises:
        InvalidSequenceError: If the sequence is empty or holds a symbol
            outside the alphabet (the first offender is reported)
    """
    seq, kind = resolve_sequence(sequence, kind, clean=False)
    seq = _WHITESPACE.sub("", seq).upper()

    if not seq:
        raise InvalidSequenceError(f"Empty {kind.value.upper()} sequence")

    alphabet = kind.alphabet
    for i, symbol in enumerate(seq):
        if symbol not in alphabet:
            logger.debug("Rejected %s sequence at position %d", kind.value, i)
            raise InvalidSequenceError(
                f"Invalid {kind.value.upper()} symbol '{symbol}' at position {i}",
                symbol=symbol,
                position=i,
            )

    return NormalizedSequence(seq, kind)


def resolve_sequence(
    sequence: Optional[SequenceLike],
    kind: Union[str, SequenceKind, None] = None,
    clean: bool = True
) -> Tuple[str, SequenceKind]:
    """
    Unpack analyzer input into (text, kind).

    An explicit `kind` wins; otherwise a NormalizedSequence keeps its
    own kind and plain strings default to DNA. With `clean`, the text
    goes through clean_sequence().
    """
    if isinstance(sequence, NormalizedSequence):
        text = sequence.sequence
        if kind is None:
            kind = sequence.kind
    else:
        text = "" if sequence is None else str(sequence)

    kind = SequenceKind.parse(kind if kind is not None else SequenceKind.DNA)
    if clean:
        text = clean_sequence(text)
    return text, kind
