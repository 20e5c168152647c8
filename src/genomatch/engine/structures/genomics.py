from dataclasses import dataclass
from typing import Sequence, Union

from genomatch.engine.exceptions.matching import GenomeExtractionOverrunException

GENOME_ALPHABET = frozenset("ACGTN")

@dataclass(frozen=True)
class Genome:
    name: str
    sequence: str

    def length(self) -> int:
        return len(self.sequence)

    def extract(self, position: int, length: int) -> str:
        if position < 0 or length < 0 or position + length > len(self.sequence):
            raise GenomeExtractionOverrunException(self.name, position, length, len(self.sequence))
        return self.sequence[position:position + length]

@dataclass(frozen=True)
class FragmentHit:
    genome_name: str
    position: int
    genome_length: int
    match_length: int = 0 # only known once a query has compared the full fragment

@dataclass(frozen=True)
class RelatedGenome:
    genome_name: str
    percent_match: float

@dataclass(frozen=True)
class NamedRelatedGenomes:
    query_name: str
    related_genomes: Union[Sequence[RelatedGenome], None]
