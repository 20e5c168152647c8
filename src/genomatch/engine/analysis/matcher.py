from collections import defaultdict
from dataclasses import replace
import logging

from genomatch.engine.analysis.trie import ApproximateTrie
from genomatch.engine.exceptions.matching import FragmentTooShortException, GenomeExtractionOverrunException, MinimumLengthTooShortException, NoGenomeMatchesException, NoRelatedGenomesException
from genomatch.engine.structures.genomics import FragmentHit, Genome, RelatedGenome

logger = logging.getLogger(__name__)

def count_matching_symbols(fragment: str, subject: str, substitutions_allowed: int) -> int:
    """
    Counts how far `fragment` agrees with `subject` from the first symbol on.

    A disagreeing symbol still counts while substitutions remain; the count
    stops at the first disagreement after that.
    """
    matching = 0
    for fragment_symbol, subject_symbol in zip(fragment, subject):
        if fragment_symbol != subject_symbol:
            if substitutions_allowed <= 0:
                break
            substitutions_allowed -= 1
        matching += 1
    return matching

class GenomeMatcher:
    def __init__(self, minimum_search_length: int):
        if minimum_search_length < 1:
            raise ValueError(f"The minimum search length must be at least 1 (got {minimum_search_length}).")
        self._minimum_search_length = minimum_search_length
        self._fragments: ApproximateTrie[FragmentHit] = ApproximateTrie()
        self._genomes: dict[str, Genome] = {}

    @property
    def minimum_search_length(self) -> int:
        return self._minimum_search_length

    def reset(self):
        self._fragments.reset()
        self._genomes.clear()

    def add_genome(self, genome: Genome):
        self._genomes[genome.name] = genome
        fragment_count = 0
        for position in range(genome.length() - self._minimum_search_length + 1):
            fragment = genome.extract(position, self._minimum_search_length)
            self._fragments.insert(fragment, FragmentHit(genome.name, position, genome.length()))
            fragment_count += 1
        logger.debug(f"Indexed {fragment_count} fragments of \"{genome.name}\".")

    def find_genomes_with_this_dna(self, fragment: str, minimum_length: int, exact_match_only: bool) -> list[FragmentHit]:
        """
        Finds, for every indexed genome, the best match for `fragment` that is at least `minimum_length` long.

        Longer matches beat shorter ones and earlier positions break ties.
        Raises a GenomeMatchingException when the lengths are unusable or when
        no genome matches.
        """
        if len(fragment) < minimum_length:
            raise FragmentTooShortException(len(fragment), minimum_length)
        if minimum_length < self._minimum_search_length:
            raise MinimumLengthTooShortException(minimum_length, self._minimum_search_length)

        candidates = self._fragments.find(fragment[:self._minimum_search_length], exact_match_only)
        substitutions_allowed = 0 if exact_match_only else 1
        best_hits: dict[str, FragmentHit] = {}
        for candidate in candidates:
            genome = self._genomes[candidate.genome_name]
            try:
                subject = genome.extract(candidate.position, len(fragment))
            except GenomeExtractionOverrunException:
                logger.debug(f"Skipping \"{candidate.genome_name}\" at position {candidate.position}: fragment runs past the end of the genome.")
                continue
            match_length = count_matching_symbols(fragment, subject, substitutions_allowed)
            if match_length < minimum_length:
                continue
            best_hit = best_hits.get(candidate.genome_name)
            if best_hit is not None:
                if match_length < best_hit.match_length:
                    continue
                if match_length == best_hit.match_length and candidate.position >= best_hit.position:
                    continue
            best_hits[candidate.genome_name] = replace(candidate, match_length=match_length)

        if len(best_hits) == 0:
            raise NoGenomeMatchesException(fragment)
        return [best_hits[genome_name] for genome_name in sorted(best_hits)]

    def find_related_genomes(self, query: Genome, fragment_match_length: int, exact_match_only: bool, match_percent_threshold: float) -> list[RelatedGenome]:
        """
        Ranks indexed genomes by the share of `query`'s consecutive fragments they contain.

        The query is cut into non-overlapping fragments of `fragment_match_length`
        symbols (a shorter remainder is ignored). Genomes matching at least
        `match_percent_threshold` percent of the fragments are returned, highest
        percentage first and then by name.
        """
        if fragment_match_length < self._minimum_search_length:
            raise MinimumLengthTooShortException(fragment_match_length, self._minimum_search_length)

        fragment_count = query.length() // fragment_match_length
        genome_hits: dict[str, int] = defaultdict(int)
        for fragment_index in range(fragment_count):
            fragment = query.extract(fragment_index * fragment_match_length, fragment_match_length)
            try:
                fragment_hits = self.find_genomes_with_this_dna(fragment, fragment_match_length, exact_match_only)
            except NoGenomeMatchesException:
                continue
            for fragment_hit in fragment_hits:
                genome_hits[fragment_hit.genome_name] += 1

        related_genomes = []
        for genome_name, hits in genome_hits.items():
            percent_match = 100 * hits / fragment_count
            if percent_match >= match_percent_threshold:
                related_genomes.append(RelatedGenome(genome_name, percent_match))
        related_genomes.sort(key=lambda related_genome: (-related_genome.percent_match, related_genome.genome_name))
        logger.info(f"\"{query.name}\": {fragment_count} fragments compared, {len(related_genomes)} related genomes found.")

        if len(related_genomes) == 0:
            raise NoRelatedGenomesException(query.name, match_percent_threshold)
        return related_genomes
