import asyncio
from io import TextIOWrapper
import logging
from typing import Any, AsyncGenerator, Iterable, Union
from Bio import SeqIO
from Bio.SeqRecord import SeqRecord

from genomatch.engine.exceptions.matching import InvalidGenomeSequenceException
from genomatch.engine.structures.genomics import GENOME_ALPHABET, Genome

logger = logging.getLogger(__name__)

def genome_from_record(record: SeqRecord) -> Genome:
    # The whole header line names the genome, not just its first word.
    name = record.description or record.id
    sequence = str(record.seq).upper()
    if len(sequence) == 0:
        raise InvalidGenomeSequenceException(name, "the sequence is empty.")
    unknown_symbols = set(sequence) - GENOME_ALPHABET
    if unknown_symbols:
        raise InvalidGenomeSequenceException(name, f"unknown symbols {', '.join(sorted(unknown_symbols))} (expected only {', '.join(sorted(GENOME_ALPHABET))}).")
    return Genome(name, sequence)

def load_genomes(handle: Union[str, TextIOWrapper]) -> list[Genome]:
    genomes = [genome_from_record(record) for record in SeqIO.parse(handle, "fasta")]
    logger.debug(f"Loaded {len(genomes)} genomes from {handle}.")
    return genomes

async def read_fasta(handle: Union[str, TextIOWrapper]) -> AsyncGenerator[Genome, Any]:
    genomes = await asyncio.to_thread(load_genomes, handle)
    for genome in genomes:
        yield genome

async def read_multiple_fastas(handles: Iterable[Union[str, TextIOWrapper]]) -> AsyncGenerator[Genome, Any]:
    for handle in handles:
        async for genome in read_fasta(handle):
            yield genome
