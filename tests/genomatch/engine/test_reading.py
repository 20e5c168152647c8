import pytest
from genomatch.engine.exceptions.matching import InvalidGenomeSequenceException
from genomatch.engine.reading import load_genomes, read_fasta, read_multiple_fastas
from genomatch.engine.structures.genomics import Genome


async def test_fasta_reader_keeps_full_names():
    genomes = [genome async for genome in read_fasta("tests/resources/library_genomes.fasta")]
    assert [genome.name for genome in genomes] == ["Genome A", "Genome B", "Genome C"]
    assert genomes[0] == Genome("Genome A", "ACGTACGT")

async def test_fasta_reader_joins_lines_and_upper_cases():
    genomes = [genome async for genome in read_fasta("tests/resources/multiline_genome.fasta")]
    assert genomes == [
        Genome("Halobacterium jilantaiense", "ACGTACGTNNACGTAC"),
        Genome("Second", "GATTACA")
    ]

async def test_multiple_fasta_reader_chains_files():
    genomes = read_multiple_fastas(["tests/resources/library_genomes.fasta", "tests/resources/query_genomes.fasta"])
    names = [genome.name async for genome in genomes]
    assert names == ["Genome A", "Genome B", "Genome C", "Query AB", "Query none"]

async def test_unknown_symbols_are_rejected():
    with pytest.raises(InvalidGenomeSequenceException):
        async for _ in read_fasta("tests/resources/invalid_symbols.fasta"):
            pass

def test_empty_sequences_are_rejected():
    with pytest.raises(InvalidGenomeSequenceException):
        load_genomes("tests/resources/empty_sequence.fasta")

def test_load_genomes_from_handle():
    with open("tests/resources/library_genomes.fasta") as fasta_handle:
        genomes = load_genomes(fasta_handle)
    assert len(genomes) == 3
    assert genomes[2].length() == 16
