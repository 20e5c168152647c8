import csv
from os import PathLike
from typing import Any, AsyncGenerator, AsyncIterable, Iterable, TypeVar, Union

from genomatch.engine.structures.genomics import FragmentHit, NamedRelatedGenomes

T = TypeVar("T")

FRAGMENT_HIT_COLUMNS = ("genome_name", "position", "match_length")
RELATED_GENOME_COLUMNS = ("query_name", "genome_name", "percent_match")

async def _iterate(iterable: Union[AsyncIterable[T], Iterable[T]]) -> AsyncGenerator[T, Any]:
    if isinstance(iterable, AsyncIterable):
        async for item in iterable:
            yield item
    else:
        for item in iterable:
            yield item

async def write_fragment_hits_as_csv(fragment_hits: Union[AsyncIterable[FragmentHit], Iterable[FragmentHit]], handle: Union[str, bytes, PathLike[str], PathLike[bytes]]):
    with open(handle, "w", newline='') as filehandle:
        writer = csv.DictWriter(filehandle, fieldnames=FRAGMENT_HIT_COLUMNS)
        writer.writeheader()
        async for fragment_hit in _iterate(fragment_hits):
            writer.writerow({
                "genome_name": fragment_hit.genome_name,
                "position": fragment_hit.position,
                "match_length": fragment_hit.match_length
            })

async def write_related_genomes_as_csv(named_related_genomes: Union[AsyncIterable[NamedRelatedGenomes], Iterable[NamedRelatedGenomes]], handle: Union[str, bytes, PathLike[str], PathLike[bytes]]):
    with open(handle, "w", newline='') as filehandle:
        writer = csv.DictWriter(filehandle, fieldnames=RELATED_GENOME_COLUMNS)
        writer.writeheader()
        async for named_result in _iterate(named_related_genomes):
            if named_result.related_genomes is None:
                # keep queries without related genomes visible in the output
                writer.writerow({"query_name": named_result.query_name, "genome_name": "", "percent_match": ""})
                continue
            for related_genome in named_result.related_genomes:
                writer.writerow({
                    "query_name": named_result.query_name,
                    "genome_name": related_genome.genome_name,
                    "percent_match": related_genome.percent_match
                })
