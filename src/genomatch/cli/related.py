import asyncio
from genomatch.cli import program
from genomatch.engine.analysis.engines import AsyncGenomeMatchingEngine
from genomatch.engine.analysis.matcher import GenomeMatcher
from genomatch.engine.reading import read_multiple_fastas
from genomatch.engine.writing import write_related_genomes_as_csv


parser = program.subparsers.add_parser("related", help="Rank the indexed genomes related to query genomes.")
program.add_library_arguments(parser)

parser.add_argument(
    "--query", "-q",
    nargs="+",
    action='extend',
    dest="queries",
    required=True,
    default=[],
    type=str,
    help="The FASTA files holding the query genomes. Multiple can be listed."
)

parser.add_argument(
    "--fragment-match-length", "-fml",
    dest="fragment_match_length",
    required=False,
    default=None,
    type=int,
    help="The length of the fragments each query is cut into. Defaults to the minimum search length."
)

parser.add_argument(
    "--threshold", "-t",
    dest="threshold",
    required=False,
    default=20.0,
    type=float,
    help="The lowest percentage of matching query fragments for a genome to count as related."
)

parser.add_argument(
    "--threads",
    dest="threads",
    required=False,
    default=4,
    type=int,
    help="The number of query genomes compared at once."
)

parser.add_argument(
    "--stop-on-fail",
    action="store_true",
    dest="stop_on_fail",
    required=False,
    default=False,
    help="Stop at the first query genome without related genomes instead of recording it as empty."
)

parser.add_argument(
    "out",
    help="The output CSV path."
)


async def run(args):
    genome_matcher = GenomeMatcher(args.minimum_search_length)
    async for genome in read_multiple_fastas(args.fastas):
        genome_matcher.add_genome(genome)
    fragment_match_length = args.fragment_match_length if args.fragment_match_length is not None else genome_matcher.minimum_search_length
    with AsyncGenomeMatchingEngine(genome_matcher, args.threads, args.stop_on_fail) as matching_engine:
        async for query in read_multiple_fastas(args.queries):
            matching_engine.find_related_genomes(query, fragment_match_length, args.exact, args.threshold)
        named_results = (named_result async for named_result, _ in matching_engine)
        await write_related_genomes_as_csv(named_results, args.out)

def run_asynchronously(args):
    asyncio.run(run(args))

parser.set_defaults(func=run_asynchronously)
