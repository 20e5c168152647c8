import asyncio
from genomatch.cli import program
from genomatch.engine.analysis.matcher import GenomeMatcher
from genomatch.engine.reading import read_multiple_fastas
from genomatch.engine.writing import write_fragment_hits_as_csv


parser = program.subparsers.add_parser("search", help="Find the genomes containing a DNA fragment.")
program.add_library_arguments(parser)

parser.add_argument(
    "--minimum-length", "-ml",
    dest="minimum_length",
    required=False,
    default=None,
    type=int,
    help="The shortest match to report. Defaults to the minimum search length."
)

parser.add_argument(
    "fragment",
    help="The DNA fragment to search for."
)

parser.add_argument(
    "out",
    help="The output CSV path."
)


async def run(args):
    genome_matcher = GenomeMatcher(args.minimum_search_length)
    async for genome in read_multiple_fastas(args.fastas):
        genome_matcher.add_genome(genome)
    minimum_length = args.minimum_length if args.minimum_length is not None else genome_matcher.minimum_search_length
    fragment_hits = genome_matcher.find_genomes_with_this_dna(args.fragment.upper(), minimum_length, args.exact)
    await write_fragment_hits_as_csv(fragment_hits, args.out)

def run_asynchronously(args):
    asyncio.run(run(args))

parser.set_defaults(func=run_asynchronously)
