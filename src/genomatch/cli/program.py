import argparse

root_parser = argparse.ArgumentParser(
    prog="genomatch",
    description="Locate DNA fragments across a collection of genomes and rank genomes related to a query genome."
)
root_parser.add_argument(
    "--verbose", "-v",
    action="store_true",
    dest="verbose",
    required=False,
    default=False,
    help="Log the details of indexing and matching."
)
subparsers = root_parser.add_subparsers(required=True)

def add_library_arguments(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--fasta", "-fa", "-fst",
        nargs="+",
        action='extend',
        dest="fastas",
        required=True,
        default=[],
        type=str,
        help="The FASTA files holding the genomes to index. Multiple can be listed."
    )
    parser.add_argument(
        "--minimum-search-length", "-msl",
        dest="minimum_search_length",
        required=False,
        default=10,
        type=int,
        help="The length of the genome fragments stored in the index. Queries cannot match anything shorter."
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        dest="exact",
        required=False,
        default=False,
        help="Only accept exact matches instead of tolerating a single substituted base."
    )
