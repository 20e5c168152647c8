import logging
import sys
from typing import Sequence, Union

from genomatch.cli import program, related, search # subcommands register themselves on import
from genomatch.engine.exceptions.matching import GenomeMatchingException, InvalidGenomeSequenceException

logger = logging.getLogger(__name__)

def run(argv: Union[Sequence[str], None] = None):
    args = program.root_parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    try:
        args.func(args)
    except (GenomeMatchingException, InvalidGenomeSequenceException) as e:
        logger.error(e)
        sys.exit(1)


if __name__ == "__main__":
    run()
