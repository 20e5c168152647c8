from typing import Union


class GenomeMatchingException(Exception):
    pass

class FragmentTooShortException(GenomeMatchingException, ValueError):
    def __init__(self, fragment_length: int, minimum_length: int, *args):
        self.fragment_length = fragment_length
        self.minimum_length = minimum_length
        super().__init__(f"The fragment is {fragment_length} symbols long, which is shorter than the requested minimum match length of {minimum_length}.", *args)

class MinimumLengthTooShortException(GenomeMatchingException, ValueError):
    def __init__(self, requested_length: int, minimum_search_length: int, *args):
        self.requested_length = requested_length
        self.minimum_search_length = minimum_search_length
        super().__init__(f"A match length of {requested_length} was requested, but the index was built with a minimum search length of {minimum_search_length}.", *args)

class NoGenomeMatchesException(GenomeMatchingException):
    def __init__(self, fragment: str, *args):
        self.fragment = fragment
        super().__init__(f"No indexed genome contains the fragment \"{fragment}\".", *args)

class NoRelatedGenomesException(GenomeMatchingException):
    def __init__(self, query_name: str, match_percent_threshold: Union[float, None] = None, *args):
        self.query_name = query_name
        self.match_percent_threshold = match_percent_threshold
        if match_percent_threshold is None:
            super().__init__(f"No indexed genome is related to \"{query_name}\".", *args)
        else:
            super().__init__(f"No indexed genome is at least {match_percent_threshold}% related to \"{query_name}\".", *args)

class GenomeExtractionOverrunException(IndexError):
    def __init__(self, genome_name: str, position: int, length: int, genome_length: int, *args):
        self.genome_name = genome_name
        self.position = position
        self.length = length
        self.genome_length = genome_length
        super().__init__(f"Cannot extract {length} symbols at position {position} from \"{genome_name}\" ({genome_length} symbols long).", *args)

class InvalidGenomeSequenceException(ValueError):
    def __init__(self, genome_name: str, reason: str, *args):
        self.genome_name = genome_name
        super().__init__(f"The sequence of \"{genome_name}\" is invalid: {reason}", *args)
