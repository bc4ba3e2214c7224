from pymultimap.errors import EmptyValuesError, MalformedPairError
from pymultimap.multi_value_map import LinkedMultiValueMap, MultiValueMap, SortedMultiValueMap

__all__ = [
    "EmptyValuesError",
    "LinkedMultiValueMap",
    "MalformedPairError",
    "MultiValueMap",
    "SortedMultiValueMap",
]
