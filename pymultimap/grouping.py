from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pymultimap.errors import MalformedPairError
from pymultimap.multi_value_map import LinkedMultiValueMap, MultiValueMap, SortedMultiValueMap

logger = logging.getLogger(__name__)


@dataclass
class GroupingConfigurations:
    separator: str = "="
    values_separator: str = ","
    sorted_keys: bool = False
    first_only: bool = False
    strip: bool = True


def parse_pair(line: str, separator: str = "=", strip: bool = True) -> tuple[str, str]:
    key, found, value = line.partition(separator)
    if not found:
        raise MalformedPairError(line, separator)
    if strip:
        return key.strip(), value.strip()
    return key, value


def group_lines(
    lines: Iterable[str], configurations: GroupingConfigurations | None = None
) -> MultiValueMap[str, str]:
    configurations = configurations or GroupingConfigurations()

    values_map: LinkedMultiValueMap[str, str]
    if configurations.sorted_keys:
        values_map = SortedMultiValueMap()
    else:
        values_map = LinkedMultiValueMap()

    for line_number, line in enumerate(lines, start=1):
        pair = line.rstrip("\r\n")
        if not pair.strip():
            continue
        key, value = parse_pair(pair, configurations.separator, configurations.strip)
        logger.debug("line %d: adding %r to %r", line_number, value, key)
        values_map.add(key, value)

    logger.debug("grouped %d keys", len(values_map))
    return values_map


def render(values_map: MultiValueMap[str, str], configurations: GroupingConfigurations | None = None) -> list[str]:
    configurations = configurations or GroupingConfigurations()

    if configurations.first_only:
        return [
            f"{key}{configurations.separator}{value}" for key, value in values_map.to_single_value_map().items()
        ]
    return [
        f"{key}{configurations.separator}{configurations.values_separator.join(values)}"
        for key, values in values_map.items()
    ]
