from typing import Any


class EmptyValuesError(IndexError):
    def __init__(self, key: Any) -> None:  # noqa: ANN401
        super().__init__(f"no values stored for key {key!r}")
        self.key = key


class MalformedPairError(ValueError):
    def __init__(self, line: str, separator: str) -> None:
        super().__init__(f"missing separator {separator!r} in line {line!r}")
        self.line = line
        self.separator = separator
