from dataclasses import dataclass


@dataclass(frozen=True)
class SearchQuery:
    destination: str = ""
    check_in: str = ""
    check_out: str = ""
    guests: int = 1
