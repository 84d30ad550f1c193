"""
# jsubst: matches.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Match records, the description of a regex match handed to replacement functions.
"""

import re
from typing import Any, NamedTuple, Optional

from jsubst.utilities import none_to_empty_string


class MatchRecord(NamedTuple):
    """
    A single regex match.

    - `match`: the matched substring
    - `index`: the offset of the match within the string searched
    - `groups`: the captured groups in order, with None for groups that did not participate
    """
    match: str
    index: int
    groups: tuple[Optional[str], ...]

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to the JSON object form `{"match": ..., "index": ..., "groups": [...]}`.

        Groups that did not participate become empty strings,
        since JSON has no undefined.
        """
        return {
            'match': self.match,
            'index': self.index,
            'groups': [none_to_empty_string(group) for group in self.groups],
        }


def build_match_record(match: re.Match) -> MatchRecord:
    return MatchRecord(
        match=match.group(),
        index=match.start(),
        groups=match.groups(),
    )
