"""TokenStatus Value Object."""

from typing import NamedTuple


class TokenStatus(NamedTuple):
    """check_validity 결과.

    (False, True) 조합은 만들어지지 않습니다.
    """

    well_formed: bool
    unexpired: bool
