from collections import Counter
from typing import Iterable

import attrs

from src.service.registration.domain.enum.attendance_status import AttendanceStatus


@attrs.frozen
class AttendanceStats:
    """
    Per-event attendance counters.

    `registered` rows count toward `total` only. No paid/revenue aggregation is computed.
    """

    total: int = 0
    confirmed: int = 0
    attended: int = 0
    cancelled: int = 0
    no_show: int = 0

    @classmethod
    def from_statuses(cls, statuses: Iterable[AttendanceStatus]) -> 'AttendanceStats':
        counts = Counter(statuses)
        return cls(
            total=sum(counts.values()),
            confirmed=counts[AttendanceStatus.CONFIRMED],
            attended=counts[AttendanceStatus.ATTENDED],
            cancelled=counts[AttendanceStatus.CANCELLED],
            no_show=counts[AttendanceStatus.NO_SHOW],
        )
