"""Time source used by all date arithmetic in the domain"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta


class Clock(ABC):
    """Provides the current moment"""

    @abstractmethod
    def now(self) -> datetime:
        pass

    def today(self) -> date:
        return self.now().date()

    def tomorrow(self) -> date:
        return self.today() + timedelta(days=1)


class SystemClock(Clock):
    """Wall clock (UTC, naive datetimes as stored in the database)"""

    def now(self) -> datetime:
        return datetime.utcnow()


class FixedClock(Clock):
    """Clock frozen at a given moment"""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment
