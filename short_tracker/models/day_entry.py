# models/day_entry.py
class DayEntry:
    def __init__(self, unrecorded=0.0, short=0.0, attendance=None):
        self.unrecorded = unrecorded           # unrecorded amount
        self.short = short                     # short amount
        self.attendance = list(attendance or [])  # worker ids present that day

    def __eq__(self, other):
        if not isinstance(other, DayEntry):
            return NotImplemented
        return (self.unrecorded, self.short, self.attendance) == \
            (other.unrecorded, other.short, other.attendance)

    def __repr__(self):
        return (f"DayEntry(unrecorded={self.unrecorded!r}, short={self.short!r}, "
                f"attendance={self.attendance!r})")

    def to_dict(self):
        return {
            'unrecorded': self.unrecorded,
            'short': self.short,
            'attendance': self.attendance,
        }

    @staticmethod
    def from_dict(data):
        return DayEntry(
            unrecorded=data['unrecorded'],
            short=data['short'],
            attendance=data['attendance'],
        )
