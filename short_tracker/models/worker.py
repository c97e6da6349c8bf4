# models/worker.py
class Worker:
    def __init__(self, id, name):
        self.id = id          # int, allocated by data_manager
        self.name = name      # trimmed, non-empty

    def __eq__(self, other):
        if not isinstance(other, Worker):
            return NotImplemented
        return self.id == other.id and self.name == other.name

    def __repr__(self):
        return f"Worker(id={self.id!r}, name={self.name!r})"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
        }

    @staticmethod
    def from_dict(data):
        return Worker(int(data['id']), str(data['name']).strip())
