import threading
from cachetools import TTLCache


class BaseManager:
    """Keeps live instances keyed by id; idle instances expire after ``ttl`` seconds."""

    def __init__(self, instance_factory, maxsize: int, ttl: int):
        self.instance_factory = instance_factory
        self._instances = TTLCache(maxsize=maxsize, ttl=ttl)
        self._lock = threading.Lock()

    def get(self, instance_id: str):
        with self._lock:
            instance = self._instances.get(instance_id)
            if instance is not None:
                # Touch so active visitors do not expire
                self._instances[instance_id] = instance
            return instance

    def create(self, instance_id: str):
        instance = self.instance_factory()
        with self._lock:
            self._instances[instance_id] = instance
        return instance

    def remove(self, instance_id: str):
        with self._lock:
            self._instances.pop(instance_id, None)

    def __len__(self):
        with self._lock:
            return len(self._instances)
