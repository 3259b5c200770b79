from typing import Dict, List, Optional
from mic_upload.models.sample import SampleRecord

class SampleRegistry:
    """In-memory record of handled sample submissions"""

    def __init__(self):
        self._samples: Dict[str, SampleRecord] = {}

    def store_sample(self, identifier: str, record: SampleRecord, max_samples: Optional[int] = None) -> None:
        """Store a sample record, replacing any record with the same identifier.

        Past ``max_samples`` records the least recently stored ones are evicted.
        """
        self._samples.pop(identifier, None)
        self._samples[identifier] = record

        if max_samples is not None:
            while len(self._samples) > max_samples:
                del self._samples[next(iter(self._samples))]

    def get_sample(self, identifier: str) -> Optional[SampleRecord]:
        """Get sample record by identifier"""
        return self._samples.get(identifier)

    def list_samples(self) -> List[SampleRecord]:
        """List sample records, newest first"""
        return sorted(self._samples.values(), key=lambda record: record.createdAt, reverse=True)

    def get_storage_stats(self) -> Dict[str, int]:
        """Get storage statistics"""
        return {
            "sample_count": len(self._samples),
            "stored_file_count": sum(1 for record in self._samples.values() if record.sample),
        }

    def clear_all(self) -> None:
        """Clear all records"""
        self._samples.clear()

# Global registry instance
registry = SampleRegistry()

def get_registry() -> SampleRegistry:
    """Get the global registry instance"""
    return registry
