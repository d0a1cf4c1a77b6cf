"""Configuration classes for disjointpaths components."""

from dataclasses import dataclass


@dataclass
class EnumerationConfig:
    """Configuration for the all-pairs enumeration."""

    # Pairs evaluated between DEBUG progress messages; 0 disables them
    progress_interval: int = 1000

    # Stop once the best count reaches the largest out-arc count of any vertex
    stop_at_upper_bound: bool = True

    def should_report(self, evaluated: int) -> bool:
        """Return True when a progress message is due after ``evaluated`` pairs."""
        if self.progress_interval <= 0:
            return False
        return evaluated % self.progress_interval == 0


# Global configuration instance
ENUMERATION_CONFIG = EnumerationConfig()
