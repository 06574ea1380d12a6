"""Configuration classes for subsetgen consumers."""

from dataclasses import dataclass


@dataclass
class EnumerationConfig:
    """Limits and progress reporting for exhaustive subset searches.

    The generator itself is unbounded; these knobs only apply to the bundled
    problem solvers and the CLI.
    """

    # Item count above which a warning about 2^N runtime is logged
    warn_items: int = 20

    # Item count above which solvers refuse to run
    max_items: int = 30

    # Emit a debug progress line every this many subsets (0 disables)
    progress_interval: int = 65536

    def check_items(self, n: int) -> bool:
        """Validate an item count against the configured limits.

        Returns:
            True if ``n`` exceeds ``warn_items`` and a warning is due.

        Raises:
            ValueError: If ``n`` exceeds ``max_items``.
        """
        if n > self.max_items:
            raise ValueError(
                f"Refusing to enumerate 2^{n} subsets (max_items={self.max_items})"
            )
        return n > self.warn_items

    def should_report(self, examined: int) -> bool:
        """Return True when ``examined`` hits a progress reporting boundary."""
        return self.progress_interval > 0 and examined % self.progress_interval == 0


# Global configuration instance
ENUMERATION_CONFIG = EnumerationConfig()
