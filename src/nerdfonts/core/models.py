"""Core data models for the Nerd Font installer."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FontEntry:
    """One catalog record describing a single font family."""

    name: str
    asset_name: str
    description: str
    variants: tuple[str, ...]
    size_mb: float  # approximate, display only

    def __str__(self) -> str:
        return f"{self.name} ({self.size_mb:.1f} MB)"


@dataclass
class FontInstallResult:
    """Outcome of installing a single font."""

    font: FontEntry
    success: bool
    installed_files: list[Path] = field(default_factory=list)
    install_dir: Path | None = None
    error: str | None = None

    @property
    def file_count(self) -> int:
        """Number of font files written."""
        return len(self.installed_files)


@dataclass
class InstallReport:
    """Aggregated results of one install run."""

    results: list[FontInstallResult] = field(default_factory=list)

    def add(self, result: FontInstallResult) -> None:
        self.results.append(result)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total == 0:
            return 100.0
        return (self.succeeded / self.total) * 100.0

    def failed_results(self) -> list[FontInstallResult]:
        """Get results of fonts that failed to install."""
        return [r for r in self.results if not r.success]

    def summary(self) -> str:
        return f"{self.succeeded}/{self.total} succeeded"
