# src/seo_auditor/report.py
import threading
from typing import Dict, Iterable, Iterator, List, Set, Tuple


class AuditReport:
    """
    Warnings of one batch, keyed by page URL.

    Pages without warnings never get an entry, so a missing URL means
    "no warnings". Entries keep the order in which pages were recorded.
    """

    def __init__(self):
        self._warnings: Dict[str, Set[str]] = {}
        self._lock = threading.Lock()

    def record(self, url: str, warnings: Iterable[str]) -> None:
        """Stores the warnings for `url`, replacing an earlier entry. Empty input is ignored."""
        warning_set = set(warnings)
        if not warning_set:
            return
        with self._lock:
            self._warnings[url] = warning_set

    def reset(self) -> None:
        with self._lock:
            self._warnings = {}

    def is_empty(self) -> bool:
        return not self._warnings

    def __len__(self) -> int:
        return len(self._warnings)

    def __contains__(self, url: object) -> bool:
        return url in self._warnings

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._warnings))

    def get(self, url: str) -> Set[str]:
        return set(self._warnings.get(url, ()))

    def items(self) -> List[Tuple[str, Set[str]]]:
        return [(url, set(warnings)) for url, warnings in self._warnings.items()]

    def as_dict(self) -> Dict[str, Set[str]]:
        """Copy of the report as URL -> warning set."""
        return dict(self.items())

    def snapshot(self) -> "AuditReport":
        """Independent copy; later `record`/`reset` calls on this report do not touch it."""
        copy = AuditReport()
        with self._lock:
            copy._warnings = {url: set(warnings) for url, warnings in self._warnings.items()}
        return copy
