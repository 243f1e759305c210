"""Extension allow-list for candidate image URLs."""

import re
from typing import Iterable, List


class ExtensionFilter:
    """Keeps URLs that end in `.<ext>` for one of the configured extensions.

    Each extension is used as a regex fragment, so `jpe?g` works and matching
    is case-sensitive unless the pattern itself says otherwise.
    """

    def __init__(self, allowed_extensions: Iterable[str]):
        self.allowed_extensions = list(allowed_extensions)
        self._patterns = [re.compile(rf"^.+\.{ext}\Z") for ext in self.allowed_extensions]

    def is_eligible(self, url: str) -> bool:
        return any(p.match(url) for p in self._patterns)

    def filter(self, urls: Iterable[str]) -> List[str]:
        return [url for url in urls if self.is_eligible(url)]
