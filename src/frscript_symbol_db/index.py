import hashlib
import logging
import re
from dataclasses import dataclass

from .extractor import SymbolExtractor
from .models import SymbolInfo

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    content_hash: str
    symbols: list[SymbolInfo]


@dataclass
class SymbolMatch:
    document_id: str
    symbol: SymbolInfo


class WorkspaceIndex:
    """Per-document symbol cache owned by the caller.

    Entries are dropped wholesale on ``invalidate``; a lookup with changed
    text also re-extracts, so stale symbols are never returned.
    """

    def __init__(self, extractor: SymbolExtractor | None = None):
        self.extractor = extractor or SymbolExtractor()
        self._entries: dict[str, _Entry] = {}

    def get_symbols(self, document_id: str, source: str) -> list[SymbolInfo]:
        content_hash = hashlib.md5(source.encode("utf-8")).hexdigest()
        entry = self._entries.get(document_id)
        if entry is not None and entry.content_hash == content_hash:
            return entry.symbols

        symbols = self.extractor.extract_all(source)
        self._entries[document_id] = _Entry(content_hash=content_hash, symbols=symbols)
        logger.debug("indexed %s: %d symbols", document_id, len(symbols))
        return symbols

    def invalidate(self, document_id: str) -> None:
        """Forget a document after an edit or a deletion"""
        self._entries.pop(document_id, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, document_id: str) -> bool:
        return document_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def search(self, query: str) -> list[SymbolMatch]:
        """Find indexed symbols whose name matches ``query``"""
        results = []
        for document_id, entry in self._entries.items():
            for symbol in entry.symbols:
                if matches_query(symbol.name, query):
                    results.append(SymbolMatch(document_id=document_id, symbol=symbol))
        return results


def matches_query(name: str, query: str) -> bool:
    """Exact, prefix, substring, then in-order subsequence match (case-insensitive).

    ``gUD`` matches ``getUserData``.
    """
    if not query:
        return True

    lower_name = name.lower()
    lower_query = query.lower()
    if lower_name == lower_query or lower_name.startswith(lower_query) or lower_query in lower_name:
        return True

    pattern = ".*".join(re.escape(ch) for ch in query)
    return re.search(pattern, name, re.IGNORECASE) is not None
