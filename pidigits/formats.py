import json
from typing import Dict, Iterable, List, Tuple

from .extractor import DigitWindow


_FIELDS = ["position", "digits", "largest_prime", "terms", "primes", "mode", "word_bits"]


def window_record(window: DigitWindow) -> Dict:
    return {
        "position": window.position,
        "digits": window.text,
        "largest_prime": window.largest_prime,
        "terms": window.terms,
        "primes": window.primes,
        "mode": window.mode,
        "word_bits": window.word_bits,
    }


def serialize_windows(windows: Iterable[DigitWindow], fmt: str) -> Tuple[bytes, str]:
    fmt = (fmt or "txt").lower().strip()
    records: List[Dict] = [window_record(w) for w in windows]
    if fmt == "txt":
        out = "".join(f"{r['position']}: {r['digits']}\n" for r in records)
        return out.encode("utf-8"), "text/plain"
    if fmt == "json":
        return (
            json.dumps(records, ensure_ascii=False, separators=(",", ":")).encode("utf-8"),
            "application/json",
        )
    if fmt in {"csv", "tsv"}:
        sep = "," if fmt == "csv" else "\t"
        lines = [sep.join(_FIELDS)]
        for r in records:
            lines.append(sep.join(str(r[f]) for f in _FIELDS))
        mime = "text/csv" if fmt == "csv" else "text/tab-separated-values"
        return ("\n".join(lines) + "\n").encode("utf-8"), mime
    if fmt == "ndjson":
        out = "".join(json.dumps(r, ensure_ascii=False, separators=(",", ":")) + "\n" for r in records)
        return out.encode("utf-8"), "application/x-ndjson"
    raise ValueError("unsupported format")
