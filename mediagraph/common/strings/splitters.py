# mediagraph/common/strings/splitters.py
from typing import Iterable, List


def csv_to_list(v: str | Iterable[str] | None) -> List[str]:
    """Split a comma separated env value (or clean up a list) into stripped, non-empty items."""
    if v is None:
        return []
    if isinstance(v, str):
        return [s.strip() for s in v.split(",") if s.strip()]
    return [str(s).strip() for s in v if s is not None and str(s).strip()]
