from typing import List


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def normalize_tag_names(v: str | List[str] | None) -> List[str]:
    """
    Split, trim and lowercase tag input; drop blanks and keep first-seen order.
    Accepts "Funny, cat" as well as ["Funny", "cat"] or ["Funny,cat"].
    """
    raw = list(v) if isinstance(v, (list, tuple)) else [v] if v else []
    out: List[str] = []
    for chunk in raw:
        for name in csv_to_list(chunk):
            norm = name.lower()
            if norm not in out:
                out.append(norm)
    return out
